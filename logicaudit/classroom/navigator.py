"""
Navigator - Scenario sequencing and the simulated audit reveal.

Provides:
- Loading a scenario by index
- Running the timed audit with re-entrancy guarding
- Advancing with wrap-around at the end of a cycle
- Discarding reveals superseded by a newer scenario load
"""

import logging
from typing import Optional

from logicaudit.schemas import AuditPhase, NavigatorState, ScenarioRecord
from logicaudit.viewer.presenter import Presenter

from .dataset import ScenarioDataset
from .scheduler import CooperativeScheduler, ScheduledTask


logger = logging.getLogger(__name__)

# Simulated analysis latency. Fixed, not configurable.
AUDIT_DELAY_MS = 600


class Navigator:
    """
    Walk through the scenario dataset and reveal audit results.

    Owns the NavigatorState and pushes every change to a Presenter.
    All calls are expected from a single thread.
    """

    def __init__(
        self,
        dataset: ScenarioDataset,
        presenter: Presenter,
        scheduler: CooperativeScheduler,
    ):
        """
        Initialize navigator.

        Args:
            dataset: Scenarios to navigate
            presenter: Sink for display notifications
            scheduler: Queue used for the delayed reveal
        """
        self.dataset = dataset
        self.presenter = presenter
        self.scheduler = scheduler
        self.state = NavigatorState()
        # Bumped on every load; a reveal only applies to its own generation.
        self._generation = 0
        self._pending_task: Optional[ScheduledTask] = None

    @property
    def total_scenarios(self) -> int:
        """Total number of scenarios."""
        return len(self.dataset)

    @property
    def current_scenario(self) -> ScenarioRecord:
        """Scenario under the cursor."""
        return self.dataset.get(self.state.cursor)

    @property
    def phase(self) -> AuditPhase:
        return self.state.phase

    def get_position(self) -> tuple[int, int]:
        """Get position as (current, total), 1-based for display."""
        return (self.state.cursor + 1, self.total_scenarios)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def start(self):
        """Show the first scenario."""
        self.load_scenario(0)

    def load_scenario(self, index: int):
        """
        Show a scenario and reset the audit to idle.

        Any reveal still waiting from an earlier audit is dropped.

        Raises:
            ScenarioIndexError: If index is outside [0, N-1]
        """
        record = self.dataset.get(index)

        self._generation += 1
        if self._pending_task is not None:
            self._pending_task.cancel()
            self._pending_task = None

        self.state.reset(index)
        logger.debug(f"Loaded scenario {index + 1}/{self.total_scenarios}: {record.category}")
        self.presenter.show_problem(record)

    def advance(self) -> int:
        """
        Move to the next scenario, wrapping to the first after the last.

        Returns:
            New cursor position
        """
        if self.state.cursor >= self.total_scenarios - 1:
            logger.info("Cycle complete, wrapping to first scenario")
            self.presenter.notify_cycle_complete()
            self.load_scenario(0)
        else:
            self.load_scenario(self.state.cursor + 1)
        return self.state.cursor

    # -------------------------------------------------------------------------
    # Audit
    # -------------------------------------------------------------------------

    def run_audit(self) -> bool:
        """
        Start the simulated audit for the current scenario.

        Returns True if the audit was started, False if one is already
        running or the result is already revealed.
        """
        if self.state.phase != AuditPhase.IDLE:
            logger.debug(f"Ignoring audit request while {self.state.phase.value}")
            return False

        self.state.pending = True
        self.presenter.show_analyzing()

        generation = self._generation
        self._pending_task = self.scheduler.call_later(
            AUDIT_DELAY_MS / 1000,
            lambda: self._complete_audit(generation),
        )
        return True

    def _complete_audit(self, generation: int):
        """Apply a finished audit unless a newer load superseded it."""
        if generation != self._generation or not self.state.pending:
            logger.debug(f"Discarding stale audit result (generation {generation})")
            return

        self._pending_task = None
        self.state.pending = False
        self.state.revealed = True
        self.presenter.show_result(self.current_scenario)
