"""
Presenter - Display sink driven by the Navigator.

Provides:
- Presenter interface with the four notification calls
- PanelPresenter keeping a render-ready view of the page panels
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from logicaudit.schemas import ScenarioRecord


AUDIT_BUTTON_READY = "Run Logic Audit ➜"
AUDIT_BUTTON_BUSY = "Analyzing..."
AUDIT_BUTTON_DONE = "Audit Complete ✓"

PLACEHOLDER_WAITING = "Waiting for audit..."
PLACEHOLDER_PROCESSING = "Processing..."

CYCLE_COMPLETE_MESSAGE = "Simulation Complete! You have audited all scenarios."


class Presenter(ABC):
    """Receives navigation and audit notifications in invocation order."""

    @abstractmethod
    def show_problem(self, record: ScenarioRecord):
        """Show the prompt and flawed code; hide result and navigation."""

    @abstractmethod
    def show_analyzing(self):
        """Show the in-progress indicator and disable the audit control."""

    @abstractmethod
    def show_result(self, record: ScenarioRecord):
        """Show critique, corrected code, reasoning and navigation."""

    @abstractmethod
    def notify_cycle_complete(self):
        """Acknowledge that every scenario has been visited."""


@dataclass
class PanelView:
    """Visible state of the page panels."""
    record: Optional[ScenarioRecord] = None
    placeholder_visible: bool = True
    placeholder_text: str = PLACEHOLDER_WAITING
    processing: bool = False
    result_visible: bool = False
    nav_visible: bool = False
    audit_label: str = AUDIT_BUTTON_READY
    audit_disabled: bool = False


class PanelPresenter(Presenter):
    """
    Presenter backed by a PanelView.

    The page renders whatever the view says; the presenter never reads
    navigator state. The cycle-complete notice is one-shot: it is held
    until pop_notice() hands it out.
    """

    def __init__(self):
        self.view = PanelView()
        self._notice: Optional[str] = None

    def show_problem(self, record: ScenarioRecord):
        self.view = PanelView(record=record)

    def show_analyzing(self):
        self.view.placeholder_text = PLACEHOLDER_PROCESSING
        self.view.processing = True
        self.view.audit_label = AUDIT_BUTTON_BUSY
        self.view.audit_disabled = True

    def show_result(self, record: ScenarioRecord):
        self.view.record = record
        self.view.placeholder_visible = False
        self.view.processing = False
        self.view.result_visible = True
        self.view.nav_visible = True
        self.view.audit_label = AUDIT_BUTTON_DONE
        self.view.audit_disabled = True

    def notify_cycle_complete(self):
        self._notice = CYCLE_COMPLETE_MESSAGE

    def pop_notice(self) -> Optional[str]:
        """Return the pending notice once, then clear it."""
        notice, self._notice = self._notice, None
        return notice
