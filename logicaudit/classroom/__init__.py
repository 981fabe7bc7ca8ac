"""
Logic Auditor Classroom - Runtime components for loading and navigating scenarios.

This module provides:
- ScenarioDataset: Read-only scenario access
- CooperativeScheduler: Delayed callbacks for the simulated audit
- Navigator: Scenario sequencing and audit reveal
"""

from .dataset import (
    ScenarioDataset,
    load_scenarios,
    DEFAULT_SCENARIOS_PATH,
)

from .scheduler import (
    CooperativeScheduler,
    ScheduledTask,
)

from .navigator import (
    Navigator,
    AUDIT_DELAY_MS,
)

__all__ = [
    # Dataset
    "ScenarioDataset",
    "load_scenarios",
    "DEFAULT_SCENARIOS_PATH",
    # Scheduler
    "CooperativeScheduler",
    "ScheduledTask",
    # Navigator
    "Navigator",
    "AUDIT_DELAY_MS",
]
