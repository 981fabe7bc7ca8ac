"""
Exceptions raised by Logic Auditor.
"""


class LogicAuditError(Exception):
    """Base class for all Logic Auditor errors."""


class DatasetError(LogicAuditError, ValueError):
    """Scenario dataset is empty or malformed."""


class ScenarioIndexError(LogicAuditError, IndexError):
    """Scenario index outside [0, N-1]."""

    def __init__(self, index: int, total: int):
        self.index = index
        self.total = total
        super().__init__(f"Scenario index {index} out of range (0..{total - 1})")
