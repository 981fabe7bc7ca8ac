"""
Audit state schemas for Logic Auditor.

Defines the navigation state owned by the Navigator:
- Cursor into the scenario dataset
- Reveal / pending flags for the simulated audit
"""

from dataclasses import dataclass
from enum import Enum


class AuditPhase(str, Enum):
    IDLE = "idle"             # problem shown, audit not started
    ANALYZING = "analyzing"   # simulated analysis delay running
    REVEALED = "revealed"     # result visible until the cursor moves


@dataclass
class NavigatorState:
    cursor: int = 0
    revealed: bool = False
    pending: bool = False

    @property
    def phase(self) -> AuditPhase:
        if self.pending:
            return AuditPhase.ANALYZING
        if self.revealed:
            return AuditPhase.REVEALED
        return AuditPhase.IDLE

    def reset(self, cursor: int):
        """Point at a new scenario and drop any audit progress."""
        self.cursor = cursor
        self.revealed = False
        self.pending = False
