"""
Logic Auditor Schemas - Models for scenarios and audit state.

This module exports:
- Scenario: the immutable flashcard record
- Audit: navigator state and audit phases
"""

from .scenario import ScenarioRecord

from .audit import (
    AuditPhase,
    NavigatorState,
)

__all__ = [
    # Scenario
    'ScenarioRecord',
    # Audit
    'AuditPhase',
    'NavigatorState',
]
