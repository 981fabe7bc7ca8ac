"""
Scenario schemas for Logic Auditor.

Defines the Pydantic model for one code review flashcard:
- The flawed snippet shown up front
- The critique, corrected snippet and reasoning revealed by the audit
"""

from pydantic import BaseModel, ConfigDict, Field


class ScenarioRecord(BaseModel):
    """
    A single code review scenario.

    Records are immutable once loaded. Code fields are displayed verbatim,
    so no whitespace stripping is applied to them.
    """
    model_config = ConfigDict(frozen=True)

    id: int                              # display only, need not be unique
    category: str = Field(..., min_length=1)
    prompt: str = Field(..., min_length=1)
    bad_code: str = Field(..., min_length=1)
    critique: str = Field(..., min_length=1)
    good_code: str = Field(..., min_length=1)
    reasoning: str = Field(..., min_length=1)
