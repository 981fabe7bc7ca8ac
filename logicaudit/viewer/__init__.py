"""
Logic Auditor Viewer - Presentation for the audit page.

This module provides:
- Presenter interface and the panel view model
- HTML rendering for problem, placeholder and result panels
"""

from .presenter import (
    Presenter,
    PanelPresenter,
    PanelView,
    AUDIT_BUTTON_READY,
    AUDIT_BUTTON_BUSY,
    AUDIT_BUTTON_DONE,
    PLACEHOLDER_WAITING,
    PLACEHOLDER_PROCESSING,
    CYCLE_COMPLETE_MESSAGE,
)

from .scenario import (
    get_audit_css,
    render_code_block,
    render_problem_panel,
    render_placeholder,
    render_result_panel,
)

__all__ = [
    # Presenter
    "Presenter",
    "PanelPresenter",
    "PanelView",
    "AUDIT_BUTTON_READY",
    "AUDIT_BUTTON_BUSY",
    "AUDIT_BUTTON_DONE",
    "PLACEHOLDER_WAITING",
    "PLACEHOLDER_PROCESSING",
    "CYCLE_COMPLETE_MESSAGE",
    # Rendering
    "get_audit_css",
    "render_code_block",
    "render_problem_panel",
    "render_placeholder",
    "render_result_panel",
]
