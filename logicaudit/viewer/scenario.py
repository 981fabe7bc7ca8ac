"""
Scenario renderer - HTML panels for the audit page.

Provides:
- Problem panel (counter, category badge, prompt)
- Code blocks for flawed and corrected snippets
- Placeholder and result panels
"""

import html

from logicaudit.schemas import ScenarioRecord

from .presenter import PanelView


def get_audit_css() -> str:
    """Get CSS styles for the audit panels."""
    return """
    <style>
    .audit-counter {
        font-size: 0.9em;
        color: #888;
        margin-bottom: 0.5em;
    }
    .audit-badge {
        display: inline-block;
        background: #e3f2fd;
        color: #1565C0;
        border-radius: 12px;
        padding: 0.2em 0.8em;
        font-size: 0.85em;
        font-weight: 600;
        margin-bottom: 0.8em;
    }
    .audit-prompt {
        font-size: 1.1em;
        color: #333;
        line-height: 1.6;
        margin-bottom: 1em;
    }
    .audit-code {
        background: #263238;
        color: #eceff1;
        border-radius: 8px;
        padding: 1em;
        font-family: "Fira Code", monospace;
        font-size: 0.9em;
        white-space: pre;
        overflow-x: auto;
        border-left: 4px solid #999;
    }
    .audit-code-bad {
        border-left-color: #d32f2f;
    }
    .audit-code-good {
        border-left-color: #388E3C;
    }
    .audit-placeholder {
        color: #999;
        text-align: center;
        padding: 3em 1em;
        border: 2px dashed #e0e0e0;
        border-radius: 12px;
    }
    .audit-loader {
        color: #1976D2;
        font-weight: 600;
    }
    .audit-section-label {
        font-weight: 600;
        color: #555;
        margin: 1em 0 0.4em 0;
    }
    .audit-critique {
        background: #ffebee;
        color: #b71c1c;
        padding: 0.8em 1em;
        border-radius: 8px;
        line-height: 1.5;
    }
    .audit-reasoning {
        background: #e8f5e9;
        color: #1b5e20;
        padding: 0.8em 1em;
        border-radius: 8px;
        line-height: 1.5;
    }
    </style>
    """


def render_code_block(code: str, variant: str = "bad") -> str:
    """Render a code snippet verbatim. variant is "bad" or "good"."""
    return f'<pre class="audit-code audit-code-{variant}">{html.escape(code)}</pre>'


def render_problem_panel(record: ScenarioRecord, position: tuple[int, int]) -> str:
    """
    Render the left-hand problem panel.

    Args:
        record: Scenario to show
        position: (current, total), 1-based

    Returns:
        HTML string for the panel
    """
    current, total = position
    parts = [f'<div class="audit-counter">{current} / {total}</div>']
    parts.append(f'<div class="audit-badge">{html.escape(record.category)}</div>')
    parts.append(f'<div class="audit-prompt">{html.escape(record.prompt)}</div>')
    parts.append(render_code_block(record.bad_code, "bad"))
    return ''.join(parts)


def render_placeholder(view: PanelView) -> str:
    """Render the idle or processing placeholder."""
    if view.processing:
        inner = f'<div class="audit-loader">{html.escape(view.placeholder_text)}</div>'
    else:
        inner = f'<p>{html.escape(view.placeholder_text)}</p>'
    return f'<div class="audit-placeholder">{inner}</div>'


def render_result_panel(record: ScenarioRecord) -> str:
    """Render critique, corrected code and reasoning."""
    parts = ['<div class="audit-report">']
    parts.append('<div class="audit-section-label">Critique</div>')
    parts.append(f'<div class="audit-critique">{html.escape(record.critique)}</div>')
    parts.append('<div class="audit-section-label">Corrected Code</div>')
    parts.append(render_code_block(record.good_code, "good"))
    parts.append('<div class="audit-section-label">Reasoning</div>')
    parts.append(f'<div class="audit-reasoning">{html.escape(record.reasoning)}</div>')
    parts.append('</div>')
    return ''.join(parts)
