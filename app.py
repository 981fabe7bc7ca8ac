"""
Logic Auditor - Code Review Flashcards

Streamlit application that walks through flawed code snippets and reveals
a critique, corrected code and reasoning after a short simulated audit.

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st

from logicaudit.classroom import (
    CooperativeScheduler,
    Navigator,
    load_scenarios,
)
from logicaudit.config import load_settings
from logicaudit.errors import DatasetError
from logicaudit.schemas import AuditPhase
from logicaudit.viewer import (
    PanelPresenter,
    get_audit_css,
    render_problem_panel,
    render_placeholder,
    render_result_panel,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title=settings.page_title,
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "dataset" not in st.session_state:
        try:
            st.session_state.dataset = load_scenarios(settings.scenarios_path)
            st.session_state.load_error = None
        except (FileNotFoundError, DatasetError) as e:
            logger.error(f"Could not load scenarios: {e}")
            st.session_state.dataset = None
            st.session_state.load_error = str(e)

    if not st.session_state.dataset:
        return

    if "presenter" not in st.session_state:
        st.session_state.presenter = PanelPresenter()

    if "scheduler" not in st.session_state:
        st.session_state.scheduler = CooperativeScheduler()

    if "navigator" not in st.session_state:
        st.session_state.navigator = Navigator(
            st.session_state.dataset,
            st.session_state.presenter,
            st.session_state.scheduler,
        )
        st.session_state.navigator.start()


# -----------------------------------------------------------------------------
# Sidebar: Scenario List
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with position and scenario list."""
    st.sidebar.title("🔍 Logic Auditor")

    nav = st.session_state.navigator
    current, total = nav.get_position()

    st.sidebar.markdown(f"**Scenario:** {current}/{total}")
    st.sidebar.progress(current / total)

    st.sidebar.divider()
    st.sidebar.subheader("Scenarios")

    for idx, category in enumerate(st.session_state.dataset.categories()):
        indicator = "→" if idx == nav.state.cursor else "○"
        st.sidebar.markdown(f"{indicator} {idx + 1}. {category}")


# -----------------------------------------------------------------------------
# Main Content: Audit View
# -----------------------------------------------------------------------------

def render_audit_view():
    """Render the problem pane and the audit result pane."""
    nav = st.session_state.navigator
    view = st.session_state.presenter.view

    st.markdown(get_audit_css(), unsafe_allow_html=True)

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Problem")
        st.markdown(
            render_problem_panel(view.record, nav.get_position()),
            unsafe_allow_html=True,
        )
        if st.button(
            view.audit_label,
            key="btn_audit",
            disabled=view.audit_disabled,
            type="primary",
            use_container_width=True,
        ):
            nav.run_audit()
            st.rerun()

    with col2:
        st.subheader("Audit Report")
        if view.placeholder_visible:
            st.markdown(render_placeholder(view), unsafe_allow_html=True)
        if view.result_visible:
            st.markdown(render_result_panel(view.record), unsafe_allow_html=True)
        if view.nav_visible:
            if st.button("Next Scenario →", key="btn_next", use_container_width=True):
                nav.advance()
                st.rerun()


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()

    if not st.session_state.dataset:
        st.error(f"Scenarios could not be loaded: {st.session_state.load_error}")
        return

    scheduler = st.session_state.scheduler
    presenter = st.session_state.presenter

    # A reveal may have come due while the page was waiting for input
    scheduler.run_pending()

    notice = presenter.pop_notice()
    if notice:
        st.toast(notice)

    render_sidebar()
    render_audit_view()

    # Keep "Processing..." on screen for the audit delay, then redraw
    if st.session_state.navigator.phase == AuditPhase.ANALYZING:
        scheduler.wait_and_run()
        st.rerun()


if __name__ == "__main__":
    main()
