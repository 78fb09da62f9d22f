"""SentinelAI - lens-based code analysis dashboard"""
import os
import sys
from pathlib import Path
from typing import Optional

import streamlit as st

APP_DIR = Path(__file__).parent
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

from sentinel_ai.client import AnalysisClient, SourceFile
from sentinel_ai.config import DEFAULT_ENDPOINT, ENDPOINT_ENV, load_settings
from sentinel_ai.errors import MissingFileError, NetworkFailure
from sentinel_ai.logger_config import setup_logger
from sentinel_ai.report import build_lens_report, build_reports
from sentinel_ai.state import (
    AnalysisFailed,
    AnalysisStarted,
    AnalysisSucceeded,
    DashboardState,
    FileSelected,
    LensSelected,
    next_submission_id,
    transition,
)
from ui_components import (
    render_hero,
    render_issues_panel,
    render_lens_buttons,
    render_lens_overview,
    render_score_panel,
)

st.set_page_config(
    page_title="SentinelAI",
    page_icon="🛡️",
    layout="wide"
)

STATE_KEY = "dashboard_state"


def get_endpoint() -> str:
    """
    Analysis backend URL.

    Priority order:
    1. st.secrets["SENTINEL_ENDPOINT"]
    2. os.environ["SENTINEL_ENDPOINT"]
    3. DEFAULT_ENDPOINT
    """
    try:
        if ENDPOINT_ENV in st.secrets:
            return st.secrets[ENDPOINT_ENV]
    except FileNotFoundError:
        pass
    return os.environ.get(ENDPOINT_ENV) or DEFAULT_ENDPOINT


def get_state() -> DashboardState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DashboardState()
    return st.session_state[STATE_KEY]


def dispatch(event) -> DashboardState:
    state = transition(get_state(), event)
    st.session_state[STATE_KEY] = state
    return state


def run_analysis(uploaded, endpoint: str) -> Optional[str]:
    """
    Submit the uploaded file.

    Returns the missing-file notice when nothing is selected. Network failures
    are recorded on the dashboard state instead.
    """
    if uploaded is None:
        return str(MissingFileError())

    submission_id = next_submission_id(get_state())
    dispatch(AnalysisStarted(submission_id))

    settings = load_settings()
    client = AnalysisClient(endpoint=endpoint, settings=settings)
    try:
        with st.spinner("ANALYZING..."):
            result = client.analyze(SourceFile(name=uploaded.name, content=uploaded.getvalue()))
    except NetworkFailure as e:
        dispatch(AnalysisFailed(submission_id, str(e)))
        return None

    dispatch(AnalysisSucceeded(submission_id, result))
    return None


def render_upload_and_score(endpoint: str):
    left, right = st.columns(2)

    with left:
        uploaded = st.file_uploader("Attach Source Code", type=["py"])
        dispatch(FileSelected(uploaded.name if uploaded is not None else None))

        if st.button("ANALYZE", type="primary", width="stretch"):
            notice = run_analysis(uploaded, endpoint)
            if notice:
                st.error(notice)

        state = get_state()
        if state.error:
            st.error(state.error)

    with right:
        render_score_panel(state.score, loading=state.loading)


def render_lenses():
    state = get_state()
    clicked = render_lens_buttons(state.active_lens)
    if clicked is not None:
        state = dispatch(LensSelected(clicked))

    if state.active_lens is not None:
        render_issues_panel(build_lens_report(state.active_lens, state.result))


def render_overview():
    state = get_state()
    if state.score is None and not state.issues:
        return
    with st.expander("Lens overview"):
        render_lens_overview(build_reports(state.result))
        st.markdown("**Raw issues from the backend:**")
        st.json(list(state.issues))


def main():
    setup_logger(level=load_settings().log_level)
    endpoint = get_endpoint()

    render_hero()

    st.sidebar.header("Backend")
    st.sidebar.markdown(f"**Endpoint:** `{endpoint}`")
    st.sidebar.caption("Override with the SENTINEL_ENDPOINT secret or environment variable.")

    render_upload_and_score(endpoint)
    st.markdown("---")
    render_lenses()
    render_overview()


if __name__ == "__main__":
    main()
