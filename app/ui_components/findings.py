"""Lens selection and issues panel."""
from typing import Optional

import streamlit as st

from sentinel_ai.models import Lens, LensReport
from sentinel_ai.report import NO_ISSUES_MESSAGE
from style_utils import LENS_ICONS, issue_card


def render_lens_buttons(active: Optional[Lens], key_prefix: str = "lens") -> Optional[Lens]:
    """
    Render one button per lens.

    Returns:
        The lens whose button was clicked on this rerun, or None.
    """
    clicked = None
    cols = st.columns(len(Lens))
    for col, lens in zip(cols, Lens):
        with col:
            label = f"{LENS_ICONS.get(lens.value, '')} {lens.display_title}".strip()
            button_type = "primary" if lens == active else "secondary"
            if st.button(label, key=f"{key_prefix}_{lens.value}", type=button_type, width="stretch"):
                clicked = lens
    return clicked


def render_issues_panel(report: LensReport):
    """Render the issues for one lens, each with its explanation."""
    st.subheader(report.lens.panel_heading)
    if report.is_empty:
        st.info(NO_ISSUES_MESSAGE)
        return
    for issue in report.issues:
        st.markdown(issue_card(issue.text, issue.explanation), unsafe_allow_html=True)
