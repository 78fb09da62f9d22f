"""Score gauge component."""
from typing import Optional

import streamlit as st

from style_utils import score_ring_svg


def render_score_panel(score: Optional[int], loading: bool = False):
    """Render the circular score gauge, or a placeholder caption while analyzing."""
    st.markdown(score_ring_svg(score), unsafe_allow_html=True)
    if loading:
        st.caption("Analysis in progress...")
    elif score is None:
        st.caption("Upload a file and press ANALYZE to get a score.")
