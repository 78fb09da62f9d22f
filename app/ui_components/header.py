"""Hero banner shown at the top of the dashboard."""
import streamlit as st

from style_utils import COLORS


def render_hero():
    st.markdown(f"""
<div style="text-align: center; margin: 8px 0 24px 0;">
    <h1 style="margin: 0;"><span style="color: #60a5fa;">Sentinel</span><span style="color: {COLORS['success']};">AI</span></h1>
    <p style="color: {COLORS['secondary']}; margin-top: 4px;">AI-powered Python Security &amp; Code Analysis Dashboard</p>
</div>
    """, unsafe_allow_html=True)
