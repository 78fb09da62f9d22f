"""Lens overview: issue counts per lens as a table and a bar chart."""
from typing import List

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from sentinel_ai.models import LensReport
from style_utils import COLORS


def build_lens_summary(reports: List[LensReport]) -> pd.DataFrame:
    """One row per lens with its display title and number of surfaced issues."""
    rows = [
        {"Lens": r.lens.value, "Title": r.title, "Issues": len(r.issues)}
        for r in reports
    ]
    return pd.DataFrame(rows, columns=["Lens", "Title", "Issues"])


def render_lens_overview(reports: List[LensReport]):
    df = build_lens_summary(reports)
    if df.empty:
        st.info("No analysis result yet.")
        return

    col1, col2 = st.columns([1, 1])

    with col1:
        st.markdown("**Issues per lens:**")
        st.dataframe(df[["Title", "Issues"]], hide_index=True, width="stretch")

    with col2:
        fig, ax = plt.subplots(figsize=(6, 3.5))
        ax.barh(df["Title"].iloc[::-1], df["Issues"].iloc[::-1], color=COLORS["primary"])
        ax.set_xlabel("Issues")
        ax.xaxis.get_major_locator().set_params(integer=True)
        plt.tight_layout()
        st.pyplot(fig)
        plt.close(fig)
