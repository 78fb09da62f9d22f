"""UI components for the SentinelAI dashboard."""
from .header import render_hero
from .score import render_score_panel
from .findings import render_lens_buttons, render_issues_panel
from .metrics import build_lens_summary, render_lens_overview

__all__ = [
    "render_hero",
    "render_score_panel",
    "render_lens_buttons",
    "render_issues_panel",
    "build_lens_summary",
    "render_lens_overview",
]
