"""Style utilities for consistent UI presentation."""
import html
import math
from typing import Optional

from sentinel_ai.classify import SECURITY_SCORE_THRESHOLD

COLORS = {
    "primary": "#22d3ee",
    "secondary": "#6C757D",
    "success": "#22c55e",
    "warning": "#FFC107",
    "critical": "#DC3545",
    "info": "#17A2B8",
    "track": "#1f2937",
    "light": "#F8F9FA",
    "dark": "#0f172a",
}

LENS_ICONS = {
    "security": "🛡️",
    "complexity": "🧠",
    "dependency": "📦",
    "refactor": "🛠️",
}

RING_RADIUS = 80
RING_SIZE = 200
RING_STROKE = 12


def ring_circumference(radius: float = RING_RADIUS) -> float:
    return 2 * math.pi * radius


def ring_offset(score: Optional[int], radius: float = RING_RADIUS) -> float:
    """Dash offset for the score ring; an unset score leaves the ring empty."""
    circumference = ring_circumference(radius)
    if score is None:
        return circumference
    return circumference * (1 - score / 100)


def score_color(score: Optional[int]) -> str:
    if score is None:
        return COLORS["secondary"]
    if score <= SECURITY_SCORE_THRESHOLD:
        return COLORS["critical"]
    if score < 70:
        return COLORS["warning"]
    return COLORS["primary"]


def score_ring_svg(score: Optional[int]) -> str:
    """Return the SVG markup for the circular score gauge."""
    circumference = ring_circumference()
    offset = ring_offset(score)
    center = RING_SIZE // 2
    label = f"{score}/100" if score is not None else "--"
    return f"""
<div style="position: relative; width: {RING_SIZE}px; height: {RING_SIZE}px; margin: 0 auto;">
  <svg width="{RING_SIZE}" height="{RING_SIZE}">
    <circle cx="{center}" cy="{center}" r="{RING_RADIUS}" stroke="{COLORS['track']}" stroke-width="{RING_STROKE}" fill="none" />
    <circle cx="{center}" cy="{center}" r="{RING_RADIUS}" stroke="{score_color(score)}" stroke-width="{RING_STROKE}" fill="none"
      stroke-dasharray="{circumference:.3f}" stroke-dashoffset="{offset:.3f}" stroke-linecap="round"
      transform="rotate(-90 {center} {center})" style="transition: stroke-dashoffset 0.5s ease;" />
  </svg>
  <div style="position: absolute; inset: 0; display: flex; align-items: center; justify-content: center;
              font-size: 1.8em; font-weight: 700;">{label}</div>
</div>
"""


def issue_card(text: str, explanation: str) -> str:
    """Return HTML for a single issue with its AI insight."""
    return f"""
<div style="border-left: 4px solid {COLORS['primary']}; padding: 12px 15px; margin: 10px 0; background: rgba(34, 211, 238, 0.08); border-radius: 4px;">
    <div><span style="margin-right: 6px;">•</span><strong>{html.escape(text)}</strong></div>
    <div style="margin-top: 6px; font-size: 0.9em; color: {COLORS['secondary']};">🤖 AI Insight: {html.escape(explanation)}</div>
</div>
"""
