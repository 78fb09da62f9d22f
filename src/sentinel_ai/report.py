from __future__ import annotations

import json
from typing import Any, Iterable, List, Optional

from .classify import classify_result
from .explain import explain_issues
from .models import AnalysisResult, Lens, LensReport

NO_ISSUES_MESSAGE = "No issues found for this category"


def build_lens_report(lens: Lens, result: AnalysisResult) -> LensReport:
    """Classify and explain `result` through one lens. Recomputed on every call."""
    return LensReport(
        lens=lens,
        title=lens.display_title,
        issues=tuple(explain_issues(classify_result(lens, result))),
    )


def build_reports(result: AnalysisResult, lenses: Optional[Iterable[Lens]] = None) -> List[LensReport]:
    return [build_lens_report(lens, result) for lens in (lenses or list(Lens))]


def format_score(score: Optional[int]) -> str:
    return f"{score}/100" if score is not None else "--"


def render_markdown(result: AnalysisResult, reports: List[LensReport]) -> str:
    lines: List[str] = [f"# Analysis score: {format_score(result.score)}", ""]
    for report in reports:
        lines.append(f"## {report.title} ({report.lens.panel_heading})")
        if report.is_empty:
            lines.append(f"_{NO_ISSUES_MESSAGE}_")
        for issue in report.issues:
            lines.append(f"- **{issue.text}**")
            lines.append(f"  - AI Insight: {issue.explanation}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def render_json(result: AnalysisResult, reports: List[LensReport]) -> str:
    obj: dict[str, Any] = {
        "score": result.score,
        "issues": list(result.issues),
        "lenses": {
            r.lens.value: [{"text": i.text, "explanation": i.explanation} for i in r.issues]
            for r in reports
        },
    }
    return json.dumps(obj, indent=2, ensure_ascii=False)
