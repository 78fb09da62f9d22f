from __future__ import annotations

import json

from sentinel_ai.classify import DEPENDENCY_MESSAGE, REFACTOR_MESSAGE, SECURITY_OVERRIDE_MESSAGE
from sentinel_ai.models import AnalysisResult, Lens
from sentinel_ai.report import (
    NO_ISSUES_MESSAGE,
    build_lens_report,
    build_reports,
    format_score,
    render_json,
    render_markdown,
)


def test_end_to_end_low_score_scenario() -> None:
    result = AnalysisResult(score=20, issues=("eval() used", "complex loop detected"))
    reports = {r.lens: r for r in build_reports(result)}

    assert [i.text for i in reports[Lens.SECURITY].issues] == [SECURITY_OVERRIDE_MESSAGE]
    assert [i.text for i in reports[Lens.COMPLEXITY].issues] == ["complex loop detected"]
    assert [i.text for i in reports[Lens.DEPENDENCY].issues] == [DEPENDENCY_MESSAGE]
    assert [i.text for i in reports[Lens.REFACTOR].issues] == [REFACTOR_MESSAGE]
    assert reports[Lens.COMPLEXITY].issues[0].explanation.startswith("High complexity")


def test_lens_report_titles_and_headings() -> None:
    report = build_lens_report(Lens.SECURITY, AnalysisResult(score=90))
    assert report.title == "Vulnerability Scan"
    assert report.lens.panel_heading == "Security Issues"
    assert report.is_empty


def test_build_reports_respects_lens_selection() -> None:
    reports = build_reports(AnalysisResult(), [Lens.REFACTOR])
    assert [r.lens for r in reports] == [Lens.REFACTOR]
    assert [r.lens for r in build_reports(AnalysisResult())] == list(Lens)


def test_format_score() -> None:
    assert format_score(None) == "--"
    assert format_score(42) == "42/100"


def test_markdown_shows_empty_lens_notice_and_insights() -> None:
    result = AnalysisResult(score=90, issues=("eval() used",))
    md = render_markdown(result, build_reports(result))
    assert md.startswith("# Analysis score: 90/100")
    assert "- **eval() used**" in md
    assert "AI Insight: This allows execution of arbitrary code" in md
    assert NO_ISSUES_MESSAGE not in md

    empty = AnalysisResult(score=90, issues=("fine",))
    assert NO_ISSUES_MESSAGE in render_markdown(empty, build_reports(empty, [Lens.SECURITY]))


def test_json_rendering_shape() -> None:
    result = AnalysisResult(score=None, issues=("complex branch",))
    obj = json.loads(render_json(result, build_reports(result)))
    assert obj["score"] is None
    assert obj["issues"] == ["complex branch"]
    assert set(obj["lenses"]) == {"security", "complexity", "dependency", "refactor"}
    assert obj["lenses"]["security"] == []
    assert obj["lenses"]["complexity"][0]["text"] == "complex branch"
