from __future__ import annotations

import pytest

from sentinel_ai.classify import (
    COMPLEXITY_FALLBACK_MESSAGE,
    DEPENDENCY_MESSAGE,
    REFACTOR_MESSAGE,
    SECURITY_OVERRIDE_MESSAGE,
    classify,
    classify_result,
    get_rule,
)
from sentinel_ai.models import AnalysisResult, Lens


@pytest.mark.parametrize("score", [0, 1, 20, 34, 35])
def test_low_score_forces_security_override(score: int) -> None:
    issues = ["Found eval() call", "uses a hardcoded secret", 42, None]
    assert classify("security", issues, score) == [SECURITY_OVERRIDE_MESSAGE]
    assert classify("security", [], score) == [SECURITY_OVERRIDE_MESSAGE]


def test_security_filters_by_keyword_above_threshold() -> None:
    issues = ["Found eval() call", "unrelated note"]
    assert classify("security", issues, 50) == ["Found eval() call"]


def test_security_keywords_are_case_insensitive_and_keep_order() -> None:
    issues = [
        "INSECURE hash algorithm",
        "line too long",
        "os.system via EXEC",
        "Hardcoded Secret key",
    ]
    assert classify("security", issues, 36) == [
        "INSECURE hash algorithm",
        "os.system via EXEC",
        "Hardcoded Secret key",
    ]


def test_security_without_score_uses_keywords_and_may_be_empty() -> None:
    assert classify("security", ["eval used"], None) == ["eval used"]
    assert classify("security", ["nothing to see"], None) == []


def test_password_alone_is_not_a_security_keyword() -> None:
    assert classify("security", ["password in config"], 90) == []


def test_complexity_returns_matching_issues() -> None:
    issues = ["Complex nested loop", "unused import", "too COMPLEX function"]
    assert classify("complexity", issues, 80) == ["Complex nested loop", "too COMPLEX function"]


@pytest.mark.parametrize("score", [None, 0, 50, 100])
def test_complexity_falls_back_when_nothing_matches(score) -> None:
    assert classify("complexity", ["unused import"], score) == [COMPLEXITY_FALLBACK_MESSAGE]
    assert classify("complexity", [], score) == [COMPLEXITY_FALLBACK_MESSAGE]


def test_stub_lenses_ignore_inputs() -> None:
    assert classify("dependency", [], None) == [DEPENDENCY_MESSAGE]
    assert classify("refactor", [], None) == [REFACTOR_MESSAGE]
    assert classify("dependency", ["refactor me", "eval"], 5) == [DEPENDENCY_MESSAGE]
    assert classify("refactor", ["dependency risk"], 99) == [REFACTOR_MESSAGE]


@pytest.mark.parametrize("lens", ["bogus-lens", "", "Security", None, 3])
def test_unrecognized_lens_is_empty(lens) -> None:
    assert classify(lens, ["x"], 10) == []
    assert get_rule(lens) is None


def test_enum_members_are_accepted() -> None:
    assert classify(Lens.REFACTOR, [], None) == [REFACTOR_MESSAGE]


def test_non_string_entries_are_never_returned() -> None:
    issues = [None, 7, {"text": "eval"}, ["complex"], "complex eval()", 3.5]
    for lens in Lens:
        out = classify(lens, issues, 60)
        assert all(isinstance(i, str) for i in out)
    assert classify("security", issues, 60) == ["complex eval()"]
    assert classify("complexity", issues, 60) == ["complex eval()"]


def test_non_list_issues_are_treated_as_empty() -> None:
    assert classify("security", None, 80) == []
    assert classify("complexity", "complex", 80) == [COMPLEXITY_FALLBACK_MESSAGE]


def test_classify_is_deterministic_and_does_not_mutate_input() -> None:
    issues = ["eval here", 1, "complex there"]
    snapshot = list(issues)
    first = classify("security", issues, 70)
    second = classify("security", issues, 70)
    assert first == second == ["eval here"]
    assert issues == snapshot


def test_classify_result_uses_score_and_issues() -> None:
    result = AnalysisResult(score=20, issues=("eval() used", "complex loop detected"))
    assert classify_result(Lens.SECURITY, result) == [SECURITY_OVERRIDE_MESSAGE]
    assert classify_result(Lens.COMPLEXITY, result) == ["complex loop detected"]
