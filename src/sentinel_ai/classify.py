from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence

from .models import AnalysisResult, Lens
from .sanitize import sanitize_issues

SECURITY_SCORE_THRESHOLD = 35
SECURITY_KEYWORDS = ("secret", "eval", "exec", "insecure")
COMPLEXITY_KEYWORD = "complex"

SECURITY_OVERRIDE_MESSAGE = "Potential security vulnerability detected due to unsafe coding patterns"
COMPLEXITY_FALLBACK_MESSAGE = "High cyclomatic complexity detected"
DEPENDENCY_MESSAGE = "Unused or risky dependency detected"
REFACTOR_MESSAGE = "Code can be refactored to improve readability"

LensRule = Callable[[List[str], Optional[int]], List[str]]


def _matches_any(text: str, keywords: Sequence[str]) -> bool:
    lowered = text.lower()
    return any(k in lowered for k in keywords)


def security_issues(issues: List[str], score: Optional[int]) -> List[str]:
    # A low score always counts as a security finding, whatever the issues say.
    if score is not None and score <= SECURITY_SCORE_THRESHOLD:
        return [SECURITY_OVERRIDE_MESSAGE]
    return [i for i in issues if _matches_any(i, SECURITY_KEYWORDS)]


def complexity_issues(issues: List[str], score: Optional[int]) -> List[str]:
    matched = [i for i in issues if COMPLEXITY_KEYWORD in i.lower()]
    return matched or [COMPLEXITY_FALLBACK_MESSAGE]


def dependency_issues(issues: List[str], score: Optional[int]) -> List[str]:
    return [DEPENDENCY_MESSAGE]


def refactor_issues(issues: List[str], score: Optional[int]) -> List[str]:
    return [REFACTOR_MESSAGE]


_RULES: Dict[Lens, LensRule] = {
    Lens.SECURITY: security_issues,
    Lens.COMPLEXITY: complexity_issues,
    Lens.DEPENDENCY: dependency_issues,
    Lens.REFACTOR: refactor_issues,
}


def get_rule(lens: Any) -> Optional[LensRule]:
    """Look up the rule for a lens value; None when the lens is not recognized."""
    parsed = Lens.parse(lens)
    if parsed is None:
        return None
    return _RULES[parsed]


def classify(lens: Any, issues: Sequence[Any] | None, score: Optional[int]) -> List[str]:
    """
    Issue strings to display for `lens`.

    Non-string entries are always dropped first. An unrecognized lens yields
    an empty list. Pure: the same inputs give the same ordered output.
    """
    rule = get_rule(lens)
    if rule is None:
        return []
    return rule(list(sanitize_issues(issues)), score)


def classify_result(lens: Any, result: AnalysisResult) -> List[str]:
    return classify(lens, result.issues, result.score)
