from __future__ import annotations

from typing import Iterable, List, Tuple

from .models import ClassifiedIssue

GENERIC_EXPLANATION = "This issue may negatively affect security or code quality."

# Evaluated top to bottom; the first rule with a matching keyword wins.
EXPLANATION_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (
        ("eval", "exec"),
        "This allows execution of arbitrary code and can be exploited by attackers.",
    ),
    (
        ("secret", "password", "token"),
        "Hardcoded secrets can leak credentials and should be stored securely.",
    ),
    (
        ("complex",),
        "High complexity makes code harder to understand, test, and maintain.",
    ),
    (
        ("dependency",),
        "Unused or risky dependencies increase attack surface and maintenance cost.",
    ),
    (
        ("refactor",),
        "Refactoring improves readability and long-term maintainability.",
    ),
)


def explain(issue_text: str) -> str:
    """Return the rationale for an issue. Never fails; unmatched text gets the generic one."""
    text = issue_text.lower()
    for keywords, explanation in EXPLANATION_RULES:
        if any(k in text for k in keywords):
            return explanation
    return GENERIC_EXPLANATION


def explain_issues(issues: Iterable[str]) -> List[ClassifiedIssue]:
    return [ClassifiedIssue(text=i, explanation=explain(i)) for i in issues]
