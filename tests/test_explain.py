from __future__ import annotations

import pytest

from sentinel_ai.explain import EXPLANATION_RULES, GENERIC_EXPLANATION, explain, explain_issues
from sentinel_ai.models import ClassifiedIssue

CODE_EXEC = "This allows execution of arbitrary code and can be exploited by attackers."
SECRETS = "Hardcoded secrets can leak credentials and should be stored securely."
COMPLEXITY = "High complexity makes code harder to understand, test, and maintain."
DEPENDENCY = "Unused or risky dependencies increase attack surface and maintenance cost."
REFACTOR = "Refactoring improves readability and long-term maintainability."


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Found eval() call", CODE_EXEC),
        ("EXEC of user input", CODE_EXEC),
        ("Hardcoded password found", SECRETS),
        ("API TOKEN in source", SECRETS),
        ("secret key committed", SECRETS),
        ("complex loop detected", COMPLEXITY),
        ("Unused dependency: six", DEPENDENCY),
        ("Consider a refactor of main()", REFACTOR),
        ("line too long", GENERIC_EXPLANATION),
        ("", GENERIC_EXPLANATION),
    ],
)
def test_explain_rule_table(text: str, expected: str) -> None:
    assert explain(text) == expected


def test_first_matching_rule_wins() -> None:
    # matches both the code-execution and secrets rules
    assert explain("eval of a secret token") == CODE_EXEC
    assert explain("complex dependency graph") == COMPLEXITY
    assert explain("refactor this risky dependency") == DEPENDENCY


def test_rule_order_is_fixed() -> None:
    first_keywords = [keywords[0] for keywords, _ in EXPLANATION_RULES]
    assert first_keywords == ["eval", "secret", "complex", "dependency", "refactor"]


def test_explain_issues_pairs_text_with_explanation() -> None:
    out = explain_issues(["eval used", "misc"])
    assert out == [
        ClassifiedIssue(text="eval used", explanation=CODE_EXEC),
        ClassifiedIssue(text="misc", explanation=GENERIC_EXPLANATION),
    ]
