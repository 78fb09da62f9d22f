from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Lens(str, Enum):
    """
    The four fixed views an analysis result is presented through.

    - SECURITY: unsafe patterns (eval/exec, secrets) plus the low-score override
    - COMPLEXITY: backend-reported complexity issues, with a fallback message
    - DEPENDENCY / REFACTOR: stub lenses with a fixed message
    """
    SECURITY = "security"
    COMPLEXITY = "complexity"
    DEPENDENCY = "dependency"
    REFACTOR = "refactor"

    @classmethod
    def parse(cls, value: object) -> Optional["Lens"]:
        """Return the matching lens, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def display_title(self) -> str:
        return LENS_TITLES[self]

    @property
    def panel_heading(self) -> str:
        return f"{self.value.capitalize()} Issues"


LENS_TITLES = {
    Lens.SECURITY: "Vulnerability Scan",
    Lens.COMPLEXITY: "Logic & Complexity Analyzer",
    Lens.DEPENDENCY: "Dependency Guard",
    Lens.REFACTOR: "Refactoring Advisor",
}


class AnalysisResult(BaseModel):
    """
    Sanitized outcome of one backend analysis.

    score: 0..100, or None when the backend sent nothing usable
    issues: backend issue strings, original order preserved

    Replaced wholesale on every new analysis; never mutated.
    """
    model_config = ConfigDict(frozen=True)

    score: Optional[int] = Field(default=None, ge=0, le=100)
    issues: Tuple[str, ...] = ()

    @property
    def has_score(self) -> bool:
        return self.score is not None


class ClassifiedIssue(BaseModel):
    """An issue string paired with its human-readable rationale."""
    model_config = ConfigDict(frozen=True)

    text: str
    explanation: str


class LensReport(BaseModel):
    """
    What one lens shows for a result. Derived on every render, never stored.
    """
    model_config = ConfigDict(frozen=True)

    lens: Lens
    title: str
    issues: Tuple[ClassifiedIssue, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.issues
