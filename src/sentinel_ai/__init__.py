"""SentinelAI: sort backend code-analysis results into four lenses and explain each issue."""

from .classify import classify, classify_result
from .client import AnalysisClient, SourceFile
from .errors import MissingFileError, NetworkFailure, SentinelError
from .explain import explain, explain_issues
from .models import AnalysisResult, ClassifiedIssue, Lens, LensReport
from .sanitize import normalize

__all__ = [
    "AnalysisClient",
    "AnalysisResult",
    "ClassifiedIssue",
    "Lens",
    "LensReport",
    "MissingFileError",
    "NetworkFailure",
    "SentinelError",
    "SourceFile",
    "classify",
    "classify_result",
    "explain",
    "explain_issues",
    "normalize",
]
