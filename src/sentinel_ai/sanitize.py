from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional, Tuple

from .models import AnalysisResult

logger = logging.getLogger(__name__)

SCORE_MIN = 0
SCORE_MAX = 100


def coerce_score(value: Any) -> Optional[int]:
    """Turn a backend score into an int in 0..100, or None if it is not a number.

    Fractions round up so that `score <= 35` holds after coercion exactly when
    it held for the raw value.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return max(SCORE_MIN, min(SCORE_MAX, math.ceil(value)))


def sanitize_issues(issues: Any) -> Tuple[str, ...]:
    """Keep only the string entries of a list/tuple; any other shape is empty."""
    if not isinstance(issues, (list, tuple)):
        return ()
    kept = tuple(i for i in issues if isinstance(i, str))
    dropped = len(issues) - len(kept)
    if dropped:
        logger.debug("Dropped %d non-string issue entries", dropped)
    return kept


def normalize(raw: Any) -> AnalysisResult:
    """Decode a raw backend payload into an AnalysisResult.

    Malformed shapes are recovered silently:
    - a payload that is not a JSON object yields an empty, unscored result
    - a non-numeric or missing score becomes None
    - a non-list `issues` becomes empty; non-string entries are dropped
    """
    if not isinstance(raw, Mapping):
        logger.debug("Analysis payload is %s, not an object", type(raw).__name__)
        return AnalysisResult()

    return AnalysisResult(
        score=coerce_score(raw.get("score")),
        issues=sanitize_issues(raw.get("issues")),
    )
