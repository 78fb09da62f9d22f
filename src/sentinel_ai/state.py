"""Dashboard state as an immutable record driven by one transition function."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from .models import AnalysisResult, Lens

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardState:
    """Everything the dashboard shows between two events.

    submission_id is the id of the most recently started analysis; completions
    carrying any other id are stale and ignored.
    """

    file_name: Optional[str] = None
    score: Optional[int] = None
    issues: Tuple[str, ...] = ()
    active_lens: Optional[Lens] = None
    loading: bool = False
    error: Optional[str] = None
    submission_id: int = 0

    @property
    def result(self) -> AnalysisResult:
        return AnalysisResult(score=self.score, issues=self.issues)


@dataclass(frozen=True)
class FileSelected:
    name: Optional[str]


@dataclass(frozen=True)
class AnalysisStarted:
    submission_id: int


@dataclass(frozen=True)
class AnalysisSucceeded:
    submission_id: int
    result: AnalysisResult


@dataclass(frozen=True)
class AnalysisFailed:
    submission_id: int
    message: str


@dataclass(frozen=True)
class LensSelected:
    lens: object


Event = Union[FileSelected, AnalysisStarted, AnalysisSucceeded, AnalysisFailed, LensSelected]


def next_submission_id(state: DashboardState) -> int:
    return state.submission_id + 1


def _is_stale(state: DashboardState, submission_id: int) -> bool:
    if submission_id != state.submission_id:
        logger.info(
            "Ignoring completion of submission %d; latest is %d", submission_id, state.submission_id
        )
        return True
    return False


def transition(state: DashboardState, event: Event) -> DashboardState:
    """Return the state that follows `event`. The input state is never modified."""
    if isinstance(event, FileSelected):
        return replace(state, file_name=event.name)

    if isinstance(event, AnalysisStarted):
        # Previous results never survive into a new attempt.
        return replace(
            state,
            score=None,
            issues=(),
            active_lens=None,
            error=None,
            loading=True,
            submission_id=event.submission_id,
        )

    if isinstance(event, AnalysisSucceeded):
        if _is_stale(state, event.submission_id):
            return state
        return replace(
            state,
            score=event.result.score,
            issues=event.result.issues,
            loading=False,
        )

    if isinstance(event, AnalysisFailed):
        if _is_stale(state, event.submission_id):
            return state
        return replace(state, error=event.message, loading=False)

    if isinstance(event, LensSelected):
        return replace(state, active_lens=Lens.parse(event.lens))

    raise TypeError(f"Unknown dashboard event: {event!r}")
