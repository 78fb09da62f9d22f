"""HTTP client for the external analysis backend."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import requests

from .config import Settings, load_settings
from .errors import MissingFileError, NetworkFailure
from .models import AnalysisResult
from .sanitize import normalize

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "file"


@dataclass(frozen=True)
class SourceFile:
    """A file picked for analysis: its name and raw bytes."""
    name: str
    content: bytes

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "SourceFile":
        p = Path(path)
        return cls(name=p.name, content=p.read_bytes())


FileInput = Union[SourceFile, str, Path]


class AnalysisClient:
    """
    Submits one file per call to the analysis backend.

    No retries and no cancellation: each `analyze` call issues exactly one POST.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or load_settings()
        self.endpoint = endpoint or settings.endpoint
        self.timeout = timeout if timeout is not None else settings.timeout
        self.session = session or requests.Session()

    def _unreachable(self, detail: str) -> NetworkFailure:
        logger.warning("Analysis request to %s failed: %s", self.endpoint, detail)
        return NetworkFailure(
            f"Backend not reachable. Ensure the analysis service is running at {self.endpoint}.",
            endpoint=self.endpoint,
        )

    def analyze(self, file: Optional[FileInput]) -> AnalysisResult:
        """
        Upload `file` and return the sanitized result.

        Raises MissingFileError before any network activity when no file is given,
        and NetworkFailure when the backend is unreachable, returns an error
        status, or answers with a body that is not JSON.
        """
        if file is None:
            raise MissingFileError()
        source = file if isinstance(file, SourceFile) else SourceFile.from_path(file)

        logger.info("Submitting %s (%d bytes) to %s", source.name, len(source.content), self.endpoint)
        try:
            r = self.session.post(
                self.endpoint,
                files={UPLOAD_FIELD: (source.name, source.content)},
                timeout=self.timeout,
            )
            r.raise_for_status()
            payload = r.json()
        except requests.exceptions.RequestException as e:
            raise self._unreachable(str(e)) from e
        except ValueError as e:
            raise self._unreachable(f"response is not JSON ({e})") from e

        result = normalize(payload)
        logger.info("Analysis of %s finished: score=%s, %d issues", source.name, result.score, len(result.issues))
        return result
