from __future__ import annotations


class SentinelError(Exception):
    """Base class for errors surfaced to the user as a blocking notice."""


class MissingFileError(SentinelError, ValueError):
    """Raised when an analysis is requested without a file."""

    def __init__(self, message: str = "Please select a Python file first") -> None:
        super().__init__(message)


class NetworkFailure(SentinelError):
    """
    The analysis backend could not be reached or answered with something
    that is not JSON. Displayed results must not be updated.
    """

    def __init__(self, message: str, endpoint: str | None = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint
