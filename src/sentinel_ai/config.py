from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://127.0.0.1:8000/analyze"

ENDPOINT_ENV = "SENTINEL_ENDPOINT"
TIMEOUT_ENV = "SENTINEL_TIMEOUT"
LOG_LEVEL_ENV = "SENTINEL_LOG_LEVEL"


class Settings(BaseModel):
    """
    Runtime settings for the client and CLI.

    endpoint: URL of the analysis backend's upload route
    timeout: seconds before a request is abandoned; None waits indefinitely
    log_level: name of a stdlib logging level
    """
    endpoint: str = DEFAULT_ENDPOINT
    timeout: Optional[float] = None
    log_level: str = "INFO"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", TIMEOUT_ENV, raw)
        return None
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", TIMEOUT_ENV, raw)
        return None
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from the environment, falling back to defaults."""
    env = os.environ if environ is None else environ
    return Settings(
        endpoint=env.get(ENDPOINT_ENV) or DEFAULT_ENDPOINT,
        timeout=_parse_timeout(env.get(TIMEOUT_ENV)),
        log_level=(env.get(LOG_LEVEL_ENV) or "INFO").upper(),
    )
