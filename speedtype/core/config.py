from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_DURATION_SECONDS = 60
DEFAULT_WORD_COUNT = 50

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SessionConfig:
    duration_seconds: int = DEFAULT_DURATION_SECONDS
    word_count: int = DEFAULT_WORD_COUNT
    log_level: str = "INFO"

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_config(environ: Optional[Mapping[str, str]] = None) -> SessionConfig:
    """Build a SessionConfig from ``SPEEDTYPE_*`` environment variables."""
    env = os.environ if environ is None else environ

    log_level = env.get("SPEEDTYPE_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"SPEEDTYPE_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}")

    return SessionConfig(
        duration_seconds=_positive_int(env, "SPEEDTYPE_DURATION", DEFAULT_DURATION_SECONDS),
        word_count=_positive_int(env, "SPEEDTYPE_WORD_COUNT", DEFAULT_WORD_COUNT),
        log_level=log_level,
    )
