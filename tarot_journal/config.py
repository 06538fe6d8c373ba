"""
Environment-driven settings.

Values come from the process environment, with a local .env file loaded
first (python-dotenv). Nothing here is mutated after startup.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import InvalidParameterError
from .tarot_core import DEFAULT_REVERSED_PROBABILITY

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    gemini_token: Optional[str]
    gemini_model: str
    reversed_probability: float
    default_tier: str
    log_level: str

    @property
    def has_gemini_token(self) -> bool:
        return bool(self.gemini_token)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise InvalidParameterError(f"{name} must be a number; got {raw!r}")
    if not (0.0 <= value <= 1.0):
        raise InvalidParameterError(f"{name} must be within [0.0, 1.0]; got {value}")
    return value


def get_settings() -> Settings:
    """Read settings from the environment (call again to pick up changes)."""
    return Settings(
        gemini_token=os.getenv("GEMINI_TOKEN") or None,
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        reversed_probability=_float_env("TAROT_REVERSED_PROBABILITY", DEFAULT_REVERSED_PROBABILITY),
        default_tier=os.getenv("TAROT_DEFAULT_TIER", "free"),
        log_level=os.getenv("TAROT_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Basic logging setup for the entry points (CLI / API / Streamlit)."""
    logging.basicConfig(level=level or get_settings().log_level, format=LOG_FORMAT)
