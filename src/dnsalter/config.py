"""
Global configuration for dnsalter.
Only generation knobs live here (thresholds, fuzz depth, wordlist, workers, logging).
Values come from the environment (and a local .env); CLI flags override them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .core.errors import InvalidConfigError

load_dotenv()


def get_env(
    name: str, *, required: bool = False, default: Optional[str] = None
) -> Optional[str]:
    """Small helper to fetch env vars with an optional 'required' flag."""
    val = os.getenv(name, default)
    if required and not val:
        raise InvalidConfigError(f"Missing required environment variable: {name}")
    return val


def _non_negative_int(name: str, default: int) -> int:
    raw = get_env(name, default=str(default))
    try:
        val = int(str(raw).strip())
    except ValueError as e:
        raise InvalidConfigError(f"{name} must be an integer, got {raw!r}") from e
    if val < 0:
        raise InvalidConfigError(f"{name} must be >= 0, got {val}")
    return val


@dataclass(frozen=True)
class Settings:
    min_for_word_flip: int = 3
    edit_distance: int = 1
    wordlist: Optional[Path] = None
    workers: int = 4
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """
    Snapshot the current environment into a Settings object.
    Re-reads os.environ on every call; nothing is validated at import time.
    """
    wl = get_env("DNSALTER_WORDLIST")
    return Settings(
        min_for_word_flip=_non_negative_int("DNSALTER_MIN_FOR_WORD_FLIP", 3),
        edit_distance=_non_negative_int("DNSALTER_EDIT_DISTANCE", 1),
        wordlist=Path(wl) if wl else None,
        workers=max(1, _non_negative_int("DNSALTER_WORKERS", 4)),
        log_level=(get_env("DNSALTER_LOG_LEVEL", default="WARNING") or "WARNING").upper(),
    )


# -----------------------------------------------------------------------------
# Public exports
# -----------------------------------------------------------------------------
__all__ = [
    # settings
    "Settings",
    "load_settings",
    # env helpers
    "get_env",
]
