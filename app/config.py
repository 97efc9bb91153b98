"""Runtime configuration helpers for environment-driven settings."""
from __future__ import annotations

import os
from typing import Final


def env_flag(name: str, *, default: bool = False) -> bool:
    """Return a boolean flag such as ``SHOW_PATHS`` from the environment.

    ``1``/``true``/``yes``/``on`` and ``0``/``false``/``no``/``off`` are
    recognised; anything else, or an unset variable, yields ``default``.
    """
    value = os.getenv(name)
    if value is None:
        return default

    normalised = value.strip().lower()
    if normalised in {"1", "true", "yes", "on"}:
        return True
    if normalised in {"0", "false", "no", "off"}:
        return False
    return default


def env_int(name: str, *, default: int) -> int:
    """Return an integer setting, falling back to ``default`` when unset or invalid."""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


PORT: Final[int] = env_int("PORT", default=3001)
LOG_LEVEL: Final[str] = (os.getenv("LOG_LEVEL") or "INFO").upper()
MAX_UPLOAD_BYTES: Final[int] = env_int("MAX_UPLOAD_BYTES", default=10 * 1024 * 1024)
SHOW_PATHS: Final[bool] = env_flag("SHOW_PATHS", default=True)

__all__ = [
    "LOG_LEVEL",
    "MAX_UPLOAD_BYTES",
    "PORT",
    "SHOW_PATHS",
    "env_flag",
    "env_int",
]
