"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants (cache capacity, default TTL and
log level). Range checks are left to the components that consume them.
"""

from __future__ import annotations

import logging
import os


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_log_level(name: str, default: str) -> str:
    level = _env_str(name, default).upper()
    # getLevelName maps known names to ints, unknown ones to "Level X"
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


# Cache sizing
CACHE_CAPACITY = _env_int("CACHE_CAPACITY", 100)
CACHE_DEFAULT_TTL_MS = _env_int("CACHE_DEFAULT_TTL_MS", 60_000)

# Logging (stderr; stdout is reserved for the stdio transport)
LOG_LEVEL = _env_log_level("LOG_LEVEL", "WARNING")
