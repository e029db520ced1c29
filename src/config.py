"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
BASH_MATCH_TIMEOUT, BASH_MATCH_STRICT_ERRORS and concurrency limits).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_str(name: str) -> Optional[str]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


# Error policy used by the MCP tools when a call does not set strict_errors
STRICT_ERRORS = _env_bool("BASH_MATCH_STRICT_ERRORS", False)

# Subprocess
BASH_TIMEOUT = _env_float("BASH_MATCH_TIMEOUT", 0.0)
BASH_PATH = _env_str("BASH_MATCH_BASH_PATH")
MAX_CONCURRENCY = _env_int("BASH_MATCH_MAX_CONCURRENCY", 4)

# Logging
LOG_LEVEL = os.environ.get("BASH_MATCH_LOG_LEVEL", "WARNING").strip().upper()


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stderr handler to the root logger once.

    stdout is reserved for the MCP stdio transport, so records go to stderr.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level or LOG_LEVEL or "WARNING")
