from __future__ import annotations

from typing import Optional


class BashMatchError(Exception):
    """Base error for bash pattern matching."""


class ValidationError(BashMatchError, TypeError):
    """Raised when caller input is invalid (wrong types, unknown options)."""


class UnsupportedPlatformError(BashMatchError):
    """Raised when the native command shell is not POSIX compatible."""


class EvaluationError(BashMatchError):
    """Raised when bash ran but reported a problem on stderr."""

    def __init__(self, stderr: str) -> None:
        self.stderr = stderr
        super().__init__(stderr)


class SpawnError(BashMatchError):
    """Raised when bash could not be launched or did not finish in time."""

    def __init__(self, message: str, *, executable: Optional[str] = None) -> None:
        self.executable = executable
        super().__init__(message)
