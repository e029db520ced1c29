"""Immutable dataclasses for the matching pipeline.

Includes the typed options record (MatchOptions), the per-call request
(MatchRequest), the raw captured shell output (ShellResult) and the
tagged outcome (MatchOutcome) that is collapsed to a bool only at the
public boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Literal, Mapping, Optional, Tuple

from core.errors import ValidationError


# Bash shopt toggles in the order they are emitted on the command line
SHELL_TOGGLES: Tuple[str, ...] = (
    "dotglob",
    "extglob",
    "failglob",
    "globstar",
    "nocaseglob",
    "nullglob",
)

# Alias -> toggle it implies
ALIASES: Tuple[Tuple[str, str], ...] = (
    ("nocase", "nocaseglob"),
    ("nonull", "nullglob"),
    ("dot", "dotglob"),
)

# camelCase keys accepted from plain mappings
_KEY_ALIASES = {
    "strictErrors": "strict_errors",
}


OutcomeKind = Literal["matched", "not_matched", "evaluation_error", "spawn_error"]


@dataclass(frozen=True)
class MatchOptions:
    """Options for a single match call.

    Field groups:
    - Shell toggles: dotglob, extglob, failglob, globstar, nocaseglob, nullglob
      (None means "not set")
    - Aliases: dot, nocase, nonull
    - Caller policy: strict_errors, cwd
    - Internal: normalized
    """

    dotglob: Optional[bool] = None
    extglob: Optional[bool] = None
    failglob: Optional[bool] = None
    globstar: Optional[bool] = None
    nocaseglob: Optional[bool] = None
    nullglob: Optional[bool] = None

    dot: bool = False
    nocase: bool = False
    nonull: bool = False

    strict_errors: bool = False
    cwd: Optional[str] = None

    normalized: bool = False

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "MatchOptions":
        """Build options from a plain mapping (e.g. JSON tool arguments)."""
        if not raw:
            return cls()

        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in raw.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise ValidationError(f"Unknown match option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)

    def enabled_toggles(self) -> Tuple[str, ...]:
        return tuple(name for name in SHELL_TOGGLES if getattr(self, name))


@dataclass(frozen=True)
class MatchRequest:
    subject: str
    pattern: str
    options: MatchOptions


@dataclass(frozen=True)
class ShellResult:
    # Raw captured streams of one bash run
    stdout: bytes = b""
    stderr: bytes = b""


@dataclass(frozen=True)
class MatchOutcome:
    """Result of one bash evaluation before the error policy is applied.

    - matched / not_matched: stdout was "true" / empty, stderr was empty
    - evaluation_error: bash wrote to stderr (message holds it)
    - spawn_error: bash could not be launched (error holds the exception)
    """

    kind: OutcomeKind
    message: str = ""
    error: Optional[BaseException] = None

    @property
    def is_error(self) -> bool:
        return self.kind in ("evaluation_error", "spawn_error")
