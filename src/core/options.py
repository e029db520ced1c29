"""Option normalization.

Turns caller options (a MatchOptions, a plain mapping or None) into the
canonical record consumed by the command compiler: aliases expanded,
pattern-implied toggles resolved and the normalized marker set.
"""

from __future__ import annotations

import dataclasses
import os
import re
from typing import Any, Mapping, Optional, Union

from core.errors import ValidationError
from core.models import ALIASES, SHELL_TOGGLES, MatchOptions


RawOptions = Union[MatchOptions, Mapping[str, Any], None]

_EXTGLOB_RE = re.compile(r"[?*+@!]\(")


def is_extglob(pattern: str) -> bool:
    """True if the pattern uses an extended glob operator like @(a|b)."""
    return bool(_EXTGLOB_RE.search(pattern or ""))


def is_globstar(pattern: str) -> bool:
    return "**" in (pattern or "")


def coerce_options(raw: RawOptions) -> MatchOptions:
    if raw is None:
        return MatchOptions()
    if isinstance(raw, MatchOptions):
        return raw
    if isinstance(raw, Mapping):
        return MatchOptions.from_mapping(raw)
    raise ValidationError(f"Expected match options, got {type(raw).__name__}")


def normalize(pattern: str, raw: RawOptions = None) -> MatchOptions:
    """Return the canonical options for matching `pattern`.

    A record that already has normalized=True is returned as is, so wrapper
    layers can normalize once and reuse the result.
    """
    opts = coerce_options(raw)
    if opts.normalized:
        return opts

    values = dataclasses.asdict(opts)
    if not values["cwd"]:
        values["cwd"] = os.getcwd()

    # Aliases only ever add True
    for alias, target in ALIASES:
        if values[alias]:
            values[target] = True
        values[alias] = False

    if values["globstar"] is None and is_globstar(pattern):
        values["globstar"] = True
    if values["extglob"] is None and is_extglob(pattern):
        values["extglob"] = True

    # Canonical toggles are either True or absent
    for name in SHELL_TOGGLES:
        values[name] = True if values[name] else None

    values["strict_errors"] = bool(values["strict_errors"])
    values["normalized"] = True
    return MatchOptions(**values)
