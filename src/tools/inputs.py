from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from config import STRICT_ERRORS
from core.errors import ValidationError
from core.models import MatchOptions


def tool_options(options: Optional[Mapping[str, Any]]) -> MatchOptions:
    # Tool calls fall back to the configured error policy
    if options is not None and not isinstance(options, Mapping):
        raise ValidationError("options must be an object")

    raw: Dict[str, Any] = dict(options or {})
    if "strict_errors" not in raw and "strictErrors" not in raw:
        raw["strict_errors"] = STRICT_ERRORS
    return MatchOptions.from_mapping(raw)
