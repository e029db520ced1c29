"""Turn captured bash output into a match result.

classify() maps a ShellResult (or the exception raised while spawning)
to a tagged MatchOutcome; resolve() applies the strict_errors policy and
collapses the outcome to a bool or an exception.
"""

from __future__ import annotations

import subprocess
from typing import Optional, Union

from core.errors import EvaluationError, SpawnError
from core.models import MatchOptions, MatchOutcome, ShellResult


SpawnFailure = Union[OSError, subprocess.SubprocessError, SpawnError]


def _to_text(buf: Optional[bytes]) -> str:
    if not buf:
        return ""
    if isinstance(buf, str):
        return buf.strip()
    return buf.decode("utf-8", errors="replace").strip()


def classify(result: Union[ShellResult, SpawnFailure]) -> MatchOutcome:
    if isinstance(result, BaseException):
        return MatchOutcome(kind="spawn_error", message=str(result), error=result)

    err = _to_text(result.stderr)
    if err:
        return MatchOutcome(kind="evaluation_error", message=err)

    if _to_text(result.stdout):
        return MatchOutcome(kind="matched")
    return MatchOutcome(kind="not_matched")


def resolve(outcome: MatchOutcome, options: MatchOptions) -> bool:
    if not outcome.is_error:
        return outcome.kind == "matched"

    if not options.strict_errors:
        return False

    if outcome.kind == "evaluation_error":
        raise EvaluationError(outcome.message)

    if isinstance(outcome.error, SpawnError):
        raise outcome.error
    raise SpawnError(f"Failed to run bash: {outcome.message}") from outcome.error


def interpret(result: Union[ShellResult, SpawnFailure], options: MatchOptions) -> bool:
    return resolve(classify(result), options)
