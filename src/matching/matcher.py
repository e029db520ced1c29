"""Match strings against bash glob patterns by asking bash itself.

BashMatcher wires the pipeline together:

    normalize options -> compile argv -> run bash -> interpret output

The sync API blocks on the subprocess. The async API runs each spawn in a
worker thread and bounds batch concurrency with a semaphore, keeping the
results in input order.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
from typing import Iterable, List, Optional, Union

from clients.bash_client import BashClient
from config import BASH_PATH, BASH_TIMEOUT, MAX_CONCURRENCY
from core.command import compile_command
from core.errors import SpawnError, ValidationError
from core.interfaces import ShellExecutor
from core.interpreter import classify, resolve
from core.models import MatchOptions, MatchOutcome, MatchRequest
from core.options import RawOptions, normalize
from core.platform_guard import ensure_posix_shell

logger = logging.getLogger(__name__)


Items = Union[str, Iterable[str]]


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"expected {name} to be a string, got {type(value).__name__}")
    return value


def _as_list(items: Items) -> List[str]:
    if isinstance(items, str):
        return [items]
    if items is None:
        raise ValidationError("expected a string or a list of strings")
    return list(items)


class BashMatcher:
    """Pattern matcher backed by a ShellExecutor (BashClient by default)."""

    def __init__(
        self,
        *,
        executor: Optional[ShellExecutor] = None,
        max_concurrency: int = 4,
    ) -> None:
        self._executor = executor or BashClient()
        self._max_concurrency = max(1, int(max_concurrency))

    def build_request(self, subject: str, pattern: str, options: RawOptions = None) -> MatchRequest:
        _require_str(subject, "subject")
        _require_str(pattern, "pattern")
        return MatchRequest(subject=subject, pattern=pattern, options=normalize(pattern, options))

    def compile(self, subject: str, pattern: str, options: RawOptions = None) -> List[str]:
        req = self.build_request(subject, pattern, options)
        return compile_command(req.subject, req.pattern, req.options)

    def evaluate(self, request: MatchRequest) -> MatchOutcome:
        """Run bash for one request and classify the output (no policy applied)."""
        ensure_posix_shell()
        args = compile_command(request.subject, request.pattern, request.options)
        try:
            result = self._executor.run(args, cwd=request.options.cwd)
        except (OSError, subprocess.SubprocessError, SpawnError) as e:
            return classify(e)
        return classify(result)

    def _finish(self, request: MatchRequest, outcome: MatchOutcome) -> bool:
        if outcome.is_error and not request.options.strict_errors:
            logger.warning(
                "Treating %s for pattern %r as no match: %s",
                outcome.kind,
                request.pattern,
                outcome.message,
            )
        return resolve(outcome, request.options)

    def match(self, subject: str, pattern: str, options: RawOptions = None) -> bool:
        req = self.build_request(subject, pattern, options)
        return self._finish(req, self.evaluate(req))

    def match_all(self, items: Items, pattern: str, options: RawOptions = None) -> List[str]:
        _require_str(pattern, "pattern")
        ensure_posix_shell()
        opts = normalize(pattern, options)
        return [item for item in _as_list(items) if self.match(item, pattern, opts)]

    async def amatch(self, subject: str, pattern: str, options: RawOptions = None) -> bool:
        req = self.build_request(subject, pattern, options)
        outcome = await asyncio.to_thread(self.evaluate, req)
        return self._finish(req, outcome)

    async def amatch_all(self, items: Items, pattern: str, options: RawOptions = None) -> List[str]:
        _require_str(pattern, "pattern")
        ensure_posix_shell()
        opts = normalize(pattern, options)
        subjects = _as_list(items)
        sem = asyncio.Semaphore(self._max_concurrency)

        async def _one(subject: str) -> bool:
            async with sem:
                return await self.amatch(subject, pattern, opts)

        # gather keeps results aligned with the input order
        flags = await asyncio.gather(*(_one(s) for s in subjects))
        return [s for s, ok in zip(subjects, flags) if ok]


_default_matcher: Optional[BashMatcher] = None


def get_default_matcher() -> BashMatcher:
    global _default_matcher
    if _default_matcher is None:
        _default_matcher = BashMatcher(
            executor=BashClient(bash_path=BASH_PATH, timeout=BASH_TIMEOUT),
            max_concurrency=MAX_CONCURRENCY,
        )
    return _default_matcher


def match(subject: str, pattern: str, options: RawOptions = None) -> bool:
    """Return True if `subject` matches the bash glob `pattern`.

    Set strict_errors=True in options to raise when bash reports an error;
    otherwise errors count as "no match".
    """
    return get_default_matcher().match(subject, pattern, options)


def is_match(subject: str, pattern: str, options: RawOptions = None) -> bool:
    """Alias for match()."""
    return match(subject, pattern, options)


def match_all(items: Items, pattern: str, options: RawOptions = None) -> List[str]:
    """Return the items (in input order) that match `pattern`."""
    return get_default_matcher().match_all(items, pattern, options)


__all__ = [
    "BashMatcher",
    "MatchOptions",
    "get_default_matcher",
    "is_match",
    "match",
    "match_all",
]
