"""Bash client: locate the bash executable and run one invocation.

The bash path is probed once per process and cached; probing is
deterministic, so a race on first use only repeats the same work.
"""

from __future__ import annotations

import logging
import os
import subprocess
import threading
from typing import Optional, Sequence, Tuple

from core.errors import SpawnError
from core.models import ShellResult

logger = logging.getLogger(__name__)


BASH_CANDIDATES: Tuple[str, ...] = ("/usr/local/bin/bash", "/bin/bash")
BASH_FALLBACK = "bash"

_bash_path: Optional[str] = None
_bash_path_lock = threading.Lock()


def get_bash_path() -> str:
    """Return the bash executable to use, probing well-known paths once."""
    global _bash_path
    if _bash_path is not None:
        return _bash_path

    with _bash_path_lock:
        if _bash_path is None:
            _bash_path = _probe_bash_path()
            logger.debug("Using bash at %s", _bash_path)
    return _bash_path


def _probe_bash_path() -> str:
    for candidate in BASH_CANDIDATES:
        if os.path.exists(candidate):
            return candidate
    # Resolved through PATH when spawned
    return BASH_FALLBACK


def reset_bash_path() -> None:
    """Forget the cached bash path (tests only)."""
    global _bash_path
    with _bash_path_lock:
        _bash_path = None


class BashClient:
    def __init__(self, *, bash_path: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self._bash_path = (bash_path or "").strip() or None
        # Non-positive timeouts mean "wait forever"
        self._timeout = timeout if timeout and timeout > 0 else None

    @property
    def bash_path(self) -> str:
        return self._bash_path or get_bash_path()

    def run(self, args: Sequence[str], *, cwd: Optional[str] = None) -> ShellResult:
        executable = self.bash_path
        argv = [executable, *args]
        logger.debug("Running %r (cwd=%s)", argv, cwd)

        try:
            proc = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=True,
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise SpawnError(
                f"bash did not finish within {self._timeout} seconds",
                executable=executable,
            ) from e
        except OSError as e:
            raise SpawnError(f"Failed to launch {executable}: {e}", executable=executable) from e

        return ShellResult(stdout=proc.stdout or b"", stderr=proc.stderr or b"")
