"""Core protocol and interface definitions.

Defines the ShellExecutor protocol: the seam between the matching
pipeline and whatever actually launches bash (a subprocess in
production, a fake in tests).
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from core.models import ShellResult


class ShellExecutor(Protocol):
    """Contract for running one bash invocation and capturing its output.

    Raises OSError or SpawnError when bash cannot be launched.
    """

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Optional[str] = None,
    ) -> ShellResult:
        ...
