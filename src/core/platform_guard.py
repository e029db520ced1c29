from __future__ import annotations

import os
import sys

from core.errors import UnsupportedPlatformError


def is_windows() -> bool:
    return sys.platform == "win32" or os.name == "nt"


def ensure_posix_shell() -> None:
    # Windows cmd.exe cannot evaluate bash conditionals
    if is_windows():
        raise UnsupportedPlatformError("bash matching does not work on Windows")
