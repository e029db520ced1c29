"""MCP tool that shows the bash command a match would run.

Registers 'bash_compile'. Nothing is executed; useful to see which shopt
toggles were inferred from the pattern.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from matching.matcher import BashMatcher, get_default_matcher
from tools.inputs import tool_options


def register(mcp: FastMCP, *, matcher: Optional[BashMatcher] = None) -> None:
    @mcp.tool(name="bash_compile")
    async def bash_compile(
        subject: str,
        pattern: str,
        options: Optional[Dict[str, Any]] = None,
    ) -> List[str]:
        """Return the bash arguments (without the executable) for a match."""
        m = matcher or get_default_matcher()
        return m.compile(subject, pattern, tool_options(options))
