"""MCP tool that filters a list of strings with a bash glob pattern.

Registers 'bash_match_list'; items are evaluated concurrently but the
returned matches keep the input order.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from matching.matcher import BashMatcher, get_default_matcher
from tools.inputs import tool_options


def register(mcp: FastMCP, *, matcher: Optional[BashMatcher] = None) -> None:
    @mcp.tool(name="bash_match_list")
    async def bash_match_list(
        items: List[str],
        pattern: str,
        options: Optional[Dict[str, Any]] = None,
    ) -> List[str]:
        """Return the items that match the bash pattern, in input order.

        Params:
          - items: strings to test.
          - pattern: bash glob/extglob pattern.
          - options: same flags as bash_match.

        Returns:
          The matching items. Duplicates are kept.
        """
        m = matcher or get_default_matcher()
        return await m.amatch_all(items, pattern, tool_options(options))
