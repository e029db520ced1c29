"""MCP tool that matches one string against a bash glob pattern.

Registers 'bash_match' which delegates to BashMatcher, so the answer is
whatever the installed bash says for `[[ subject = pattern ]]`.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from matching.matcher import BashMatcher, get_default_matcher
from tools.inputs import tool_options


def register(mcp: FastMCP, *, matcher: Optional[BashMatcher] = None) -> None:
    @mcp.tool(name="bash_match")
    async def bash_match(
        subject: str,
        pattern: str,
        options: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Return true if subject matches the bash glob/extglob pattern.

        Params:
          - subject: the string to test (not required to be a real path).
          - pattern: bash pattern, e.g. "*.py", "@(foo|bar)", "src/**".
          - options: optional flags: dotglob, extglob, failglob, globstar,
            nocaseglob, nullglob, dot, nocase, nonull, strict_errors, cwd.

        Returns:
          True on a match, False otherwise.

        Raises:
          ValidationError for non-string input or unknown options;
          EvaluationError/SpawnError only when strict_errors is set.

        The pattern is evaluated by bash as shell syntax. Do not pass
        untrusted input.
        """
        m = matcher or get_default_matcher()
        return await m.amatch(subject, pattern, tool_options(options))
