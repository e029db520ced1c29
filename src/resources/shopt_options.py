"""MCP resource describing the options accepted by the matching tools."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from core.command import SHOPT_NAMES
from core.models import ALIASES, SHELL_TOGGLES


def options_reference() -> str:
    lines = ["option        bash shopt"]
    for toggle in SHELL_TOGGLES:
        lines.append(f"{toggle:<13} {', '.join(SHOPT_NAMES[toggle])}")
    for alias, target in ALIASES:
        lines.append(f"{alias:<13} alias for {target}")
    lines.append("strict_errors raise on bash errors instead of returning false")
    lines.append("cwd           working directory bash runs in")
    lines.append("")
    lines.append("globstar is enabled automatically when the pattern contains '**';")
    lines.append("extglob when it contains ?( *( +( @( or !(.")
    return "\n".join(lines) + "\n"


def register_resources(mcp: FastMCP) -> None:
    """
    Register the option reference resource for the MCP server.
    """

    @mcp.resource(
        "bash-match://options",
        mime_type="text/plain",
        description="Options accepted by bash_match and bash_match_list",
    )
    def shopt_options() -> str:
        return options_reference()
