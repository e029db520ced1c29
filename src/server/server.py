"""Server bootstrap for the bash-match MCP service.

Creates the FastMCP instance, wires the bash client and matcher into the
tools, registers resources and starts the MCP server (stdio transport).
"""

from mcp.server.fastmcp import FastMCP

from clients.bash_client import BashClient
from config import BASH_PATH, BASH_TIMEOUT, MAX_CONCURRENCY, configure_logging
from matching.matcher import BashMatcher

from tools.bash_match import register as register_bash_match
from tools.bash_match_list import register as register_bash_match_list
from tools.bash_compile import register as register_bash_compile

from resources.shopt_options import register_resources

mcp = FastMCP("bash-match-mcp")


def register_tools() -> None:
    bash_client = BashClient(bash_path=BASH_PATH, timeout=BASH_TIMEOUT)
    matcher = BashMatcher(executor=bash_client, max_concurrency=MAX_CONCURRENCY)

    register_bash_match(mcp, matcher=matcher)
    register_bash_match_list(mcp, matcher=matcher)
    register_bash_compile(mcp, matcher=matcher)


def register_all() -> None:
    register_tools()
    register_resources(mcp)


register_all()


def main() -> None:
    configure_logging()
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
