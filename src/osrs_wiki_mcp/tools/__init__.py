"""MCP tools for wiki search, page summaries and player data.

Each tool is exposed as a plain async function to facilitate testing.
An MCP runtime adapter (see `server.py`) registers these with the
FastMCP runtime. The tool functions return `ToolResult` values.
"""

from .player import get_player_data
from .wiki import clamp_limit, get_summary, search_wiki

__all__ = [
    "clamp_limit",
    "get_player_data",
    "get_summary",
    "search_wiki",
]
