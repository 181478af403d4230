"""OSRS Wiki MCP Server package.

This package provides an MCP server exposing the Old School RuneScape
wiki and the WikiSync player-data service as a small set of tools:

- ``search``: full-text search over wiki pages.
- ``summary``: plain-text intro extract for a page.
- ``getPlayerData``: a player's synced stats, cached in memory.

Usage example:
    from osrs_wiki_mcp.server import main
    if __name__ == "__main__":
        main()

Note: Tool functions can also be imported and called directly without
the MCP runtime (see ``osrs_wiki_mcp.tools``).
"""

__all__ = [
    "__version__",
]

__version__ = "2.0.0"
