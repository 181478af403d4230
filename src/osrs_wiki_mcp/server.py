"""FastMCP server entrypoint.

Registers the wiki and player-data tools. This module intentionally
keeps the tool implementations decoupled so they can be unit-tested
without the runtime.

Transports:
- stdio (default): for local MCP clients.
- sse / streamable-http: FastMCP's own single-transport servers.
- http: one Starlette app serving SSE under `/sse` and streamable
  HTTP at `/mcp`; every other path is a 404.
"""

import argparse
import contextlib
import sys
from typing import Annotated, Optional

import uvicorn
from loguru import logger
from mcp.server.fastmcp import FastMCP
from pydantic import Field
from starlette.applications import Starlette

from . import __version__
from .config import AppConfig, load_config
from .http_client import HttpClient
from .player_cache import PlayerDataCache
from .tools import get_player_data, get_summary, search_wiki
from .utils import configure_logging

SERVER_NAME = "osrs-wiki-mcp"
SSE_PATH = "/sse"
SSE_MESSAGE_PATH = "/sse/messages/"
STREAMABLE_HTTP_PATH = "/mcp"


def _register_fastmcp_tools(
    app: FastMCP, config: AppConfig, client: HttpClient, cache: PlayerDataCache
) -> None:
    @app.tool(
        name="search",
        description="Search the Old School RuneScape wiki and list matching pages.",
    )
    async def search(
        query: Annotated[str, Field(description="Search query")],
        limit: Annotated[
            float, Field(description="Number of results to return (1-50)")
        ] = 10,
    ) -> str:
        return (await search_wiki(config, client, query, limit)).text

    @app.tool(
        name="summary",
        description="Get the plain-text intro summary of an Old School RuneScape wiki page.",
    )
    async def summary(
        title: Annotated[str, Field(description="Page title")],
    ) -> str:
        return (await get_summary(config, client, title)).text

    @app.tool(
        name="getPlayerData",
        description=(
            "Fetch a player's stats and progress synced by the WikiSync RuneLite plugin."
        ),
    )
    async def player_data(
        username: Annotated[
            Optional[str],
            Field(description="RuneLite username to fetch player data for"),
        ] = None,
        forceRefresh: Annotated[
            bool, Field(description="Force refresh player data from WikiSync API")
        ] = False,
    ) -> str:
        return (await get_player_data(cache, username, force_refresh=forceRefresh)).text


def create_app(
    config: AppConfig,
    *,
    client: Optional[HttpClient] = None,
    cache: Optional[PlayerDataCache] = None,
) -> FastMCP:
    """Build the FastMCP application with all tools registered.

    The player-data cache is created here and lives as long as the
    returned application.
    """

    if client is None:
        client = HttpClient.from_config(config)
    if cache is None:
        cache = PlayerDataCache.from_config(config, client)

    app = FastMCP(
        SERVER_NAME,
        host=config.host,
        port=config.port,
        sse_path=SSE_PATH,
        message_path=SSE_MESSAGE_PATH,
        streamable_http_path=STREAMABLE_HTTP_PATH,
    )
    _register_fastmcp_tools(app, config, client, cache)
    return app


def create_http_app(app: FastMCP) -> Starlette:
    """Serve both HTTP transports of `app` from a single ASGI app."""

    sse = app.sse_app()
    streamable = app.streamable_http_app()

    @contextlib.asynccontextmanager
    async def lifespan(_: Starlette):
        async with app.session_manager.run():
            yield

    return Starlette(routes=[*sse.routes, *streamable.routes], lifespan=lifespan)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=SERVER_NAME, description=__doc__.splitlines()[0])
    parser.add_argument(
        "--transport", choices=["stdio", "sse", "streamable-http", "http"], default=None
    )
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--log-level", dest="log_level", default=None)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    """Run the MCP server.

    This function loads configuration (command-line flags win over the
    environment), creates the application and serves it on the selected
    transport. It is safe to import and call `main()` from other
    entrypoints.
    """

    argv = argv if argv is not None else sys.argv[1:]
    args = _parse_args(argv)
    overrides = {k: v for k, v in vars(args).items() if v is not None}
    config = AppConfig(**overrides) if overrides else load_config()

    configure_logging(config.log_level)
    app = create_app(config)

    if config.transport == "stdio":
        logger.info("{} {} serving on stdio", SERVER_NAME, __version__)
    else:
        logger.info(
            "{} {} serving {} on {}:{}",
            SERVER_NAME,
            __version__,
            config.transport,
            config.host,
            config.port,
        )

    if config.transport == "http":
        uvicorn.run(
            create_http_app(app),
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )
    else:
        app.run(transport=config.transport)


if __name__ == "__main__":  # pragma: no cover
    main()
