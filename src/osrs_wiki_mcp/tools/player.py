"""Player-data tool function."""

from __future__ import annotations

import json
from typing import Optional

from ..player_cache import PlayerDataCache
from ..schemas import ToolResult

MISSING_USERNAME_MESSAGE = "Please provide your RuneLite username to fetch player data."
NO_DATA_FALLBACK = "No player data found."
PLAYER_DATA_HEADER = (
    "Player data fetched from WikiSync. "
    "This feature is only available for RuneLite client users."
)


async def get_player_data(
    cache: PlayerDataCache,
    username: Optional[str],
    force_refresh: bool = False,
) -> ToolResult:
    """Return a player's WikiSync data as indented JSON text.

    A blank username is rejected without touching the cache.
    """

    if not username or not username.strip():
        return ToolResult(text=MISSING_USERNAME_MESSAGE, error="validation")

    result = await cache.get(username, force_refresh=force_refresh)
    if result.data is None:
        return ToolResult(text=result.message or NO_DATA_FALLBACK, error=result.error)

    body = json.dumps(result.data, indent=2, ensure_ascii=False)
    return ToolResult.success(f"{PLAYER_DATA_HEADER}\n\n{body}")
