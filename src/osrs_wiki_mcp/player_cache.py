"""In-memory cache of WikiSync player data.

Entries are keyed by username and replaced wholesale whenever a fresh
fetch succeeds. Failed fetches (bad status, empty payload, transport
errors) leave any existing entry in place so a later call can still be
served from it once the upstream recovers.

Concurrent lookups for the same username are not coalesced: both may
miss the cache and fetch, and the last one to finish wins.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, Optional

from loguru import logger

from .config import AppConfig
from .errors import NotFoundError, UpstreamStatusError, to_error_text
from .http_client import HttpClient
from .schemas import CacheEntry, PlayerDataResult
from .utils import encode_uri_component

DEFAULT_TTL_SECONDS = 3600.0

NO_PLAYER_DATA_MESSAGE = (
    "No player data found. Please ensure that the username is correct. "
    "If you are using RuneLite, please install the WikiSync plugin and ensure "
    "you are using the RuneLite client. This feature is only available for "
    "RuneLite users."
)


def _has_player_data(data: Any) -> bool:
    """True for a non-empty JSON object, array or string; scalars carry no data."""
    return isinstance(data, (dict, list, str)) and bool(data)


class PlayerDataCache:
    """TTL cache in front of the WikiSync player endpoint.

    Args:
        client: HTTP adapter used for cache misses.
        sync_api_url: Base URL of the sync service, without trailing slash.
        ttl_seconds: Maximum age of an entry that is still served.
        clock: Returns the current time in seconds; injectable for tests.
    """

    def __init__(
        self,
        client: HttpClient,
        sync_api_url: str,
        *,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._client = client
        self._sync_api_url = sync_api_url.rstrip("/")
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    @classmethod
    def from_config(cls, config: AppConfig, client: HttpClient) -> PlayerDataCache:
        return cls(
            client,
            config.sync_api_url,
            ttl_seconds=config.player_cache_ttl_seconds,
        )

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, username: object) -> bool:
        return username in self._entries

    def get_entry(self, username: str) -> Optional[CacheEntry]:
        """Return the stored entry for `username`, fresh or not."""
        return self._entries.get(username)

    def player_url(self, username: str) -> str:
        return (
            f"{self._sync_api_url}/runelite/player/"
            f"{encode_uri_component(username)}/STANDARD"
        )

    async def get(self, username: str, force_refresh: bool = False) -> PlayerDataResult:
        """Return player data, fetching it when missing, stale or forced.

        Never raises: failures come back as a result with `data=None`
        and a message describing what went wrong.
        """

        now = self._clock()
        entry = self._entries.get(username)
        if (
            entry is not None
            and not force_refresh
            and now - entry.fetched_at < self._ttl_seconds
        ):
            logger.debug("Player data cache hit for {}", username)
            return PlayerDataResult(data=entry.data)

        try:
            response = await self._client.get_json(self.player_url(username))
            if not response.ok:
                raise UpstreamStatusError(response.status_code, {"username": username})
            if not _has_player_data(response.data):
                raise NotFoundError(
                    NO_PLAYER_DATA_MESSAGE, {"username": username}, marker=""
                )
        except Exception as e:
            logger.warning("Player data lookup for {} failed: {}", username, to_error_text(e))
            return PlayerDataResult.failure(e)

        self._entries[username] = CacheEntry(
            username=username, data=response.data, fetched_at=now
        )
        logger.debug("Stored player data for {}", username)
        return PlayerDataResult(data=response.data)
