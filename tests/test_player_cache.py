import httpx
import pytest

from osrs_wiki_mcp.config import AppConfig
from osrs_wiki_mcp.player_cache import NO_PLAYER_DATA_MESSAGE, PlayerDataCache

SYNC = "https://sync.runescape.wiki"
PLAYER = {"username": "Zezima", "levels": {"Attack": 99}}


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(client, clock) -> PlayerDataCache:
    return PlayerDataCache(client, SYNC, ttl_seconds=3600, clock=clock)


@pytest.mark.asyncio
async def test_fetch_populates_cache(cache, clock, fake_httpx) -> None:
    fake_httpx.respond(PLAYER)

    result = await cache.get("Zezima")

    assert result.data == PLAYER
    assert result.message is None
    assert fake_httpx.calls[0]["url"] == f"{SYNC}/runelite/player/Zezima/STANDARD"
    assert fake_httpx.calls[0]["params"] is None
    assert fake_httpx.calls[0]["headers"]["User-Agent"]
    entry = cache.get_entry("Zezima")
    assert entry.data == PLAYER
    assert entry.fetched_at == clock.now


@pytest.mark.asyncio
async def test_username_is_percent_encoded(cache, fake_httpx) -> None:
    fake_httpx.respond(PLAYER)

    await cache.get("Iron Man/2")

    assert fake_httpx.calls[0]["url"] == f"{SYNC}/runelite/player/Iron%20Man%2F2/STANDARD"


@pytest.mark.asyncio
async def test_fresh_entry_is_served_without_request(cache, clock, fake_httpx) -> None:
    fake_httpx.respond(PLAYER)
    first = await cache.get("Zezima")

    clock.advance(3599.999)
    second = await cache.get("Zezima")

    assert second.data is first.data
    assert len(fake_httpx.calls) == 1


@pytest.mark.asyncio
async def test_stale_entry_is_refetched(cache, clock, fake_httpx) -> None:
    fake_httpx.respond(PLAYER)
    await cache.get("Zezima")

    clock.advance(3600.001)
    fake_httpx.respond({"username": "Zezima", "levels": {"Attack": 1}})
    result = await cache.get("Zezima")

    assert len(fake_httpx.calls) == 2
    assert result.data["levels"]["Attack"] == 1
    assert cache.get_entry("Zezima").fetched_at == clock.now


@pytest.mark.asyncio
async def test_force_refresh_always_requests(cache, fake_httpx) -> None:
    fake_httpx.respond(PLAYER)
    await cache.get("Zezima")

    fake_httpx.respond(PLAYER)
    await cache.get("Zezima", force_refresh=True)
    fake_httpx.respond(PLAYER)
    await cache.get("Zezima", force_refresh=True)

    assert len(fake_httpx.calls) == 3
    assert len(cache) == 1


@pytest.mark.asyncio
async def test_entries_are_per_username(cache, fake_httpx) -> None:
    fake_httpx.respond(PLAYER)
    fake_httpx.respond({"username": "Lynx Titan"})

    await cache.get("Zezima")
    await cache.get("Lynx Titan")

    assert "Zezima" in cache
    assert "Lynx Titan" in cache
    assert len(cache) == 2


@pytest.mark.asyncio
async def test_refresh_replaces_entry_wholesale(cache, fake_httpx) -> None:
    fake_httpx.respond({"a": 1, "b": 2})
    await cache.get("Zezima")
    fake_httpx.respond({"c": 3})
    await cache.get("Zezima", force_refresh=True)

    assert cache.get_entry("Zezima").data == {"c": 3}


@pytest.mark.asyncio
async def test_empty_object_is_not_cached(cache, fake_httpx) -> None:
    fake_httpx.respond({})

    result = await cache.get("Nobody")

    assert result.data is None
    assert result.message == NO_PLAYER_DATA_MESSAGE
    assert result.error == "empty_result"
    assert "Nobody" not in cache


@pytest.mark.asyncio
async def test_empty_object_never_overwrites_existing_entry(cache, clock, fake_httpx) -> None:
    fake_httpx.respond(PLAYER)
    await cache.get("Zezima")

    fake_httpx.respond({})
    result = await cache.get("Zezima", force_refresh=True)

    assert result.message == NO_PLAYER_DATA_MESSAGE
    assert cache.get_entry("Zezima").data == PLAYER


@pytest.mark.asyncio
async def test_error_status_preserves_stale_entry(cache, clock, fake_httpx) -> None:
    fake_httpx.respond(PLAYER)
    await cache.get("Zezima")
    fetched_at = cache.get_entry("Zezima").fetched_at

    clock.advance(7200)
    fake_httpx.respond(status_code=500)
    result = await cache.get("Zezima")

    assert result.data is None
    assert result.message == "❌ API Error: 500"
    assert result.error == "upstream_status"
    assert cache.get_entry("Zezima").fetched_at == fetched_at


@pytest.mark.asyncio
async def test_not_found_status_is_not_cached(cache, fake_httpx) -> None:
    fake_httpx.respond(status_code=404)

    result = await cache.get("Nobody")

    assert result.message == "❌ API Error: 404"
    assert len(cache) == 0


@pytest.mark.asyncio
async def test_transport_error_is_returned_as_message(cache, fake_httpx) -> None:
    fake_httpx.fail(httpx.ConnectError("name resolution failed"))

    result = await cache.get("Zezima")

    assert result.data is None
    assert result.message == "❌ Request failed: name resolution failed"
    assert result.error == "exception"
    assert len(cache) == 0


def test_ttl_comes_from_config(client) -> None:
    config = AppConfig(_env_file=None, player_cache_ttl_seconds=60)
    cache = PlayerDataCache.from_config(config, client)

    assert cache.ttl_seconds == 60
    assert cache.player_url("a b") == f"{SYNC}/runelite/player/a%20b/STANDARD"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [5, True, 0.5, [], ""])
async def test_scalar_or_empty_payload_is_not_cached(cache, fake_httpx, payload) -> None:
    fake_httpx.respond(payload)

    result = await cache.get("Zezima")

    assert result.data is None
    assert result.message == NO_PLAYER_DATA_MESSAGE
    assert len(cache) == 0


@pytest.mark.asyncio
async def test_non_empty_array_payload_is_cached(cache, fake_httpx) -> None:
    fake_httpx.respond([{"skill": "Attack", "level": 99}])

    result = await cache.get("Zezima")

    assert result.data == [{"skill": "Attack", "level": 99}]
    assert "Zezima" in cache
