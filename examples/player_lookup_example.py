"""Example: Looking up wiki pages and player data without an MCP client

This script calls the tool functions directly, the same way the MCP
server does, and shows the player-data cache serving a repeat lookup.
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from osrs_wiki_mcp.config import load_config
from osrs_wiki_mcp.http_client import HttpClient
from osrs_wiki_mcp.player_cache import PlayerDataCache
from osrs_wiki_mcp.tools import get_player_data, get_summary, search_wiki


async def run(username: str) -> None:
    config = load_config()
    client = HttpClient.from_config(config)
    cache = PlayerDataCache.from_config(config, client)

    print("🚀 OSRS Wiki Example")
    print("=" * 50)
    print(f"  API: {config.wiki_api_url}")
    print(f"  Sync: {config.sync_api_url}")
    print(f"  Cache TTL: {config.player_cache_ttl_seconds}s")

    print("\n🔍 search('dragon', 3)")
    print("-" * 50)
    print((await search_wiki(config, client, "dragon", 3)).text)

    print("\n📖 summary('Abyssal whip')")
    print("-" * 50)
    print((await get_summary(config, client, "Abyssal whip")).text)

    print(f"\n👤 getPlayerData('{username}')")
    print("-" * 50)
    result = await get_player_data(cache, username)
    print(result.text[:500])

    if result.ok:
        entry = cache.get_entry(username)
        print(f"\n✓ Cached at {entry.fetched_at:.0f}; repeat lookups within the TTL skip the network")
        await get_player_data(cache, username)


def main():
    username = sys.argv[1] if len(sys.argv) > 1 else "Zezima"
    asyncio.run(run(username))


if __name__ == "__main__":
    main()
