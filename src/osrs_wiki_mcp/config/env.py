"""Environment configuration for the OSRS Wiki MCP Server.

Upstream endpoints, the identifying User-Agent, the player-data cache
TTL and the server transport can all be set from the environment:

```bash
export OSRS_WIKI_USER_AGENT="my-bot/1.0 (me@example.com)"
export OSRS_WIKI_PLAYER_CACHE_TTL_SECONDS=600
export OSRS_WIKI_TRANSPORT=http
export OSRS_WIKI_PORT=8787
```

these are rendered to the AppConfig class and can be accessed like this:

```python
from osrs_wiki_mcp.config import load_config
cfg = load_config()
print(cfg.wiki_api_url)
```
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Transport = Literal["stdio", "sse", "streamable-http", "http"]


class AppConfig(BaseSettings):
    """Application configuration settings loaded from environment variables.

    All environment variables are prefixed with OSRS_WIKI_ (e.g.,
    OSRS_WIKI_WIKI_API_URL). URL values are normalized so that callers
    can join paths without worrying about slashes.
    """

    # ---- upstream endpoints ----
    wiki_api_url: str = Field(
        default="https://oldschool.runescape.wiki/api.php",
        description="MediaWiki action API endpoint used for search and extracts",
    )
    wiki_page_url: str = Field(
        default="https://oldschool.runescape.wiki/w/",
        description="Prefix that page titles are appended to when building links",
    )
    sync_api_url: str = Field(
        default="https://sync.runescape.wiki",
        description="Base URL of the WikiSync player-data service",
    )
    user_agent: str = Field(
        default="osrs-wiki-mcp/2.0 (Python)",
        description="User-Agent header sent with every outbound request",
    )

    # ---- player data cache ----
    player_cache_ttl_seconds: float = Field(
        default=3600,
        gt=0,
        description="Maximum age of a cached player-data entry before it is re-fetched",
    )

    # ---- network tuning ----
    timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Outbound request timeout; httpx's default applies when unset",
    )

    # ---- server ----
    transport: Transport = Field(
        default="stdio",
        description="MCP transport: stdio, sse, streamable-http, or http (sse + mcp routes)",
    )
    host: str = Field(default="127.0.0.1", description="Bind address for HTTP transports")
    port: int = Field(default=8000, description="Bind port for HTTP transports")
    log_level: str = Field(default="INFO", description="Minimum log level written to stderr")

    # pydantic-settings v2 config
    model_config = SettingsConfigDict(
        env_prefix="OSRS_WIKI_",
        case_sensitive=False,
        env_file=(".env",),  # will read if present
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,  # make settings immutable
    )

    # ---- validators ----
    @field_validator("wiki_api_url", "sync_api_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, v):
        return v.rstrip("/") if isinstance(v, str) else v

    @field_validator("wiki_page_url", mode="before")
    @classmethod
    def _ensure_trailing_slash(cls, v):
        if isinstance(v, str) and not v.endswith("/"):
            return v + "/"
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


def load_config() -> AppConfig:
    """Load and validate application configuration from environment variables.

    • All variables are prefixed with OSRS_WIKI_ (e.g., OSRS_WIKI_PORT).
    • Missing values fall back to the documented defaults.
    • A `.env` file in the working directory is read if present.
    """
    return AppConfig()
