"""Data models shared by the tools, the HTTP adapter and the cache.

Upstream response items are parsed into Pydantic models; internal
results and cache entries are plain dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, Field

from .errors import ErrorKind, as_app_error, to_error_text


class SearchResult(BaseModel):
    """One hit from the wiki's `list=search` query.

    Attributes:
        title: Page title.
        snippet_html: Matching excerpt, with the wiki's highlight markup.
    """

    title: str = ""
    snippet_html: str = Field(default="", alias="snippet")

    model_config = {"populate_by_name": True}


class SummaryPage(BaseModel):
    """One page from the wiki's `prop=extracts` query.

    Attributes:
        title: Page title as resolved by the wiki.
        extract: Plain-text intro section; empty for missing pages.
    """

    title: str = ""
    extract: str = ""


@dataclass
class ApiResponse:
    """Status and decoded JSON body of an outbound GET.

    `data` is only decoded for successful responses.
    """

    status_code: int
    data: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass
class ToolResult:
    """Text returned by a tool, tagged with an error kind when it failed."""

    text: str
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> ToolResult:
        return cls(text=text)

    @classmethod
    def failure(cls, error: Exception) -> ToolResult:
        return cls(text=to_error_text(error), error=as_app_error(error).kind)


@dataclass
class CacheEntry:
    username: str
    data: Any
    fetched_at: float


@dataclass
class PlayerDataResult:
    """Outcome of a player-data lookup.

    Exactly one of `data` and `message` is set.
    """

    data: Any = None
    message: Optional[str] = None
    error: Optional[ErrorKind] = None

    @classmethod
    def failure(cls, error: Exception) -> PlayerDataResult:
        return cls(data=None, message=to_error_text(error), error=as_app_error(error).kind)
