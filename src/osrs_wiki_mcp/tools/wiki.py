"""Wiki search and page-summary tool functions.

Both functions validate their input, make one request against the
MediaWiki action API and render the response as plain text. Failures
are returned as text too (see `errors.py`).
"""

from __future__ import annotations

from typing import Any, Dict, List

from loguru import logger

from ..config import AppConfig
from ..errors import BadRequestError, NotFoundError, UpstreamStatusError, to_error_text
from ..http_client import HttpClient
from ..schemas import SearchResult, SummaryPage, ToolResult
from ..utils import build_page_url, clean_snippet

MIN_SEARCH_LIMIT = 1
MAX_SEARCH_LIMIT = 50
DEFAULT_SEARCH_LIMIT = 10


def clamp_limit(limit: float) -> int:
    """Truncate `limit` to an integer and clamp it into [1, 50]."""
    return min(max(int(limit), MIN_SEARCH_LIMIT), MAX_SEARCH_LIMIT)


def _query_items(data: Any, key: str) -> List[Dict[str, Any]]:
    """Return `data["query"][key]`, or an empty list when any level is absent."""
    query = data.get("query") if isinstance(data, dict) else None
    items = query.get(key) if isinstance(query, dict) else None
    return [i for i in (items or []) if isinstance(i, dict)]


def _render_search(results: List[SearchResult], limit: int, page_url: str) -> str:
    lines = [f"📊 Results: {len(results)} (showing up to {limit})", ""]
    for idx, item in enumerate(results, 1):
        snippet = clean_snippet(item.snippet_html)
        lines.append(f"{idx}. {item.title}")
        if snippet.strip():
            lines.append(f"   - {snippet}")
        lines.append(f"   - {build_page_url(item.title, page_url)}")
    return "\n".join(lines)


async def search_wiki(
    config: AppConfig,
    client: HttpClient,
    query: str,
    limit: float = DEFAULT_SEARCH_LIMIT,
) -> ToolResult:
    """Full-text search over wiki pages.

    Args:
        config: Application configuration (API and page URLs).
        client: HTTP adapter.
        query: Search terms; must not be blank.
        limit: Maximum number of hits, clamped into [1, 50].

    Returns:
        A numbered listing of hits with snippets and links, or an error line.
    """

    try:
        if not query.strip():
            raise BadRequestError("query is required")
        limit = clamp_limit(limit)

        params = {
            "action": "query",
            "format": "json",
            "list": "search",
            "srsearch": query,
            "srlimit": str(limit),
        }
        response = await client.get_json(config.wiki_api_url, params)
        if not response.ok:
            raise UpstreamStatusError(response.status_code)

        results = [
            SearchResult(
                title=item.get("title") or "",
                snippet_html=item.get("snippet") or "",
            )
            for item in _query_items(response.data, "search")
        ]
        if not results:
            raise NotFoundError("No results found", {"query": query})

        return ToolResult.success(_render_search(results, limit, config.wiki_page_url))
    except Exception as e:
        logger.warning("Wiki search for {!r} failed: {}", query, to_error_text(e))
        return ToolResult.failure(e)


async def get_summary(config: AppConfig, client: HttpClient, title: str) -> ToolResult:
    """Fetch the plain-text intro of a wiki page.

    Returns:
        The page title, its extract and its link separated by blank
        lines, or an error line.
    """

    try:
        if not title.strip():
            raise BadRequestError("title is required")

        params = {
            "action": "query",
            "format": "json",
            "prop": "extracts",
            "exintro": "1",
            "explaintext": "1",
            "formatversion": "2",
            "titles": title,
        }
        response = await client.get_json(config.wiki_api_url, params)
        if not response.ok:
            raise UpstreamStatusError(response.status_code)

        pages = _query_items(response.data, "pages")
        if not pages:
            raise NotFoundError("Page not found", {"title": title})

        first = pages[0]
        page = SummaryPage(
            title=first.get("title") or title,
            extract=(first.get("extract") or "").strip(),
        )
        if not page.extract:
            raise NotFoundError(
                f"No summary available for '{page.title}'",
                {"title": page.title},
                marker="⚠️",
            )

        url = build_page_url(page.title, config.wiki_page_url)
        return ToolResult.success(f"📄 {page.title}\n\n{page.extract}\n\n🔗 {url}")
    except Exception as e:
        logger.warning("Wiki summary for {!r} failed: {}", title, to_error_text(e))
        return ToolResult.failure(e)
