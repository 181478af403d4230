"""Outbound HTTP adapter shared by every tool.

Each call opens a short-lived `httpx.AsyncClient`, sends one GET with the
configured User-Agent, follows redirects, and decodes the JSON body of
successful responses. Transport and decode failures propagate to the
caller, which renders them as text.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from loguru import logger

from .config import AppConfig
from .schemas import ApiResponse


class HttpClient:
    """Thin GET-and-decode wrapper around httpx.

    Args:
        user_agent: Value of the `User-Agent` header sent with every request.
        timeout_seconds: Per-request timeout. When None, httpx's default
            timeout is left in place.
        transport: Optional httpx transport, e.g. `httpx.MockTransport`.
    """

    def __init__(
        self,
        user_agent: str,
        timeout_seconds: Optional[float] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.user_agent = user_agent
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_config(cls, config: AppConfig) -> HttpClient:
        return cls(config.user_agent, timeout_seconds=config.timeout_seconds)

    async def get_json(
        self, url: str, params: Optional[Dict[str, str]] = None
    ) -> ApiResponse:
        """GET `url` and return its status plus decoded body.

        Raises:
            httpx.HTTPError: On connection, protocol or timeout failures.
            ValueError: If a successful response body is not valid JSON.
        """

        kwargs: Dict[str, Any] = {"headers": {"User-Agent": self.user_agent}}
        if params is not None:
            kwargs["params"] = params
        if self.timeout_seconds is not None:
            kwargs["timeout"] = self.timeout_seconds

        logger.debug("GET {} params={}", url, params)
        async with httpx.AsyncClient(
            follow_redirects=True, transport=self._transport
        ) as client:
            response = await client.get(url, **kwargs)

        result = ApiResponse(status_code=response.status_code)
        if not result.ok:
            logger.warning("GET {} returned HTTP {}", url, response.status_code)
            return result

        result.data = response.json()
        return result
