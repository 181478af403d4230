from __future__ import annotations

from typing import Any

import pytest

from osrs_wiki_mcp.config import AppConfig
from osrs_wiki_mcp.http_client import HttpClient


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, error: Exception | None = None):
        self._payload = payload
        self.status_code = status_code
        self._error = error

    def json(self) -> Any:
        if self._error:
            raise self._error
        return self._payload


class FakeHttpx:
    """Records GET calls and replays queued responses or exceptions."""

    def __init__(self) -> None:
        self.calls: list[dict] = []
        self._queue: list[Any] = []

    def respond(self, payload: Any = None, *, status_code: int = 200, json_error: Exception | None = None) -> None:
        self._queue.append(FakeResponse(payload, status_code, json_error))

    def fail(self, error: Exception) -> None:
        self._queue.append(error)

    def client(self, *args, **kwargs) -> "StubClient":
        return StubClient(self)


class StubClient:
    def __init__(self, fake: FakeHttpx):
        self._fake = fake

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def get(self, url, params=None, headers=None, timeout=None):
        self._fake.calls.append(
            {"url": url, "params": params, "headers": headers, "timeout": timeout}
        )
        if not self._fake._queue:
            raise AssertionError(f"unexpected GET {url}")
        item = self._fake._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def fake_httpx(monkeypatch) -> FakeHttpx:
    fake = FakeHttpx()
    monkeypatch.setattr("osrs_wiki_mcp.http_client.httpx.AsyncClient", fake.client)
    return fake


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(_env_file=None)


@pytest.fixture
def client(config: AppConfig) -> HttpClient:
    return HttpClient.from_config(config)
