"""Pytest configuration and fixtures for loresearch.

HTTP tests build a fresh app with create_app() against a temporary JSON
store document; settings are re-read by clearing the get_settings cache.
"""

import json
from collections.abc import AsyncIterator, Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from loresearch.core.config import get_settings
from loresearch.core.limiter import limiter
from loresearch.main import create_app

STORE_DOCUMENT: dict[str, Any] = {
    "Alice": {"description": "A brave cat owner"},
    "Bob": {"sentence": {"content": "Hello world", "tone": "calm"}},
    "Carol": {"description": "Category theory enthusiast", "age": 31},
}


@pytest.fixture
def write_store(tmp_path: Path) -> Callable[..., Path]:
    """Write a JSON store document under tmp_path and return its path."""

    def _write(document: Any, name: str = "store.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def store_file(write_store: Callable[..., Path]) -> Path:
    """Default store document with three entities."""
    return write_store(STORE_DOCUMENT)


@pytest.fixture
def make_client(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[..., AsyncClient]]:
    """Build an ASGI client for an app whose store document is at path.

    Extra keyword arguments are set as environment variables (upper-cased).
    """

    def _make(path: Path, **env: str) -> AsyncClient:
        monkeypatch.setenv("STORE_PATH", str(path))
        for key, value in env.items():
            monkeypatch.setenv(key.upper(), value)
        get_settings.cache_clear()
        limiter.reset()
        transport = ASGITransport(app=create_app())
        return AsyncClient(transport=transport, base_url="http://test")

    yield _make
    get_settings.cache_clear()


@pytest.fixture
async def client(
    make_client: Callable[..., AsyncClient], store_file: Path
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI) with the default store."""
    async with make_client(store_file) as ac:
        yield ac
