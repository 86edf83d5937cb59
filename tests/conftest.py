"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any, AsyncIterator, Callable, Iterator

import httpx
import pytest
import pytest_asyncio
import respx
from httpx import ASGITransport, AsyncClient

from resume_page.infrastructure.config import get_settings
from resume_page.interface.app import create_app
from resume_page.interface.dependencies import shutdown, startup

GITHUB_API = "https://api.github.com"

_ENV_KEYS = (
    "GITHUB_API_URL",
    "GITHUB_PROFILE_URL",
    "GITHUB_TOKEN",
    "DEFAULT_USERNAME",
    "REPOS_PER_PAGE",
    "HTTP_TIMEOUT",
)


@pytest.fixture
def make_repo() -> Callable[..., dict[str, Any]]:
    """Factory for raw GitHub repository records."""

    def _make(name: str, **overrides: Any) -> dict[str, Any]:
        record: dict[str, Any] = {
            "name": name,
            "html_url": f"https://github.com/octocat/{name}",
            "description": f"The {name} project",
            "stargazers_count": 3,
            "forks_count": 1,
            "watchers_count": 3,
            "updated_at": "2024-01-15T10:00:00Z",
        }
        record.update(overrides)
        return record

    return _make


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # Settings are cached per process and read from the environment.
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def github() -> Iterator[respx.MockRouter]:
    """Mocked GitHub REST API; unmatched requests fail the test."""
    with respx.mock(base_url=GITHUB_API, assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient() as client:
        yield client


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """In-process client for the app, with shared resources started."""
    app = create_app()
    await startup()
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            yield c
    finally:
        await shutdown()
