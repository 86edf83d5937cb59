"""FastAPI dependency injection wiring."""

from __future__ import annotations

from functools import lru_cache

import httpx
from fastapi import Depends

from resume_page.infrastructure.config import Settings, get_settings
from resume_page.infrastructure.github_rest_adapter import GitHubRestAdapter
from resume_page.services.card_renderer import CardRenderer
from resume_page.services.load_projects import LoadProjectsUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_http_client() -> httpx.AsyncClient:
    assert _http_client is not None, "startup() was not called"
    return _http_client


@lru_cache(maxsize=1)
def get_renderer() -> CardRenderer:
    """Return the shared card renderer (one Jinja2 environment per process)."""
    return CardRenderer()


def get_use_case(
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> LoadProjectsUseCase:
    """Build the use case with the GitHub adapter injected."""
    token = settings.github_token.get_secret_value() if settings.github_token else None
    github_adapter = GitHubRestAdapter(
        client=client,
        token=token,
        base_url=settings.github_api_url,
        per_page=settings.repos_per_page,
    )
    return LoadProjectsUseCase(
        repo_fetcher=github_adapter,
        profile_base_url=settings.github_profile_url,
    )
