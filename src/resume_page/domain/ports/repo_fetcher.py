"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from resume_page.domain.entities import Repository


class RepoFetcher(Protocol):
    """Abstract contract for fetching a user's GitHub repositories."""

    async def fetch_user_repos(self, username: str) -> list[Repository]:
        """Return the user's most recently updated repositories."""
        ...

    async def fetch_repo_languages(self, username: str, repo: str) -> dict[str, int]:
        """Return language → byte-count mapping, or ``{}`` on any failure."""
        ...
