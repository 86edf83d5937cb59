"""Load-projects use case — one load cycle of the projects section.

Fetches the repository list once, then every repository's languages
concurrently, and only returns when every languages request has settled.
Depends only on the :class:`RepoFetcher` port; the interface layer injects
the concrete adapter.
"""

from __future__ import annotations

import asyncio
import logging

from resume_page.domain.entities import ProjectCard, ProjectsPage, Repository
from resume_page.domain.ports.repo_fetcher import RepoFetcher
from resume_page.domain.value_objects import GITHUB_PROFILE_BASE, GitHubUsername
from resume_page.services.formatting import get_primary_language

logger = logging.getLogger(__name__)


class LoadProjectsUseCase:
    """Turns a username into the full set of project cards.

    Parameters
    ----------
    repo_fetcher:
        Adapter that can list repositories and their languages.
    profile_base_url:
        Base of the public profile link shown next to the cards.
    """

    def __init__(
        self,
        repo_fetcher: RepoFetcher,
        profile_base_url: str = GITHUB_PROFILE_BASE,
    ) -> None:
        self._fetcher = repo_fetcher
        self._profile_base = profile_base_url

    async def execute(self, raw_username: str | None) -> ProjectsPage:
        """Validate the username, fetch repositories and build the cards."""
        username = GitHubUsername.from_string(raw_username)
        profile_url = username.profile_url(self._profile_base)
        logger.info("Loading projects for %s", username)

        repos = await self._fetcher.fetch_user_repos(username.value)
        if not repos:
            logger.info("No public repositories for %s", username)
            return ProjectsPage(username=username.value, profile_url=profile_url)

        cards = await asyncio.gather(
            *(self._build_card(username.value, repo) for repo in repos)
        )
        logger.info("Rendered %d project card(s) for %s", len(cards), username)
        return ProjectsPage(
            username=username.value,
            profile_url=profile_url,
            cards=list(cards),
        )

    async def _build_card(self, username: str, repo: Repository) -> ProjectCard:
        languages = await self._fetcher.fetch_repo_languages(username, repo.name)
        return ProjectCard(repo=repo, primary_language=get_primary_language(languages))
