"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from urllib.parse import quote

import httpx

from resume_page.domain.entities import Repository
from resume_page.domain.exceptions import (
    GitHubApiError,
    GitHubNetworkError,
    GitHubRateLimitError,
    ResumePageError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        base_url: str = _GITHUB_API,
        per_page: int = 6,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._per_page = per_page
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "resume-page/1.0",
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def fetch_user_repos(self, username: str) -> list[Repository]:
        """GET /users/{username}/repos?sort=updated&per_page=N → [Repository]."""
        try:
            resp = await self._api_get(
                "users", username, "repos",
                params={"sort": "updated", "per_page": str(self._per_page)},
            )
            data = resp.json()
        except ValueError as exc:
            logger.warning("Error fetching repositories for %s: %s", username, exc)
            raise GitHubApiError(f"Invalid response from GitHub: {exc}") from exc
        except ResumePageError as exc:
            logger.warning("Error fetching repositories for %s: %s", username, exc)
            raise

        if not isinstance(data, list):
            raise GitHubApiError("Invalid response from GitHub: expected a list of repositories.")

        try:
            return [Repository.from_api(item) for item in data]
        except (KeyError, TypeError) as exc:
            raise GitHubApiError(f"Invalid repository record from GitHub: {exc}") from exc

    async def fetch_repo_languages(self, username: str, repo: str) -> dict[str, int]:
        """GET /repos/{username}/{repo}/languages → {lang: bytes}."""
        try:
            resp = await self._api_get("repos", username, repo, "languages")
            data = resp.json()
        except (ResumePageError, ValueError) as exc:
            logger.warning("Error fetching languages for %s/%s: %s", username, repo, exc)
            return {}

        if not isinstance(data, dict):
            logger.warning("Unexpected languages payload for %s/%s", username, repo)
            return {}
        return {
            lang: size
            for lang, size in data.items()
            if isinstance(size, int) and not isinstance(size, bool)
        }

    async def _api_get(
        self,
        *segments: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation.

        Each path segment is percent-encoded on its own, so caller-supplied
        names can never add segments or a query string.
        """
        if any(segment in ("", ".", "..") for segment in segments):
            raise GitHubApiError(f"Invalid GitHub API path: {segments!r}")
        endpoint = "/" + "/".join(quote(segment, safe="") for segment in segments)
        url = f"{self._base_url}{endpoint}"
        try:
            resp = await self._client.get(
                url, headers=self._api_headers, params=params
            )
        except httpx.InvalidURL as exc:
            raise GitHubApiError(f"Invalid GitHub API URL: {exc}") from exc
        except httpx.HTTPError as exc:
            raise GitHubNetworkError(
                f"Failed to reach GitHub: {exc}"
            ) from exc

        if resp.is_success:
            return resp

        if resp.status_code == 404:
            raise UserNotFoundError("User not found. Please check the username.")

        if resp.status_code == 403:
            reset_raw = resp.headers.get("x-ratelimit-reset", "")
            try:
                reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                    "%Y-%m-%d %H:%M:%S UTC"
                )
            except (ValueError, OSError):
                reset_str = reset_raw or "unknown"
            logger.warning("GitHub rate limit hit on %s; resets at %s", endpoint, reset_str)
            raise GitHubRateLimitError("API rate limit exceeded.")

        raise GitHubApiError(f"Error: {resp.status_code} {resp.reason_phrase}")
