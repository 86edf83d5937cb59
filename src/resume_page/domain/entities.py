"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Repository:
    """One repository record as reported by ``GET /users/{user}/repos``."""

    name: str
    html_url: str
    description: str | None = None
    stargazers_count: int = 0
    forks_count: int = 0
    watchers_count: int = 0
    updated_at: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Repository:
        """Build a repository from a raw GitHub API record."""
        return cls(
            name=data["name"],
            html_url=data.get("html_url", ""),
            description=data.get("description"),
            stargazers_count=data.get("stargazers_count") or 0,
            forks_count=data.get("forks_count") or 0,
            watchers_count=data.get("watchers_count") or 0,
            updated_at=data.get("updated_at"),
        )


@dataclass(frozen=True, slots=True)
class ProjectCard:
    """A repository paired with its primary language, ready for display."""

    repo: Repository
    primary_language: str = "Unknown"


@dataclass(frozen=True, slots=True)
class ProjectsPage:
    """The outcome of one load: every card for one user, in API order."""

    username: str
    profile_url: str
    cards: list[ProjectCard] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.cards
