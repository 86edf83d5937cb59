"""Pydantic response DTOs for the JSON API boundary."""

from __future__ import annotations

from pydantic import BaseModel

from resume_page.domain.entities import ProjectCard, ProjectsPage
from resume_page.services.card_renderer import EMPTY_MESSAGE
from resume_page.services.formatting import format_date, format_description


class ProjectCardSchema(BaseModel):
    """One rendered project card."""

    name: str
    url: str
    description: str
    stars: int
    forks: int
    watchers: int
    language: str
    updated: str

    @classmethod
    def from_card(cls, card: ProjectCard) -> ProjectCardSchema:
        repo = card.repo
        return cls(
            name=repo.name,
            url=repo.html_url,
            description=format_description(repo.description),
            stars=repo.stargazers_count,
            forks=repo.forks_count,
            watchers=repo.watchers_count,
            language=card.primary_language,
            updated=format_date(repo.updated_at),
        )


class ProjectsResponse(BaseModel):
    """Successful response from ``GET /api/users/{username}/projects``."""

    username: str
    profile_url: str
    projects: list[ProjectCardSchema]
    message: str | None = None

    @classmethod
    def from_page(cls, page: ProjectsPage) -> ProjectsResponse:
        return cls(
            username=page.username,
            profile_url=page.profile_url,
            projects=[ProjectCardSchema.from_card(c) for c in page.cards],
            message=EMPTY_MESSAGE if page.is_empty else None,
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
