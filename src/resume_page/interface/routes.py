"""Routes — thin controllers that delegate to the load-projects use case."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from resume_page.domain.exceptions import ResumePageError
from resume_page.infrastructure.config import Settings, get_settings
from resume_page.interface.dependencies import get_renderer, get_use_case
from resume_page.interface.error_handlers import status_for
from resume_page.interface.schemas import ErrorResponse, ProjectsResponse
from resume_page.services.card_renderer import CardRenderer
from resume_page.services.load_projects import LoadProjectsUseCase

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(env=get_renderer().env)


async def _render_projects(
    use_case: LoadProjectsUseCase, renderer: CardRenderer, username: str
) -> tuple[str, int]:
    """Run one load and return the container markup with its status code."""
    try:
        page = await use_case.execute(username)
    except ResumePageError as exc:
        logger.warning("Error loading projects: %s", exc)
        return renderer.render_error(str(exc)), status_for(exc)
    return renderer.render_page(page), 200


@router.get("/", response_class=HTMLResponse, name="index")
async def index(
    request: Request,
    username: str | None = None,
    settings: Settings = Depends(get_settings),
    use_case: LoadProjectsUseCase = Depends(get_use_case),
    renderer: CardRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """The resume page, with projects pre-rendered when a user is known."""
    target = username if username is not None else settings.preload_username
    projects_html = ""
    if target is not None:
        projects_html, _ = await _render_projects(use_case, renderer, target)

    shown = (target or "").strip() or settings.default_username
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "settings": settings,
            "username": shown,
            "profile_url": f"{settings.github_profile_url.rstrip('/')}/{shown}",
            "projects_html": projects_html,
        },
    )


@router.get("/projects", response_class=HTMLResponse, name="projects_fragment")
async def projects_fragment(
    username: str = "",
    use_case: LoadProjectsUseCase = Depends(get_use_case),
    renderer: CardRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Replacement markup for ``#projects-container``."""
    content, status_code = await _render_projects(use_case, renderer, username)
    return HTMLResponse(content=content, status_code=status_code)


@router.get(
    "/api/users/{username}/projects",
    response_model=ProjectsResponse,
    responses={
        404: {"model": ErrorResponse, "description": "GitHub user not found"},
        422: {"model": ErrorResponse, "description": "Empty username"},
        429: {"model": ErrorResponse, "description": "GitHub API rate limit exceeded"},
        502: {"model": ErrorResponse, "description": "GitHub API or network error"},
    },
)
async def user_projects(
    username: str,
    use_case: LoadProjectsUseCase = Depends(get_use_case),
) -> ProjectsResponse:
    """Project cards for a GitHub user as JSON."""
    page = await use_case.execute(username)
    return ProjectsResponse.from_page(page)


@router.get("/health", include_in_schema=False)
async def health() -> dict[str, str]:
    """Liveness check; never touches GitHub."""
    return {"status": "ok"}
