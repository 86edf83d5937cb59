"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from importlib.resources import files
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from resume_page import __version__
from resume_page.interface.dependencies import shutdown, startup
from resume_page.interface.error_handlers import register_error_handlers
from resume_page.interface.routes import router

_STATIC_DIR = files("resume_page") / "static"


@asynccontextmanager
async def _http_client_lifespan(app: FastAPI) -> AsyncIterator[None]:
    # One shared httpx client per process, closed on shutdown.
    await startup()
    try:
        yield
    finally:
        await shutdown()


def create_app() -> FastAPI:
    """Resume page with its projects fragment, JSON API and static assets."""
    app = FastAPI(
        title="Resume Page",
        version=__version__,
        summary="Personal resume page with GitHub project cards.",
        lifespan=_http_client_lifespan,
    )
    register_error_handlers(app)
    app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")
    app.include_router(router)
    return app
