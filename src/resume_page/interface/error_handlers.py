"""Exception handlers for the JSON API.

Domain errors become ``{"status": "error", "message": "..."}`` with the
status from :data:`_EXCEPTION_STATUS`.  The HTML routes never reach these
handlers; they call :func:`status_for` themselves and render the error block.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from resume_page.domain.exceptions import (
    EmptyUsernameError,
    GitHubApiError,
    GitHubNetworkError,
    GitHubRateLimitError,
    InvalidUsernameError,
    ResumePageError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[ResumePageError], int]] = [
    (EmptyUsernameError, 422),
    (InvalidUsernameError, 422),
    (UserNotFoundError, 404),
    (GitHubRateLimitError, 429),
    (GitHubApiError, 502),
    (GitHubNetworkError, 502),
]

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


def status_for(exc: ResumePageError) -> int:
    """HTTP status code for a domain error (500 if unmapped)."""
    for exc_type, code in _EXCEPTION_STATUS:
        if isinstance(exc, exc_type):
            return code
    return 500


def error_envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


async def _on_domain_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ResumePageError)
    code = status_for(exc)
    logger.warning("%s %s -> %d %s", request.method, request.url.path, code, exc)
    return error_envelope(code, str(exc))


async def _on_validation_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    # Report only the parameter name; the raw input may be arbitrary text.
    fields = sorted({str(err.get("loc", ("?",))[-1]) for err in exc.errors()})
    return error_envelope(422, f"Invalid request parameter(s): {', '.join(fields)}")


async def _on_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_envelope(500, UNEXPECTED_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to *app*."""
    app.add_exception_handler(ResumePageError, _on_domain_error)
    app.add_exception_handler(RequestValidationError, _on_validation_error)
    app.add_exception_handler(Exception, _on_unexpected_error)
