from __future__ import annotations

import json
import logging

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from resume_page import __version__
from resume_page.infrastructure.config import Settings
from resume_page.interface.app import create_app
from resume_page.interface.error_handlers import _on_validation_error
from resume_page.main import configure_logging


def test_app_metadata_and_static_mount() -> None:
    app = create_app()

    assert app.version == __version__
    assert "static" in {getattr(r, "name", None) for r in app.routes}


@pytest.mark.asyncio
async def test_validation_error_names_field_without_echoing_input() -> None:
    exc = RequestValidationError(
        [{"loc": ("query", "username"), "msg": "bad", "type": "value_error", "input": "<b>x</b>"}]
    )
    request = Request({"type": "http", "method": "GET", "path": "/projects", "headers": []})

    resp = await _on_validation_error(request, exc)

    assert resp.status_code == 422
    assert json.loads(resp.body) == {
        "status": "error",
        "message": "Invalid request parameter(s): username",
    }


def test_configure_logging_quiets_httpx(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging.getLogger("httpx"), "level", logging.NOTSET)

    configure_logging(Settings(log_level="info"))

    assert logging.getLogger("httpx").level == logging.WARNING
