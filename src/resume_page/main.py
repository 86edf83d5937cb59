"""Console entry point: ``resume-page``."""

from __future__ import annotations

import logging

import uvicorn

from resume_page.infrastructure.config import Settings, get_settings

_LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


def configure_logging(settings: Settings) -> None:
    """Root logging at the configured level; httpx request lines only on DEBUG."""
    level = settings.log_level.upper()
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    if level != "DEBUG":
        for noisy in ("httpx", "httpcore"):
            logging.getLogger(noisy).setLevel(logging.WARNING)


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(
        "resume_page.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
