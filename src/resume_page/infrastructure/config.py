"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from resume_page.domain.value_objects import GITHUB_PROFILE_BASE

PLACEHOLDER_USERNAME = "yourusername"


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_api_url: str = "https://api.github.com"
    github_profile_url: str = GITHUB_PROFILE_BASE
    github_token: SecretStr | None = None
    default_username: str = PLACEHOLDER_USERNAME
    repos_per_page: int = 6
    http_timeout: float | None = None

    resume_name: str = "Your Name"
    resume_title: str = "Software Engineer"
    resume_summary: str = (
        "Engineer who enjoys building reliable services and small, sharp tools."
    )
    contact_email: str = "you@example.com"
    contact_location: str = "Somewhere on Earth"
    skills: list[str] = ["Python", "FastAPI", "asyncio", "SQL", "Docker", "Git"]

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def preload_username(self) -> str | None:
        """Username to render on first page load, if one is configured."""
        username = self.default_username.strip()
        if not username or username == PLACEHOLDER_USERNAME:
            return None
        return username


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
