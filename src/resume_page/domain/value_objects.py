"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from resume_page.domain.exceptions import EmptyUsernameError, InvalidUsernameError

GITHUB_PROFILE_BASE = "https://github.com"

# GitHub logins: alphanumerics and single hyphens, at most 39 characters.
_GITHUB_LOGIN_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,38})$")


@dataclass(frozen=True, slots=True)
class GitHubUsername:
    """Validated GitHub login.

    Trims surrounding whitespace and rejects anything that could not be a
    GitHub login, so the value is always safe as a single URL path segment.
    """

    value: str

    @classmethod
    def from_string(cls, raw: str | None) -> GitHubUsername:
        """Parse and validate a raw username."""
        value = (raw or "").strip()
        if not value:
            raise EmptyUsernameError("Please enter a GitHub username")
        if not _GITHUB_LOGIN_RE.match(value):
            raise InvalidUsernameError(
                f"Invalid GitHub username: '{value}'. "
                "Usernames may only contain letters, digits and hyphens."
            )
        return cls(value=value)

    def profile_url(self, base: str = GITHUB_PROFILE_BASE) -> str:
        return f"{base.rstrip('/')}/{self.value}"

    def __str__(self) -> str:
        return self.value
