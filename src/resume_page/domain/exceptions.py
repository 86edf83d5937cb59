"""Domain exception hierarchy.

The message of every exception is the text shown to the visitor.  Inner
layers raise these; the interface layer renders them as an error block
(HTML routes) or an error envelope (JSON API).
"""

from __future__ import annotations


class ResumePageError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class EmptyUsernameError(ResumePageError):
    """No GitHub username was supplied."""


class InvalidUsernameError(ResumePageError):
    """The supplied text cannot be a GitHub login."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class UserNotFoundError(ResumePageError):
    """The GitHub user does not exist (404)."""


class GitHubRateLimitError(ResumePageError):
    """GitHub API rate limit exceeded (403)."""


class GitHubApiError(ResumePageError):
    """GitHub answered with an unexpected status or an unreadable payload."""


class GitHubNetworkError(ResumePageError):
    """The request to GitHub never produced a response."""
