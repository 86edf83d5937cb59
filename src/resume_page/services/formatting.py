"""Display helpers for repository data.

Pure functions: no I/O, no state.  Each takes a raw API value and returns the
string shown on a project card.
"""

from __future__ import annotations

from datetime import datetime
from typing import Mapping

UNKNOWN_LANGUAGE = "Unknown"
NO_DESCRIPTION = "No description available"
INVALID_DATE = "Invalid Date"

_MAX_DESCRIPTION_CHARS = 100


def get_primary_language(languages: Mapping[str, int] | None) -> str:
    """Return the language with the most bytes, or ``"Unknown"``.

    Ties go to whichever language the mapping yields first; callers should
    not rely on that order.
    """
    if not languages:
        return UNKNOWN_LANGUAGE
    return max(languages, key=languages.__getitem__)


def format_description(description: str | None) -> str:
    """Truncate long descriptions to 100 characters plus an ellipsis."""
    if not description:
        return NO_DESCRIPTION
    if len(description) > _MAX_DESCRIPTION_CHARS:
        return description[:_MAX_DESCRIPTION_CHARS] + "..."
    return description


def format_date(timestamp: str | None) -> str:
    """``"2024-01-15T10:00:00Z"`` → ``"Jan 2024"``."""
    if not timestamp:
        return INVALID_DATE
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return INVALID_DATE
    return parsed.strftime("%b %Y")
