"""Card renderer — turns a load result into the projects container markup.

Every load replaces the container wholesale, so each method here returns the
complete inner HTML of ``#projects-container``.
"""

from __future__ import annotations

from jinja2 import Environment, PackageLoader

from resume_page.domain.entities import ProjectCard, ProjectsPage
from resume_page.services.formatting import format_date, format_description

LOADING_MESSAGE = "Loading projects..."
EMPTY_MESSAGE = "No public repositories found for this user."


def build_environment() -> Environment:
    """Jinja2 environment shared by the fragments and the full page."""
    env = Environment(
        loader=PackageLoader("resume_page", "templates"),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["description"] = format_description
    env.filters["month_year"] = format_date
    return env


class CardRenderer:
    """Render project cards and the container's placeholder states."""

    def __init__(self, env: Environment | None = None) -> None:
        self.env = env or build_environment()

    def render_card(self, card: ProjectCard) -> str:
        return self.env.get_template("partials/project_card.html").render(card=card)

    def render_cards(self, cards: list[ProjectCard]) -> str:
        return "".join(self.render_card(card) for card in cards)

    def render_page(self, page: ProjectsPage) -> str:
        """Cards for a non-empty page, the empty-state message otherwise."""
        if page.is_empty:
            return self.render_message(EMPTY_MESSAGE)
        return self.render_cards(page.cards)

    def render_message(self, message: str) -> str:
        return self.env.get_template("partials/message.html").render(message=message)

    def render_loading(self) -> str:
        return self.render_message(LOADING_MESSAGE)

    def render_error(self, message: str) -> str:
        return self.env.get_template("partials/error.html").render(message=message)
