"""Template context shared by every page."""

from typing import Any

from django.http import HttpRequest

from apps.web.pages.content import SITE_NAME

NAV_LINKS: list[tuple[str, str]] = [
    ("pages:home", "Home"),
    ("pages:about", "About"),
    ("pages:services", "Services"),
    ("pages:portfolio", "Portfolio"),
    ("pages:contact", "Contact"),
]


def site(_request: HttpRequest) -> dict[str, Any]:
    return {"site_name": SITE_NAME, "nav_links": NAV_LINKS}
