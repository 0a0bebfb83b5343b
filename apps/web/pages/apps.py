"""Django app configuration for the marketing pages."""

from django.apps import AppConfig


class PagesConfig(AppConfig):
    """Marketing pages app configuration."""

    name = "apps.web.pages"
    verbose_name = "Pages"
