"""Django app configuration for shared request handling."""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Core app configuration."""

    name = "apps.web.core"
    verbose_name = "Core"
