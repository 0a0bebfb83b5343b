"""Django app configuration for the contact pipeline."""

from django.apps import AppConfig


class ContactConfig(AppConfig):
    """Contact form app configuration."""

    name = "apps.web.contact"
    verbose_name = "Contact"
