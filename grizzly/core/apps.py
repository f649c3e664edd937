"""Core app configuration."""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Locale routing, shared view helpers and structured data."""

    name = "grizzly.core"
    verbose_name = "Core"
