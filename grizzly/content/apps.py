"""Content app configuration."""

from __future__ import annotations

from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


class ContentConfig(AppConfig):
    """Loads the static blog and work catalog once per process."""

    name = "grizzly.content"
    verbose_name = "Content"

    catalog = None

    def ready(self):
        from grizzly.content.loader import ContentLoadError
        from grizzly.content.loader import load_catalog

        try:
            self.catalog = load_catalog(settings.CONTENT_DATA_DIR)
        except ContentLoadError as exc:
            raise ImproperlyConfigured(str(exc)) from exc
