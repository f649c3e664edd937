from __future__ import annotations

from typing import TYPE_CHECKING

from django.apps import apps

if TYPE_CHECKING:
    from grizzly.content.loader import ContentCatalog


def get_catalog() -> ContentCatalog:
    """Return the catalog loaded by the ``content`` app at startup."""
    return apps.get_app_config("content").catalog
