import datetime

import pytest
from django.apps import apps

from grizzly.content.loader import ContentCatalog
from grizzly.content.repository import ContentRepository
from grizzly.content.tests.factories import BlogPostFactory
from grizzly.content.tests.factories import WorkProjectFactory


@pytest.fixture(autouse=True)
def _site_settings(settings) -> None:
    settings.SITE_NAME = "Grizzly Agency"
    settings.SITE_URL = "https://grizzly-agency.com"
    settings.GRIZZLY_NOTIFICATION_EMAILS = ["team@grizzly-agency.test"]


@pytest.fixture
def catalog(monkeypatch) -> ContentCatalog:
    """
    Replace the loaded catalog with a small, predictable one.

    Blog posts ``frontend-new``, ``backend-mid`` and ``frontend-old`` (newest
    first) plus two work projects.
    """
    blog = ContentRepository(
        [
            BlogPostFactory(
                slug="frontend-old",
                title="Old frontend post",
                category="Frontend",
                date=datetime.date(2025, 1, 1),
            ),
            BlogPostFactory(
                slug="frontend-new",
                title="New frontend post",
                category="Frontend",
                date=datetime.date(2025, 3, 1),
            ),
            BlogPostFactory(
                slug="backend-mid",
                title="Backend post",
                category="Backend",
                date=datetime.date(2025, 2, 1),
            ),
        ],
    )
    work = ContentRepository(
        [
            WorkProjectFactory(slug="storefront", title="Storefront", category="E-commerce"),
            WorkProjectFactory(slug="booking-app", title="Booking app", category="Mobile"),
        ],
    )
    content = ContentCatalog(blog=blog, work=work)
    monkeypatch.setattr(apps.get_app_config("content"), "catalog", content)
    return content
