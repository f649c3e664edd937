"""Marketing app configuration."""

from django.apps import AppConfig


class MarketingConfig(AppConfig):
    """Marketing pages and the contact/newsletter relays."""

    name = "grizzly.marketing"
    verbose_name = "Marketing"
