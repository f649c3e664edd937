from urllib.parse import urlsplit

from django.conf import settings
from django.contrib.sitemaps import Sitemap


class LocalizedSitemap(Sitemap):
    """
    Base sitemap for locale-prefixed pages.

    Every item is listed once per language with ``hreflang`` alternates.
    Absolute URLs are built from ``SITE_URL``, not the request host.
    """

    i18n = True
    alternates = True
    x_default = True

    def get_protocol(self, protocol=None):
        return self.protocol or urlsplit(settings.SITE_URL).scheme or "https"

    def get_domain(self, site=None):
        return urlsplit(settings.SITE_URL).netloc
