from django.urls import reverse

from grizzly.content.catalog import get_catalog
from grizzly.content.schemas import WorkProject
from grizzly.core.sitemaps import LocalizedSitemap
from grizzly.marketing.constants import STATIC_PAGES


class MarketingStaticViewSitemap(LocalizedSitemap):
    """Top-level pages, each with its own change frequency and priority."""

    def items(self):
        return STATIC_PAGES

    def location(self, item):
        url_name, _changefreq, _priority = item
        return reverse(url_name)

    def changefreq(self, item):
        return item[1]

    def priority(self, item):
        return item[2]

    def lastmod(self, item):
        # Listing pages change whenever content is published.
        content = get_catalog()
        dates = [record.date for record in (*content.blog, *content.work)]
        return max(dates, default=None)


class WorkProjectSitemap(LocalizedSitemap):
    changefreq = "monthly"
    priority = 0.5

    def items(self):
        return list(get_catalog().work.get_all())

    def lastmod(self, obj: WorkProject):
        return obj.date

    def location(self, obj: WorkProject):
        return reverse("marketing:work_detail", kwargs={"slug": obj.slug})
