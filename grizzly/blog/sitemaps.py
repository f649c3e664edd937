from django.urls import reverse

from grizzly.content.catalog import get_catalog
from grizzly.content.schemas import BlogPost
from grizzly.core.sitemaps import LocalizedSitemap


class BlogPostSitemap(LocalizedSitemap):
    """One entry per blog post, repeated for every supported locale."""

    changefreq = "weekly"
    priority = 0.6

    def items(self):
        return list(get_catalog().blog.get_all())

    def lastmod(self, obj: BlogPost):
        return obj.date

    def location(self, obj: BlogPost):
        return reverse("blog:blog_post_detail", kwargs={"slug": obj.slug})
