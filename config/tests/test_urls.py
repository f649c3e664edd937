"""
Ensure pages resolve under every locale prefix while machine-facing
routes (API, sitemap, robots) stay unprefixed.
"""

from __future__ import annotations

from django.test import SimpleTestCase
from django.urls import Resolver404
from django.urls import resolve
from django.urls import reverse
from django.utils import translation


class UrlRoutingTests(SimpleTestCase):
    def test_pages_resolve_under_each_locale(self):
        for locale in ("en", "de"):
            with translation.override(locale):
                self.assertEqual(resolve(f"/{locale}/").url_name, "home")
                self.assertEqual(resolve(f"/{locale}/").namespace, "marketing")
                match = resolve(f"/{locale}/blog/some-post/")
                self.assertEqual(match.namespace, "blog")
                self.assertEqual(match.kwargs, {"slug": "some-post"})

    def test_reverse_includes_active_locale(self):
        with translation.override("de"):
            self.assertEqual(reverse("marketing:contact"), "/de/contact/")
            self.assertEqual(
                reverse("blog:blog_post_detail", kwargs={"slug": "a-post"}),
                "/de/blog/a-post/",
            )

    def test_machine_routes_have_no_locale_prefix(self):
        self.assertEqual(reverse("api:contact"), "/api/contact/")
        self.assertEqual(reverse("api:newsletter"), "/api/newsletter/")
        self.assertEqual(reverse("sitemap"), "/sitemap.xml")
        self.assertEqual(reverse("robots"), "/robots.txt")

    def test_pages_do_not_resolve_without_prefix(self):
        with self.assertRaises(Resolver404):
            resolve("/about/")

    def test_error_page_previews_are_not_routed(self):
        for path in ("/400/", "/404/", "/500/"):
            with self.assertRaises(Resolver404):
                resolve(path)
