from django.conf.urls.i18n import i18n_patterns
from django.contrib.sitemaps.views import sitemap
from django.urls import include
from django.urls import path
from django.views.decorators.cache import cache_page
from drf_spectacular.views import SpectacularAPIView
from drf_spectacular.views import SpectacularSwaggerView

from grizzly.blog.sitemaps import BlogPostSitemap
from grizzly.marketing import views as marketing_views
from grizzly.marketing.sitemaps import MarketingStaticViewSitemap
from grizzly.marketing.sitemaps import WorkProjectSitemap

sitemaps = {
    "marketing": MarketingStaticViewSitemap(),
    "blog": BlogPostSitemap(),
    "work": WorkProjectSitemap(),
}

# Served without a locale prefix (see LOCALE_EXEMPT_PATH_PREFIXES).
urlpatterns = [
    path("robots.txt", marketing_views.robots_txt, name="robots"),
    path(
        "sitemap.xml",
        cache_page(60 * 60)(sitemap),
        {"sitemaps": sitemaps},
        name="sitemap",
    ),
    path("api/", include("grizzly.marketing.api_urls", namespace="api")),
    path("api/schema/", SpectacularAPIView.as_view(), name="api-schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="api-schema"),
        name="api-docs",
    ),
]

# Locale-prefixed pages. The prefix is kept for the default language too.
urlpatterns += i18n_patterns(
    path("", include("grizzly.marketing.urls", namespace="marketing")),
    path("blog/", include("grizzly.blog.urls", namespace="blog")),
    prefix_default_language=True,
)
