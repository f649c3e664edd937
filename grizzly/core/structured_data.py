"""
schema.org structured data builders.

Each helper returns a plain ``dict`` ready to be serialized as JSON-LD by the
``json_ld`` template tag (see ``grizzly.core.templatetags.seo_tags``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.conf import settings

if TYPE_CHECKING:
    from grizzly.content.schemas import BlogPost

SCHEMA_CONTEXT = "https://schema.org"

ORGANIZATION_DESCRIPTION = (
    "Brandenburg's premier web development agency specializing in custom "
    "websites, mobile apps, e-commerce solutions, and digital marketing."
)
ORGANIZATION_LOGO_PATH = "/static/images/agency.png"
ORGANIZATION_SAME_AS = [
    "https://www.linkedin.com/company/grizzly-agency",
    "https://twitter.com/grizzlyagency",
    "https://github.com/grizzly-agency",
]
ORGANIZATION_KNOWS_ABOUT = [
    "Web Development",
    "Mobile App Development",
    "E-commerce Solutions",
    "Digital Marketing",
    "SEO Optimization",
    "Custom Software Development",
]

# Social preview images are rendered at this size.
IMAGE_WIDTH = 1200
IMAGE_HEIGHT = 630


def _site_url() -> str:
    return settings.SITE_URL.rstrip("/")


def _absolute(url: str) -> str:
    if url.startswith(("http://", "https://")):
        return url
    return f"{_site_url()}/{url.lstrip('/')}"


def _publisher() -> dict:
    return {
        "@type": "Organization",
        "name": settings.SITE_NAME,
        "logo": {
            "@type": "ImageObject",
            "url": _absolute(ORGANIZATION_LOGO_PATH),
        },
    }


def organization_schema() -> dict:
    """Organization descriptor emitted on every page."""
    locales = [code for code, _name in settings.LANGUAGES]
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": settings.SITE_NAME,
        "description": ORGANIZATION_DESCRIPTION,
        "url": _site_url(),
        "logo": _absolute(ORGANIZATION_LOGO_PATH),
        "contactPoint": {
            "@type": "ContactPoint",
            "telephone": "+49 15510 937316",
            "contactType": "customer service",
            "areaServed": "DE",
            "availableLanguage": locales,
        },
        "address": {
            "@type": "PostalAddress",
            "streetAddress": "Universitätsstr. 4",
            "addressLocality": "Brandenburg",
            "postalCode": "03046",
            "addressCountry": "DE",
        },
        "sameAs": ORGANIZATION_SAME_AS,
        "foundingDate": "2019",
        "areaServed": ["Brandenburg", "Germany", "Europe"],
        "knowsAbout": ORGANIZATION_KNOWS_ABOUT,
    }


def website_schema(locale: str | None = None) -> dict:
    data = {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": settings.SITE_NAME,
        "url": _site_url(),
        "publisher": _publisher(),
    }
    if locale:
        data["inLanguage"] = locale
    return data


def article_schema(post: BlogPost, url: str) -> dict:
    """Article descriptor for a blog post rendered at ``url``."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Article",
        "headline": post.title,
        "description": post.excerpt,
        "image": {
            "@type": "ImageObject",
            "url": _absolute(post.image),
            "width": IMAGE_WIDTH,
            "height": IMAGE_HEIGHT,
        },
        "author": {
            "@type": "Person",
            "name": post.author,
        },
        "publisher": _publisher(),
        "datePublished": post.date.isoformat(),
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": _absolute(url),
        },
        "articleSection": post.category,
        "keywords": ", ".join(post.tags),
    }


def breadcrumb_schema(items: list[dict[str, str]], base_url: str = "") -> dict:
    """
    BreadcrumbList for a trail of ``{"name": ..., "url": ...}`` items.

    Items without a url (usually the current page) are listed without an
    ``item`` link.
    """
    base = base_url.rstrip("/")
    elements = []
    for position, crumb in enumerate(items, start=1):
        element = {
            "@type": "ListItem",
            "position": position,
            "name": str(crumb["name"]),
        }
        url = str(crumb.get("url") or "")
        if url:
            element["item"] = url if url.startswith("http") else f"{base}{url}"
        elements.append(element)
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": elements,
    }


def service_schema(name: str, description: str) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Service",
        "name": name,
        "description": description,
        "provider": {
            "@type": "Organization",
            "name": settings.SITE_NAME,
            "url": _site_url(),
        },
        "areaServed": {
            "@type": "Country",
            "name": "Germany",
        },
    }
