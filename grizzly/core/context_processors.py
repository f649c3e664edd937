from django.conf import settings

from grizzly.core.locales import LocaleConfig
from grizzly.core.locales import switch_locale_path
from grizzly.core.structured_data import organization_schema


def site_settings(request):
    """Expose site-wide names and the organization descriptor in templates."""
    return {
        "SITE_NAME": settings.SITE_NAME,
        "SITE_URL": settings.SITE_URL,
        "organization_schema": organization_schema(),
    }


def locale_links(request):
    """
    Links to the current page in every supported locale.

    Used by the language switcher; each entry is a dict with ``code``,
    ``name``, ``url`` and ``active``.
    """
    config = LocaleConfig.from_settings()
    current = getattr(request, "LANGUAGE_CODE", config.default)
    names = dict(settings.LANGUAGES)
    links = [
        {
            "code": code,
            "name": names[code],
            "url": switch_locale_path(request.path_info, code, config),
            "active": code == current,
        }
        for code in config.locales
    ]
    return {"locale_links": links, "current_locale": current}
