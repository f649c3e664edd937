"""
Locale prefix middleware.

Replaces ``django.middleware.locale.LocaleMiddleware``: Django's version falls
back to the default language for unknown prefixes, while this site answers 404
for locale-shaped prefixes it does not support and never hides the prefix of
the default locale.

This middleware should be placed before CommonMiddleware so APPEND_SLASH sees
the activated language when resolving ``i18n_patterns`` URLs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.http import Http404
from django.http import HttpResponseRedirect
from django.utils import translation
from django.utils.cache import patch_vary_headers

from grizzly.core.locales import LocaleAction
from grizzly.core.locales import LocaleConfig
from grizzly.core.locales import preferred_locale
from grizzly.core.locales import resolve_locale

if TYPE_CHECKING:
    from django.http import HttpRequest
    from django.http import HttpResponse

logger = logging.getLogger(__name__)


class LocalePrefixMiddleware:
    """
    Route every request to a canonical, locale-prefixed path.

    - Exempt paths: passed to the next handler without redirects.
    - Missing prefix: 302 to the prefixed path, query string preserved.
    - Unsupported locale-shaped prefix: 404.
    - Supported prefix: the locale is activated for the rest of the request.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.config = LocaleConfig.from_settings()

    def __call__(self, request: HttpRequest) -> HttpResponse:
        decision = resolve_locale(
            request.path_info,
            request.headers.get("Accept-Language"),
            self.config,
        )

        if decision.action == LocaleAction.REDIRECT:
            translation.activate(decision.locale)
            return self._redirect(request, decision.path)

        if decision.action != LocaleAction.PASS_THROUGH:
            # No usable prefix; API messages and the 404 page follow the
            # browser preference.
            translation.activate(
                preferred_locale(request.headers.get("Accept-Language"), self.config),
            )

        if decision.action == LocaleAction.EXEMPT:
            return self.get_response(request)

        if decision.action == LocaleAction.NOT_FOUND:
            logger.debug("Unsupported locale prefix in %s", request.path_info)
            raise Http404("Unsupported locale.")

        translation.activate(decision.locale)
        request.LANGUAGE_CODE = decision.locale
        response = self.get_response(request)
        response.headers.setdefault("Content-Language", decision.locale)
        return response

    def _redirect(self, request: HttpRequest, path: str) -> HttpResponse:
        # path_info excludes SCRIPT_NAME; keep it when mounted under a prefix.
        script_prefix = request.META.get("SCRIPT_NAME", "").rstrip("/")
        target = f"{script_prefix}{path}"
        query_string = request.META.get("QUERY_STRING", "")
        if query_string:
            target = f"{target}?{query_string}"
        logger.debug("Redirecting %s to %s", request.get_full_path(), target)
        response = HttpResponseRedirect(target)
        patch_vary_headers(response, ("Accept-Language",))
        return response
