"""
Locale resolution for incoming request paths.

Every public page lives under a locale prefix (``/en/...``, ``/de/...``) and the
prefix is always visible, including for the default locale. ``resolve_locale``
decides what to do with a raw request path:

- exempt paths (API routes, static assets, any path containing a dot) are
  left alone;
- ``/`` always redirects to the default locale;
- a supported locale prefix passes through;
- a locale-shaped prefix that is not supported is a 404;
- anything else is redirected to the same path under the preferred locale,
  taken from ``Accept-Language`` when detection is enabled.

The resolver is a pure function over a ``LocaleConfig`` so it can be tested
without a request. ``grizzly.core.middleware.LocalePrefixMiddleware`` turns its
decisions into responses.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from dataclasses import field
from enum import StrEnum

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.translation.trans_real import parse_accept_lang_header

# "en", "de", "pt-BR", "zh_Hans"
LOCALE_SHAPED_RE = re.compile(r"^[a-z]{2}(?:[-_][A-Za-z]{2,4})?$")


class LocaleAction(StrEnum):
    EXEMPT = "exempt"
    PASS_THROUGH = "pass_through"
    REDIRECT = "redirect"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class LocaleConfig:
    """Supported locales, in display order, plus the default one."""

    locales: tuple[str, ...]
    default: str
    detect_from_browser: bool = True
    exempt_prefixes: tuple[str, ...] = field(default=())

    def __post_init__(self):
        if not self.locales:
            raise ImproperlyConfigured("At least one locale must be supported.")
        if self.default not in self.locales:
            raise ImproperlyConfigured(
                f"Default locale '{self.default}' is not one of the supported "
                f"locales {list(self.locales)}.",
            )

    @classmethod
    def from_settings(cls) -> LocaleConfig:
        return cls(
            locales=tuple(code for code, _name in settings.LANGUAGES),
            default=settings.LANGUAGE_CODE,
            detect_from_browser=getattr(settings, "LOCALE_DETECTION", True),
            exempt_prefixes=tuple(
                getattr(settings, "LOCALE_EXEMPT_PATH_PREFIXES", ()),
            ),
        )

    def is_supported(self, code: str) -> bool:
        return code in self.locales


@dataclass(frozen=True)
class LocaleDecision:
    action: LocaleAction
    locale: str | None = None
    path: str | None = None


def leading_segment(path: str) -> str:
    """Return the first path segment, e.g. ``"en"`` for ``"/en/blog/"``."""
    return path.lstrip("/").split("/", 1)[0]


def is_exempt_path(path: str, config: LocaleConfig) -> bool:
    """True for paths that bypass locale routing entirely."""
    for prefix in config.exempt_prefixes:
        # "/api/" also exempts "/api" itself.
        if path.startswith(prefix) or path == prefix.rstrip("/"):
            return True
    # Any dot counts, so "/sitemap.xml" and "/v1.2/blog/" both bypass.
    return "." in path


def preferred_locale(accept_language: str | None, config: LocaleConfig) -> str:
    """
    Pick the best supported locale for an ``Accept-Language`` header.

    Candidates are tried in the order of the header's quality values. An exact
    match wins, otherwise the primary subtag is tried (``de-AT`` -> ``de``).
    Falls back to the configured default.
    """
    if not config.detect_from_browser or not accept_language:
        return config.default

    for lang, _quality in parse_accept_lang_header(accept_language):
        if lang == "*":
            break
        candidate = lang.lower().replace("_", "-")
        if config.is_supported(candidate):
            return candidate
        primary = candidate.split("-", 1)[0]
        if config.is_supported(primary):
            return primary
    return config.default


def resolve_locale(
    path: str,
    accept_language: str | None,
    config: LocaleConfig,
) -> LocaleDecision:
    """Decide how a request path should be routed with respect to locales."""
    if not path.startswith("/"):
        path = f"/{path}"

    if is_exempt_path(path, config):
        return LocaleDecision(LocaleAction.EXEMPT)

    if path == "/":
        return LocaleDecision(
            LocaleAction.REDIRECT,
            locale=config.default,
            path=f"/{config.default}/",
        )

    segment = leading_segment(path)
    if config.is_supported(segment):
        return LocaleDecision(LocaleAction.PASS_THROUGH, locale=segment, path=path)

    if LOCALE_SHAPED_RE.match(segment):
        return LocaleDecision(LocaleAction.NOT_FOUND)

    locale = preferred_locale(accept_language, config)
    return LocaleDecision(LocaleAction.REDIRECT, locale=locale, path=f"/{locale}{path}")


def switch_locale_path(path: str, locale: str, config: LocaleConfig) -> str:
    """Return ``path`` with its locale prefix replaced by ``locale``."""
    return f"/{locale}{strip_locale_prefix(path, config)}"


def strip_locale_prefix(path: str, config: LocaleConfig) -> str:
    """Drop a supported locale prefix: ``/de/blog/`` -> ``/blog/``."""
    segment = leading_segment(path)
    if not config.is_supported(segment):
        return path
    remainder = path.lstrip("/")[len(segment) :]
    return remainder or "/"
