"""
Canonical and alternate-language URL helpers.
"""

from typing import Dict

from ..models.site_config import SiteConfig


def _clean_pathname(pathname: str) -> str:
    return "" if pathname == "/" else pathname


def build_canonical_url(config: SiteConfig, locale: str, pathname: str) -> str:
    """
    Build the absolute URL of a page in one locale.

    Example: ``("en", "/blog")`` -> ``https://zzoo.dev/en/blog``
    """
    return f"{config.url}/{locale}{_clean_pathname(pathname)}"


def build_alternates(config: SiteConfig, pathname: str) -> Dict[str, str]:
    """
    Build the locale -> URL map for a page, plus ``x-default``.

    ``x-default`` points at the default (first configured) locale.
    """
    languages = {
        locale: build_canonical_url(config, locale, pathname)
        for locale in config.locales
    }
    languages["x-default"] = build_canonical_url(
        config, config.default_locale, pathname
    )
    return languages
