"""
Slug, URL and asset path validation.

Slugs are checked before any filesystem access; URLs and asset paths are
checked before they reach an href/src in rendered pages.
"""

import re
from typing import Any
from urllib.parse import urlparse

SAFE_SLUG = re.compile(r"^[A-Za-z0-9_-]+$")

ALLOWED_URL_SCHEMES = ("http", "https")
YOUTUBE_HOSTS = ("youtube.com", "www.youtube.com")
# whitespace and URL delimiters cannot appear in a host name
FORBIDDEN_HOST_CHARS = re.compile(r"[\s#%/<>?@\\^|\[\]]")


def is_valid_slug(value: Any) -> bool:
    """Return True if value is a non-empty slug of letters, digits, '-' or '_'."""
    if not isinstance(value, str):
        return False
    # fullmatch, so a trailing newline does not slip past '$'
    return SAFE_SLUG.fullmatch(value) is not None


def _parse_http_url(value: Any):
    if not isinstance(value, str):
        return None
    try:
        parsed = urlparse(value)
        # both raise ValueError on a malformed host or port
        host = parsed.hostname
        parsed.port
    except ValueError:
        return None
    if parsed.scheme.lower() not in ALLOWED_URL_SCHEMES:
        return None
    if not host or FORBIDDEN_HOST_CHARS.search(host):
        return None
    return parsed


def is_valid_url(value: Any) -> bool:
    """
    Check that value is an absolute http(s) URL.

    Args:
        value: Untrusted value from front matter

    Returns:
        True only for strings with an http/https scheme and a host
    """
    return _parse_http_url(value) is not None


def is_youtube_embed_url(value: Any) -> bool:
    """
    Check that value is a YouTube embed URL (``/embed/`` path).

    Watch pages, other hosts and unparseable strings are rejected.
    """
    parsed = _parse_http_url(value)
    if parsed is None:
        return False
    return parsed.hostname in YOUTUBE_HOSTS and parsed.path.startswith("/embed/")


def resolve_asset_path(value: str, owner_slug: str, entity_kind: str = "projects") -> str:
    """
    Resolve an image path from front matter to a site-rooted path.

    Args:
        value: Path as written by the author
        owner_slug: Slug of the entity that owns the asset
        entity_kind: Content kind used in the images directory

    Returns:
        The resolved path, or an empty string when the path is rejected
    """
    if value.startswith("//"):
        return ""
    if ".." in value:
        return ""
    if value.startswith("/"):
        return value
    return f"/images/{entity_kind}/{owner_slug}/{value}"
