"""
Validate-or-omit sanitizers for optional front matter fields.

Every function takes an untrusted value decoded from YAML and returns either
a fully valid value or None. Nothing here raises; invalid entries are dropped
and an empty result collapses to None.
"""

import logging
from typing import Any, List, Optional

from ..models.fields import (
    CallToAction,
    Competitor,
    CtaButton,
    Feature,
    Keywords,
    Links,
)
from .validators import is_valid_url, is_youtube_embed_url, resolve_asset_path

logger = logging.getLogger(__name__)

CASE_STUDY_CATEGORIES = ("mobile-app", "chrome-extension", "web", "cli")

LINK_KEYS = ("live", "github", "docs")
CTA_KEYS = ("primary", "secondary")


def optional_string(value: Any) -> Optional[str]:
    """Return value if it is a string, otherwise None."""
    return value if isinstance(value, str) else None


def sanitize_links(links: Any) -> Optional[Links]:
    """
    Keep only the http(s) entries of a ``links`` mapping.

    Args:
        links: Untrusted mapping with optional live/github/docs keys

    Returns:
        Links with the valid entries, or None if no entry survives
    """
    if not isinstance(links, dict):
        return None

    valid = {}
    for key in LINK_KEYS:
        if is_valid_url(links.get(key)):
            valid[key] = links[key]
        elif key in links:
            logger.debug(f"Dropping invalid link '{key}'")

    return Links(**valid) if valid else None


def _sanitize_cta_button(entry: Any) -> Optional[CtaButton]:
    if not isinstance(entry, dict):
        return None
    label = entry.get("label")
    url = entry.get("url")
    if not isinstance(label, str) or not is_valid_url(url):
        return None
    return CtaButton(label=label, url=url)


def sanitize_cta(cta: Any) -> Optional[CallToAction]:
    """
    Sanitize the ``cta`` mapping; each button is checked independently.

    A button needs a string label and an http(s) URL.
    """
    if not isinstance(cta, dict):
        return None

    buttons = {}
    for key in CTA_KEYS:
        button = _sanitize_cta_button(cta.get(key))
        if button is not None:
            buttons[key] = button

    return CallToAction(**buttons) if buttons else None


def sanitize_competitors(competitors: Any) -> Optional[List[Competitor]]:
    """Keep competitor entries that have both a name and a differentiator."""
    if not isinstance(competitors, list):
        return None

    result = [
        Competitor(name=entry["name"], differentiator=entry["differentiator"])
        for entry in competitors
        if isinstance(entry, dict)
        and isinstance(entry.get("name"), str)
        and isinstance(entry.get("differentiator"), str)
    ]
    return result or None


def sanitize_features(features: Any) -> Optional[List[Feature]]:
    """Keep feature entries with a title and description; icon only if a string."""
    if not isinstance(features, list):
        return None

    result = []
    for entry in features:
        if not isinstance(entry, dict):
            continue
        title = entry.get("title")
        description = entry.get("description")
        if not isinstance(title, str) or not isinstance(description, str):
            continue
        result.append(
            Feature(
                title=title,
                description=description,
                icon=optional_string(entry.get("icon")),
            )
        )
    return result or None


def _string_list(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    strings = [item for item in value if isinstance(item, str)]
    return strings or None


def sanitize_keywords(keywords: Any) -> Optional[Keywords]:
    """
    Sanitize the ``keywords`` mapping (``primary`` and ``longTail`` lists).

    Non-string members are filtered out; a group left empty is omitted.
    """
    if not isinstance(keywords, dict):
        return None

    primary = _string_list(keywords.get("primary"))
    long_tail = _string_list(keywords.get("longTail"))
    if primary is None and long_tail is None:
        return None
    return Keywords(primary=primary, long_tail=long_tail)


def sanitize_images(images: Any, owner_slug: str) -> Optional[List[str]]:
    """
    Resolve a list of gallery image paths for a case study.

    Args:
        images: Untrusted list of paths
        owner_slug: Slug of the owning case study

    Returns:
        Resolved site paths, or None when nothing usable remains
    """
    if not isinstance(images, list):
        return None

    resolved = [
        resolve_asset_path(image, owner_slug)
        for image in images
        if isinstance(image, str) and image
    ]
    # rejected paths resolve to "" and are dropped as well
    result = [path for path in resolved if path]
    return result or None


def sanitize_image_path(value: Any, owner_slug: str) -> Optional[str]:
    """Resolve a single image path; non-strings and empty strings are absent."""
    if not isinstance(value, str) or not value:
        return None
    return resolve_asset_path(value, owner_slug)


def sanitize_category(category: Any) -> Optional[str]:
    """Return category if it is one of the known case study categories."""
    if isinstance(category, str) and category in CASE_STUDY_CATEGORIES:
        return category
    return None


def sanitize_video(video: Any) -> Optional[str]:
    """Return the video URL only if it is a YouTube embed URL."""
    return video if is_youtube_embed_url(video) else None
