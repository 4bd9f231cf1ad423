"""
Data models for project case studies and their sub-documents.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..processors.derived_values import to_date_string
from ..processors.field_sanitizers import (
    optional_string,
    sanitize_category,
    sanitize_competitors,
    sanitize_cta,
    sanitize_features,
    sanitize_image_path,
    sanitize_images,
    sanitize_keywords,
    sanitize_links,
    sanitize_video,
)
from ..utils.error_handler import ErrorHandler
from .fields import CallToAction, Competitor, Feature, Keywords, Links

logger = logging.getLogger(__name__)

# front matter key -> attribute, for fields that go through a sanitizer
SANITIZED_FIELDS = {
    "heroImage": "hero_image",
    "images": "images",
    "d2Diagram": "d2_diagram",
    "links": "links",
    "tagline": "tagline",
    "category": "category",
    "keywords": "keywords",
    "competitors": "competitors",
    "cta": "cta",
    "features": "features",
    "video": "video",
    "thumbnail": "thumbnail",
}


@dataclass(frozen=True)
class CaseStudyMeta:
    """
    Metadata of a case study.

    Every optional field is either fully valid or None.
    """

    slug: str
    title: str
    description: str
    client_type: str
    status: str
    launch_date: str
    tech_stack: List[str] = field(default_factory=list)
    featured: bool = False
    thumbnail: Optional[str] = None
    hero_image: Optional[str] = None
    images: Optional[List[str]] = None
    d2_diagram: Optional[str] = None
    links: Optional[Links] = None
    tagline: Optional[str] = None
    category: Optional[str] = None
    keywords: Optional[Keywords] = None
    competitors: Optional[List[Competitor]] = None
    cta: Optional[CallToAction] = None
    features: Optional[List[Feature]] = None
    video: Optional[str] = None

    @classmethod
    def from_frontmatter(
        cls, frontmatter_data: Dict[str, Any], slug: str
    ) -> "CaseStudyMeta":
        """
        Create CaseStudyMeta from front matter.

        Required fields are passed through as written; optional and
        externally facing fields go through the sanitizers.

        Args:
            frontmatter_data: Decoded front matter
            slug: Directory name of the case study

        Returns:
            CaseStudyMeta instance
        """
        tech_stack = frontmatter_data.get("techStack")
        if tech_stack is None:
            tech_stack = []

        featured = frontmatter_data.get("featured")
        if featured is None:
            featured = False

        meta = cls(
            slug=slug,
            title=frontmatter_data.get("title"),
            description=frontmatter_data.get("description"),
            client_type=frontmatter_data.get("clientType"),
            status=frontmatter_data.get("status"),
            launch_date=to_date_string(frontmatter_data.get("launchDate")),
            tech_stack=tech_stack,
            featured=featured,
            thumbnail=sanitize_image_path(frontmatter_data.get("thumbnail"), slug),
            hero_image=sanitize_image_path(frontmatter_data.get("heroImage"), slug),
            images=sanitize_images(frontmatter_data.get("images"), slug),
            d2_diagram=optional_string(frontmatter_data.get("d2Diagram")),
            links=sanitize_links(frontmatter_data.get("links")),
            tagline=optional_string(frontmatter_data.get("tagline")),
            category=sanitize_category(frontmatter_data.get("category")),
            keywords=sanitize_keywords(frontmatter_data.get("keywords")),
            competitors=sanitize_competitors(frontmatter_data.get("competitors")),
            cta=sanitize_cta(frontmatter_data.get("cta")),
            features=sanitize_features(frontmatter_data.get("features")),
            video=sanitize_video(frontmatter_data.get("video")),
        )

        error_handler = ErrorHandler(logger)
        for key, attribute in SANITIZED_FIELDS.items():
            if frontmatter_data.get(key) is None:
                continue
            if getattr(meta, attribute) in (None, ""):
                error_handler.log_dropped_field(slug, key, "failed validation")

        return meta


@dataclass(frozen=True)
class CaseStudy:
    """
    A case study (or one of its sub-documents) with the raw body.

    Sub-documents carry their parent's metadata and their own body.
    """

    meta: CaseStudyMeta
    body: str


@dataclass(frozen=True)
class SubDocumentRef:
    """Locale/slug pair identifying an existing case study sub-document."""

    locale: str
    slug: str
