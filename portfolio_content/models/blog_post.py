"""
Data models for blog posts.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..processors.derived_values import calculate_reading_time, to_date_string


@dataclass(frozen=True)
class BlogPostMeta:
    """
    Metadata of a blog post as shown in listings.
    """

    slug: str
    title: str
    description: str
    date: str
    locale: str
    reading_time: int
    tags: List[str] = field(default_factory=list)
    draft: bool = False

    @classmethod
    def from_frontmatter(
        cls, frontmatter_data: Dict[str, Any], slug: str, locale: str, body: str
    ) -> "BlogPostMeta":
        """
        Create BlogPostMeta from front matter and the document body.

        Args:
            frontmatter_data: Decoded front matter
            slug: Directory name of the post
            locale: Locale of the document
            body: Document body, used for the reading time

        Returns:
            BlogPostMeta instance
        """
        tags = frontmatter_data.get("tags")
        if tags is None:
            tags = []

        draft = frontmatter_data.get("draft")
        if draft is None:
            draft = False

        return cls(
            slug=slug,
            title=frontmatter_data.get("title"),
            description=frontmatter_data.get("description"),
            date=to_date_string(frontmatter_data.get("date")),
            locale=locale,
            reading_time=calculate_reading_time(body, locale),
            tags=tags,
            draft=draft,
        )


@dataclass(frozen=True)
class BlogPost:
    """
    A blog post with its raw document body.
    """

    meta: BlogPostMeta
    body: str
