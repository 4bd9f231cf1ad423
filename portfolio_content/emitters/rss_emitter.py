"""
RSS 2.0 feed for blog posts.
"""

import logging
import os
from email.utils import format_datetime
from typing import List
from xml.sax.saxutils import escape

from ..interfaces.content_repository import ContentRepository
from ..interfaces.output_emitter import OutputEmitter
from ..models.blog_post import BlogPostMeta
from ..models.emit_result import EmitResult
from ..models.site_config import SiteConfig
from ..processors.derived_values import parse_date_value
from ..utils.error_handler import EmitterError
from ..utils.urls import build_canonical_url

XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(value: str) -> str:
    """Escape text for XML element content and attribute values."""
    return escape(str(value), XML_ENTITIES)


class RssEmitter(OutputEmitter):
    """
    Writes ``rss.xml`` for the posts of one locale (English by default).
    """

    name = "rss"

    def __init__(self, locale: str = "en", filename: str = "rss.xml"):
        self.locale = locale
        self.filename = filename
        self.logger = logging.getLogger(__name__)

    def emit(self, repository: ContentRepository, config: SiteConfig) -> EmitResult:
        posts = repository.list_blog_posts(self.locale)
        feed = self.render_feed(posts, config)

        out_path = os.path.join(config.public_dir, self.filename)
        try:
            os.makedirs(config.public_dir, exist_ok=True)
            with open(out_path, "w", encoding="utf-8") as f:
                f.write(feed)
        except OSError as e:
            raise EmitterError(
                f"Could not write RSS feed: {str(e)}", emitter=self.name, path=out_path
            ) from e

        self.logger.info(f"RSS feed written to {out_path} ({len(posts)} posts)")
        return EmitResult(
            emitter=self.name, success=True, files_written=1, output_path=out_path
        )

    def render_feed(self, posts: List[BlogPostMeta], config: SiteConfig) -> str:
        """
        Render the feed XML.

        Args:
            posts: Posts to include, already sorted newest first
            config: Site configuration

        Returns:
            The feed document as a string
        """
        items = "\n".join(self._render_item(post, config) for post in posts)
        feed_url = f"{config.url}/{self.filename}"

        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">',
            "  <channel>",
            f"    <title>{escape_xml(config.name)}</title>",
            f"    <link>{escape_xml(config.url)}</link>",
            f"    <description>Blog posts from {escape_xml(config.name)}</description>",
            f"    <language>{escape_xml(self.locale)}</language>",
            f'    <atom:link href="{escape_xml(feed_url)}" rel="self" type="application/rss+xml" />',
        ]
        if items:
            lines.append(items)
        lines.extend(["  </channel>", "</rss>", ""])
        return "\n".join(lines)

    def _render_item(self, post: BlogPostMeta, config: SiteConfig) -> str:
        url = escape_xml(build_canonical_url(config, self.locale, f"/blog/{post.slug}"))

        lines = [
            "    <item>",
            f"      <title>{escape_xml(post.title)}</title>",
            f"      <link>{url}</link>",
            f'      <guid isPermaLink="true">{url}</guid>',
            f"      <description>{escape_xml(post.description)}</description>",
        ]

        published = parse_date_value(post.date)
        if published is not None:
            pub_date = format_datetime(published, usegmt=True)
            lines.append(f"      <pubDate>{pub_date}</pubDate>")
        else:
            self.logger.warning(f"Post {post.slug} has no usable date; omitting pubDate")

        for tag in post.tags:
            lines.append(f"      <category>{escape_xml(tag)}</category>")

        lines.append("    </item>")
        return "\n".join(lines)
