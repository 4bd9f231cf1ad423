"""
XML sitemap with per-locale alternates.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..interfaces.content_repository import ContentRepository
from ..interfaces.output_emitter import OutputEmitter
from ..models.emit_result import EmitResult
from ..models.site_config import SiteConfig
from ..utils.error_handler import EmitterError
from ..utils.urls import build_alternates, build_canonical_url
from .rss_emitter import escape_xml

# (pathname, changefreq, priority)
STATIC_PAGES = [
    ("/", "weekly", 1.0),
    ("/projects", "weekly", 0.9),
    ("/blog", "weekly", 0.9),
    ("/about", "monthly", 0.8),
    ("/now", "weekly", 0.7),
    ("/contact", "monthly", 0.6),
]


@dataclass
class SitemapEntry:
    url: str
    last_modified: str
    change_frequency: str
    priority: float
    alternates: Dict[str, str] = field(default_factory=dict)


class SitemapEmitter(OutputEmitter):
    """
    Writes ``sitemap.xml`` covering static pages, posts and case studies.

    Entity URLs use the default locale; every entry lists its alternates.
    """

    name = "sitemap"

    def __init__(self, filename: str = "sitemap.xml", now: Optional[datetime] = None):
        self.filename = filename
        self.now = now
        self.logger = logging.getLogger(__name__)

    def build_entries(
        self, repository: ContentRepository, config: SiteConfig
    ) -> List[SitemapEntry]:
        """
        Collect sitemap entries from the repository.

        Args:
            repository: Source of posts and case studies
            config: Site configuration

        Returns:
            Entries in output order
        """
        build_time = (self.now or datetime.now(timezone.utc)).isoformat()
        locale = config.default_locale

        def entry(pathname, change_frequency, priority, last_modified=None):
            languages = build_alternates(config, pathname)
            languages.pop("x-default", None)
            return SitemapEntry(
                url=build_canonical_url(config, locale, pathname),
                last_modified=last_modified or build_time,
                change_frequency=change_frequency,
                priority=priority,
                alternates=languages,
            )

        entries = [entry(*page) for page in STATIC_PAGES]
        entries.extend(
            entry(f"/blog/{post.slug}", "monthly", 0.7, post.date)
            for post in repository.list_blog_posts(locale)
        )
        entries.extend(
            entry(f"/projects/{study.slug}", "monthly", 0.8, study.launch_date)
            for study in repository.list_case_studies(locale)
        )
        return entries

    def render_sitemap(self, entries: List[SitemapEntry]) -> str:
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9" '
            'xmlns:xhtml="http://www.w3.org/1999/xhtml">',
        ]
        for item in entries:
            lines.append("  <url>")
            lines.append(f"    <loc>{escape_xml(item.url)}</loc>")
            for hreflang, href in item.alternates.items():
                lines.append(
                    f'    <xhtml:link rel="alternate" hreflang="{escape_xml(hreflang)}" '
                    f'href="{escape_xml(href)}" />'
                )
            lines.append(f"    <lastmod>{escape_xml(item.last_modified)}</lastmod>")
            lines.append(f"    <changefreq>{item.change_frequency}</changefreq>")
            lines.append(f"    <priority>{item.priority:.1f}</priority>")
            lines.append("  </url>")
        lines.extend(["</urlset>", ""])
        return "\n".join(lines)

    def emit(self, repository: ContentRepository, config: SiteConfig) -> EmitResult:
        entries = self.build_entries(repository, config)
        out_path = os.path.join(config.public_dir, self.filename)

        try:
            os.makedirs(config.public_dir, exist_ok=True)
            with open(out_path, "w", encoding="utf-8") as f:
                f.write(self.render_sitemap(entries))
        except OSError as e:
            raise EmitterError(
                f"Could not write sitemap: {str(e)}", emitter=self.name, path=out_path
            ) from e

        self.logger.info(f"Sitemap written to {out_path} ({len(entries)} URLs)")
        return EmitResult(
            emitter=self.name, success=True, files_written=1, output_path=out_path
        )
