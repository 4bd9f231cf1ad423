"""
Command-line entry point for building the site's generated files.
"""

import argparse
import dataclasses
import logging
import sys
from typing import Dict, List, Optional

from .emitters.diagram_builder import DiagramBuilder
from .emitters.image_copier import ImageCopier
from .emitters.rss_emitter import RssEmitter
from .emitters.sitemap_emitter import SitemapEmitter
from .interfaces.output_emitter import OutputEmitter
from .managers.build_manager import BuildManager
from .managers.content_manager import FileContentRepository
from .models.site_config import SiteConfig
from .utils.error_handler import ContentError
from .utils.progress_tracker import BuildTracker

logger = logging.getLogger(__name__)


def default_emitters() -> List[OutputEmitter]:
    return [DiagramBuilder(), ImageCopier(), RssEmitter(), SitemapEmitter()]


def collect_content_counts(
    repository: FileContentRepository, config: SiteConfig
) -> Dict[str, Dict[str, int]]:
    """
    Load every entity for every locale and count them.

    Loading everything surfaces front matter errors before a build.
    """
    counts = {}
    for locale in config.locales:
        posts = repository.list_blog_posts(locale)
        studies = repository.list_case_studies(locale)
        for post in posts:
            repository.get_blog_post(locale, post.slug)
        counts[locale] = {
            "posts": len(posts),
            "case studies": len(studies),
            "deep dives": len(repository.list_deep_dive_refs([locale])),
            "design docs": len(repository.list_design_doc_refs([locale])),
            "about": 1 if repository.get_about_content(locale) else 0,
        }
    testimonials = len(repository.list_testimonials())
    for per_locale in counts.values():
        per_locale["testimonials"] = testimonials
    return counts


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="portfolio-content",
        description="Validate site content and generate feeds, sitemap and assets.",
    )
    parser.add_argument("--content-dir", help="Content root (default: $CONTENT_DIR or ./content)")
    parser.add_argument("--public-dir", help="Output root (default: $PUBLIC_DIR or ./public)")
    parser.add_argument(
        "--only",
        nargs="+",
        metavar="STEP",
        help="Run only these build steps (diagrams, images, rss, sitemap)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("command", choices=["build", "check"], nargs="?", default="build")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the portfolio content CLI."""
    args = parse_args(argv)
    tracker = BuildTracker()
    tracker.setup_colored_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = SiteConfig.from_environment()
        overrides = {}
        if args.content_dir:
            overrides["content_dir"] = args.content_dir
        if args.public_dir:
            overrides["public_dir"] = args.public_dir
        if overrides:
            config = dataclasses.replace(config, **overrides)

        repository = FileContentRepository(config.content_dir)

        if args.command == "check":
            tracker.print_content_counts(collect_content_counts(repository, config))
            return 0

        emitters = default_emitters()
        if args.only:
            unknown = set(args.only) - {e.name for e in emitters}
            if unknown:
                logger.error(f"Unknown build step(s): {', '.join(sorted(unknown))}")
                return 2
            emitters = [e for e in emitters if e.name in args.only]

        results = BuildManager(repository, config, emitters).run()
        tracker.add_results(results)
        tracker.print_summary()
        return 1 if tracker.failed else 0

    except ContentError as e:
        logger.error(f"Error in main execution: {str(e)}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
