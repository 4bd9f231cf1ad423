"""
File-backed content repository: directory scanning and the query API.
"""

import json
import logging
import os
from typing import Iterable, List, Optional

from ..interfaces.content_repository import ContentRepository
from ..models.about import AboutData
from ..models.blog_post import BlogPost, BlogPostMeta
from ..models.case_study import CaseStudy, CaseStudyMeta, SubDocumentRef
from ..models.testimonial import Testimonial
from ..processors.derived_values import date_sort_key
from ..processors.document_parser import read_document
from ..processors.validators import is_valid_slug
from ..utils.error_handler import ErrorHandler

DOCUMENT_EXTENSION = ".mdx"

BLOG_DIR = "blog"
PROJECTS_DIR = "projects"
ABOUT_DIR = "about"
TESTIMONIALS_FILE = "testimonials.json"

DEEP_DIVE_PREFIX = "casestudy"
DESIGN_DOC_PREFIX = "design"


class FileContentRepository(ContentRepository):
    """
    Reads site content from a directory tree.

    Layout under ``content_dir``::

        blog/<slug>/<locale>.mdx
        projects/<slug>/<locale>.mdx
        projects/<slug>/casestudy.<locale>.mdx
        projects/<slug>/design.<locale>.mdx
        about/<locale>.mdx
        testimonials.json

    Nothing is cached; every call re-reads from disk.
    """

    def __init__(self, content_dir: str):
        """
        Initialize the repository.

        Args:
            content_dir: Root of the content tree
        """
        self.content_dir = content_dir
        self.logger = logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)

    # Paths

    def _locale_document_path(self, kind: str, slug: str, locale: str) -> str:
        return os.path.join(self.content_dir, kind, slug, f"{locale}{DOCUMENT_EXTENSION}")

    def _sub_document_path(self, prefix: str, slug: str, locale: str) -> str:
        return os.path.join(
            self.content_dir,
            PROJECTS_DIR,
            slug,
            f"{prefix}.{locale}{DOCUMENT_EXTENSION}",
        )

    def _list_slug_dirs(self, kind: str) -> List[str]:
        """
        List the slug directories of a content kind.

        Names come from the local filesystem, not from callers, so they are
        not validated here. Plain files are ignored.
        """
        root = os.path.join(self.content_dir, kind)
        if not os.path.isdir(root):
            return []
        return [
            name
            for name in sorted(os.listdir(root))
            if os.path.isdir(os.path.join(root, name))
        ]

    # Blog

    def list_blog_posts(self, locale: str) -> List[BlogPostMeta]:
        if not is_valid_slug(locale):
            return []

        posts = []
        for slug in self._list_slug_dirs(BLOG_DIR):
            path = self._locale_document_path(BLOG_DIR, slug, locale)
            if not os.path.exists(path):
                self.error_handler.log_skipped_document(BLOG_DIR, slug, locale)
                continue

            document = read_document(path)
            meta = BlogPostMeta.from_frontmatter(
                document.metadata, slug, locale, document.body
            )
            if meta.draft:
                self.logger.debug(f"Excluding draft post {slug} ({locale})")
                continue
            posts.append(meta)

        # sorted() is stable, so equal dates keep directory order
        return sorted(posts, key=lambda post: date_sort_key(post.date), reverse=True)

    def get_blog_post(self, locale: str, slug: str) -> Optional[BlogPost]:
        if not is_valid_slug(slug) or not is_valid_slug(locale):
            return None

        path = self._locale_document_path(BLOG_DIR, slug, locale)
        if not os.path.exists(path):
            return None

        document = read_document(path)
        return BlogPost(
            meta=BlogPostMeta.from_frontmatter(
                document.metadata, slug, locale, document.body
            ),
            body=document.body,
        )

    # Case studies

    def list_case_studies(self, locale: str) -> List[CaseStudyMeta]:
        if not is_valid_slug(locale):
            return []

        studies = []
        for slug in self._list_slug_dirs(PROJECTS_DIR):
            path = self._locale_document_path(PROJECTS_DIR, slug, locale)
            if not os.path.exists(path):
                self.error_handler.log_skipped_document(PROJECTS_DIR, slug, locale)
                continue

            document = read_document(path)
            studies.append(CaseStudyMeta.from_frontmatter(document.metadata, slug))

        return sorted(
            studies, key=lambda study: date_sort_key(study.launch_date), reverse=True
        )

    def get_case_study(self, locale: str, slug: str) -> Optional[CaseStudy]:
        if not is_valid_slug(slug) or not is_valid_slug(locale):
            return None

        path = self._locale_document_path(PROJECTS_DIR, slug, locale)
        if not os.path.exists(path):
            return None

        document = read_document(path)
        return CaseStudy(
            meta=CaseStudyMeta.from_frontmatter(document.metadata, slug),
            body=document.body,
        )

    def _has_sub_document(self, prefix: str, locale: str, slug: str) -> bool:
        if not is_valid_slug(slug) or not is_valid_slug(locale):
            return False
        return os.path.exists(self._sub_document_path(prefix, slug, locale))

    def _get_sub_document(
        self, prefix: str, locale: str, slug: str
    ) -> Optional[CaseStudy]:
        """
        Load a sub-document with its parent's metadata.

        A sub-document without a parent case study is not reachable.
        """
        if not self._has_sub_document(prefix, locale, slug):
            return None

        parent = self.get_case_study(locale, slug)
        if parent is None:
            self.logger.debug(
                f"Ignoring orphan {prefix} document for {slug} ({locale})"
            )
            return None

        document = read_document(self._sub_document_path(prefix, slug, locale))
        return CaseStudy(meta=parent.meta, body=document.body)

    def _list_sub_document_refs(
        self, prefix: str, locales: Iterable[str]
    ) -> List[SubDocumentRef]:
        refs = []
        for locale in locales:
            if not is_valid_slug(locale):
                continue
            for slug in self._list_slug_dirs(PROJECTS_DIR):
                if not is_valid_slug(slug):
                    continue
                parent_path = self._locale_document_path(PROJECTS_DIR, slug, locale)
                if self._has_sub_document(prefix, locale, slug) and os.path.exists(
                    parent_path
                ):
                    refs.append(SubDocumentRef(locale=locale, slug=slug))
        return refs

    def case_study_has_deep_dive(self, locale: str, slug: str) -> bool:
        return self._has_sub_document(DEEP_DIVE_PREFIX, locale, slug)

    def get_case_study_deep_dive(self, locale: str, slug: str) -> Optional[CaseStudy]:
        return self._get_sub_document(DEEP_DIVE_PREFIX, locale, slug)

    def case_study_has_design_doc(self, locale: str, slug: str) -> bool:
        return self._has_sub_document(DESIGN_DOC_PREFIX, locale, slug)

    def get_case_study_design_doc(self, locale: str, slug: str) -> Optional[CaseStudy]:
        return self._get_sub_document(DESIGN_DOC_PREFIX, locale, slug)

    def list_deep_dive_refs(self, locales: Iterable[str]) -> List[SubDocumentRef]:
        return self._list_sub_document_refs(DEEP_DIVE_PREFIX, locales)

    def list_design_doc_refs(self, locales: Iterable[str]) -> List[SubDocumentRef]:
        return self._list_sub_document_refs(DESIGN_DOC_PREFIX, locales)

    # About and testimonials

    def get_about_content(self, locale: str) -> Optional[AboutData]:
        if not is_valid_slug(locale):
            return None

        path = os.path.join(self.content_dir, ABOUT_DIR, f"{locale}{DOCUMENT_EXTENSION}")
        if not os.path.exists(path):
            return None

        document = read_document(path)
        return AboutData.from_frontmatter(document.metadata, document.body)

    def list_testimonials(self) -> List[Testimonial]:
        path = os.path.join(self.content_dir, TESTIMONIALS_FILE)
        if not os.path.exists(path):
            return []

        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)

        return [Testimonial.from_dict(record) for record in records]
