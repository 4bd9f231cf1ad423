"""
Content repository interface consumed by page rendering and build emitters.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..models.about import AboutData
from ..models.blog_post import BlogPost, BlogPostMeta
from ..models.case_study import CaseStudy, CaseStudyMeta, SubDocumentRef
from ..models.testimonial import Testimonial


class ContentRepository(ABC):
    """
    Abstract base class for read-only content sources.

    "Not found" is returned as None (or False / an empty list), never raised.
    """

    @abstractmethod
    def list_blog_posts(self, locale: str) -> List[BlogPostMeta]:
        """
        List published blog posts for a locale, newest first.

        Args:
            locale: Locale code

        Returns:
            Post metadata, drafts excluded
        """
        pass

    @abstractmethod
    def get_blog_post(self, locale: str, slug: str) -> Optional[BlogPost]:
        pass

    @abstractmethod
    def list_case_studies(self, locale: str) -> List[CaseStudyMeta]:
        """
        List case studies for a locale, newest launch date first.
        """
        pass

    @abstractmethod
    def get_case_study(self, locale: str, slug: str) -> Optional[CaseStudy]:
        pass

    @abstractmethod
    def case_study_has_deep_dive(self, locale: str, slug: str) -> bool:
        pass

    @abstractmethod
    def get_case_study_deep_dive(self, locale: str, slug: str) -> Optional[CaseStudy]:
        """
        Get the deep-dive sub-document, carrying the parent's metadata.

        Returns None if either the sub-document or its parent is missing.
        """
        pass

    @abstractmethod
    def case_study_has_design_doc(self, locale: str, slug: str) -> bool:
        pass

    @abstractmethod
    def get_case_study_design_doc(self, locale: str, slug: str) -> Optional[CaseStudy]:
        """
        Get the design rationale sub-document, carrying the parent's metadata.

        Returns None if either the sub-document or its parent is missing.
        """
        pass

    @abstractmethod
    def list_deep_dive_refs(self, locales: Iterable[str]) -> List[SubDocumentRef]:
        pass

    @abstractmethod
    def list_design_doc_refs(self, locales: Iterable[str]) -> List[SubDocumentRef]:
        pass

    @abstractmethod
    def get_about_content(self, locale: str) -> Optional[AboutData]:
        pass

    @abstractmethod
    def list_testimonials(self) -> List[Testimonial]:
        pass
