"""
Output emitter interface for build steps that write into the public directory.
"""

from abc import ABC, abstractmethod

from ..models.emit_result import EmitResult
from ..models.site_config import SiteConfig
from .content_repository import ContentRepository


class OutputEmitter(ABC):
    """
    Abstract base class for build emitters (feeds, sitemaps, assets).
    """

    name: str = "emitter"

    @abstractmethod
    def emit(self, repository: ContentRepository, config: SiteConfig) -> EmitResult:
        """
        Write this emitter's output.

        Args:
            repository: Source of site content
            config: Site configuration, including the public output directory

        Returns:
            EmitResult describing what was written

        Raises:
            EmitterError: If the output cannot be produced
        """
        pass
