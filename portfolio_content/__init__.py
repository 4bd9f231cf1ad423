"""
Build-time content layer for a bilingual portfolio site.
"""

from .managers.content_manager import FileContentRepository
from .models.site_config import SiteConfig

__all__ = ["FileContentRepository", "SiteConfig"]
