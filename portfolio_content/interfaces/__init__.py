"""
Interfaces package for the portfolio content layer.
"""

from .content_repository import ContentRepository
from .output_emitter import OutputEmitter

__all__ = ["ContentRepository", "OutputEmitter"]
