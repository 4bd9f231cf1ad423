"""
Testimonial model loaded from ``testimonials.json``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Testimonial:
    """
    A client testimonial. The JSON file is a trusted internal source, so
    records are taken as written.
    """

    quote: str
    author_name: str
    author_role: str
    author_company: str
    featured: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Testimonial":
        return cls(
            quote=data.get("quote"),
            author_name=data.get("authorName"),
            author_role=data.get("authorRole"),
            author_company=data.get("authorCompany"),
            featured=data.get("featured"),
        )
