"""
Data models for the about page.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ExperienceEntry:
    period: str
    title: str
    description: str
    current: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExperienceEntry":
        return cls(
            period=data.get("period"),
            title=data.get("title"),
            description=data.get("description"),
            current=bool(data.get("current", False)),
        )


@dataclass(frozen=True)
class AboutData:
    """
    About page content: experience timeline plus the document body.
    """

    body: str
    experience: List[ExperienceEntry] = field(default_factory=list)

    @classmethod
    def from_frontmatter(cls, frontmatter_data: Dict[str, Any], body: str) -> "AboutData":
        """
        Create AboutData from front matter and body.

        Entries of ``experience`` that are not mappings are ignored.
        """
        experience = frontmatter_data.get("experience")
        if not isinstance(experience, list):
            experience = []

        return cls(
            body=body,
            experience=[
                ExperienceEntry.from_dict(entry)
                for entry in experience
                if isinstance(entry, dict)
            ],
        )
