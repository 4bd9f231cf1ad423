"""
Value types for the optional structured fields of a case study.

Instances are only built by the sanitizers in
``processors/field_sanitizers.py``, so a present value is always complete.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Links:
    """External project links; each URL is http(s)."""

    live: Optional[str] = None
    github: Optional[str] = None
    docs: Optional[str] = None


@dataclass(frozen=True)
class CtaButton:
    label: str
    url: str


@dataclass(frozen=True)
class CallToAction:
    """Primary/secondary call-to-action buttons; at least one is set."""

    primary: Optional[CtaButton] = None
    secondary: Optional[CtaButton] = None


@dataclass(frozen=True)
class Competitor:
    name: str
    differentiator: str


@dataclass(frozen=True)
class Feature:
    title: str
    description: str
    icon: Optional[str] = None


@dataclass(frozen=True)
class Keywords:
    """SEO keyword groups; at least one group is set and non-empty."""

    primary: Optional[List[str]] = None
    long_tail: Optional[List[str]] = None
