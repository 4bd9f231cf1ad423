"""
Pytest configuration and fixtures for the portfolio content layer.
"""

import json

import pytest
from hypothesis import settings, Verbosity

from portfolio_content.managers.content_manager import FileContentRepository
from portfolio_content.models.site_config import SiteConfig

# Configure Hypothesis for property-based testing
settings.register_profile("default", max_examples=100, verbosity=Verbosity.normal)
settings.load_profile("default")


@pytest.fixture
def content_dir(tmp_path):
    """Empty content root."""
    path = tmp_path / "content"
    path.mkdir()
    return path


@pytest.fixture
def write_doc(content_dir):
    """Write a document with raw front matter under the content root."""

    def _write(relative_path: str, front_matter: str, body: str = "Content"):
        path = content_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"---\n{front_matter.strip()}\n---\n{body}", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_testimonials(content_dir):
    def _write(records):
        path = content_dir / "testimonials.json"
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def repository(content_dir):
    return FileContentRepository(str(content_dir))


@pytest.fixture
def site_config(tmp_path, content_dir):
    """SiteConfig pointing at the temporary content and public dirs."""
    return SiteConfig(content_dir=str(content_dir), public_dir=str(tmp_path / "public"))


@pytest.fixture
def case_study_front_matter():
    """Minimal valid case study front matter."""
    return """
title: Project
description: Desc
clientType: Test
status: active
launchDate: 2024-01-01
"""


@pytest.fixture
def english_body():
    """Body of exactly 400 whitespace-separated words."""
    return " ".join(["word"] * 400)
