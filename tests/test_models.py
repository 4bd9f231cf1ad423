"""
Tests for entity assembly from front matter.
"""

import dataclasses
import datetime
import logging

import pytest

from portfolio_content.models.about import AboutData, ExperienceEntry
from portfolio_content.models.blog_post import BlogPostMeta
from portfolio_content.models.case_study import CaseStudyMeta
from portfolio_content.models.fields import Links
from portfolio_content.models.testimonial import Testimonial


def test_blog_post_meta_from_frontmatter():
    """Test BlogPostMeta creation with defaults."""
    meta = BlogPostMeta.from_frontmatter(
        {"title": "Hello", "description": "D", "date": datetime.date(2024, 1, 15)},
        "hello",
        "en",
        " ".join(["word"] * 400),
    )

    assert meta.slug == "hello"
    assert meta.title == "Hello"
    assert meta.date == "2024-01-15"
    assert meta.tags == []
    assert meta.draft is False
    assert meta.reading_time == 2
    assert meta.locale == "en"


def test_blog_post_meta_keeps_tags_and_draft():
    meta = BlogPostMeta.from_frontmatter(
        {"title": "T", "description": "D", "date": "2024-01-15", "tags": ["a", "b"], "draft": True},
        "t",
        "ko",
        "가" * 10,
    )
    assert meta.tags == ["a", "b"]
    assert meta.draft is True
    assert meta.reading_time == 1


def test_entities_are_immutable():
    meta = BlogPostMeta.from_frontmatter({"title": "T"}, "t", "en", "")
    with pytest.raises(dataclasses.FrozenInstanceError):
        meta.title = "changed"


def test_case_study_meta_defaults():
    meta = CaseStudyMeta.from_frontmatter(
        {
            "title": "E-commerce Rebuild",
            "description": "Rebuilt platform",
            "clientType": "SaaS",
            "status": "completed",
            "launchDate": datetime.date(2023, 6, 1),
        },
        "project",
    )

    assert meta.client_type == "SaaS"
    assert meta.status == "completed"
    assert meta.launch_date == "2023-06-01"
    assert meta.tech_stack == []
    assert meta.featured is False
    for optional in (
        "thumbnail",
        "hero_image",
        "images",
        "d2_diagram",
        "links",
        "tagline",
        "category",
        "keywords",
        "competitors",
        "cta",
        "features",
        "video",
    ):
        assert getattr(meta, optional) is None


def test_case_study_meta_sanitizes_optional_fields():
    meta = CaseStudyMeta.from_frontmatter(
        {
            "title": "P",
            "description": "D",
            "clientType": "Own",
            "status": "active",
            "launchDate": "2024-01-01",
            "techStack": ["Python"],
            "featured": True,
            "thumbnail": "thumb.png",
            "heroImage": "/static/hero.png",
            "d2Diagram": "architecture",
            "links": {"live": "https://example.com", "github": "ftp://x"},
            "tagline": "Ship faster",
            "category": "not-a-category",
            "video": "https://www.youtube.com/watch?v=x",
        },
        "p",
    )

    assert meta.tech_stack == ["Python"]
    assert meta.featured is True
    assert meta.thumbnail == "/images/projects/p/thumb.png"
    assert meta.hero_image == "/static/hero.png"
    assert meta.d2_diagram == "architecture"
    assert meta.links == Links(live="https://example.com")
    assert meta.tagline == "Ship faster"
    assert meta.category is None
    assert meta.video is None


def test_case_study_meta_passes_status_through():
    meta = CaseStudyMeta.from_frontmatter({"status": "paused"}, "p")
    assert meta.status == "paused"


def test_about_data_from_frontmatter():
    about = AboutData.from_frontmatter(
        {
            "experience": [
                {"period": "2020-2023", "title": "Senior Dev", "description": "Built", "current": True},
                {"period": "2018-2020", "title": "Dev", "description": "Learned"},
                "not an entry",
            ]
        },
        "About me",
    )

    assert about.body == "About me"
    assert about.experience == [
        ExperienceEntry(period="2020-2023", title="Senior Dev", description="Built", current=True),
        ExperienceEntry(period="2018-2020", title="Dev", description="Learned", current=False),
    ]


def test_about_data_missing_experience():
    assert AboutData.from_frontmatter({}, "x").experience == []
    assert AboutData.from_frontmatter({"experience": None}, "x").experience == []


def test_testimonial_from_dict():
    testimonial = Testimonial.from_dict(
        {
            "quote": "Great work",
            "authorName": "Kim",
            "authorRole": "CTO",
            "authorCompany": "Acme",
            "featured": True,
        }
    )
    assert testimonial == Testimonial(
        quote="Great work",
        author_name="Kim",
        author_role="CTO",
        author_company="Acme",
        featured=True,
    )
    assert Testimonial.from_dict({"quote": "q"}).featured is None


def test_case_study_meta_logs_dropped_fields(caplog):
    caplog.set_level(logging.DEBUG, logger="portfolio_content.models.case_study")

    meta = CaseStudyMeta.from_frontmatter(
        {
            "title": "T",
            "description": "D",
            "clientType": "C",
            "status": "active",
            "launchDate": "2024-01-01",
            "video": "https://vimeo.com/123",
            "tagline": "Kept",
        },
        "app",
    )

    assert meta.video is None
    assert meta.tagline == "Kept"
    assert "Dropped 'video' from app" in caplog.text
    assert "'tagline'" not in caplog.text
