"""
Tests for the file-backed content repository (query API).
"""

from unittest.mock import patch

import pytest

from portfolio_content.interfaces.content_repository import ContentRepository
from portfolio_content.managers.content_manager import FileContentRepository
from portfolio_content.models.case_study import SubDocumentRef
from portfolio_content.models.fields import CallToAction, CtaButton, Keywords
from portfolio_content.utils.error_handler import DocumentParseError

UNSAFE_SLUGS = ["../etc", "a/b", "..", "", "with space", "x.mdx", "a\\b"]


def test_repository_implements_interface(repository):
    assert isinstance(repository, ContentRepository)
    with pytest.raises(TypeError):
        ContentRepository()


class TestListBlogPosts:
    def test_missing_directory_returns_empty(self, repository):
        assert repository.list_blog_posts("en") == []

    def test_empty_directory_returns_empty(self, repository, content_dir):
        (content_dir / "blog").mkdir()
        assert repository.list_blog_posts("en") == []

    def test_parses_front_matter(self, repository, write_doc):
        write_doc(
            "blog/test/en.mdx",
            "title: Test Post\ndescription: A test post\ndate: 2024-01-15\ntags:\n  - typescript\n  - testing",
        )

        posts = repository.list_blog_posts("en")

        assert len(posts) == 1
        assert posts[0].slug == "test"
        assert posts[0].title == "Test Post"
        assert posts[0].date == "2024-01-15"
        assert posts[0].tags == ["typescript", "testing"]
        assert posts[0].locale == "en"

    def test_skips_slugs_without_locale_file(self, repository, write_doc):
        write_doc("blog/english-only/en.mdx", "title: E\ndescription: D\ndate: 2024-01-01")

        assert repository.list_blog_posts("ko") == []
        assert len(repository.list_blog_posts("en")) == 1

    def test_ignores_plain_files(self, repository, write_doc, content_dir):
        write_doc("blog/post/en.mdx", "title: P\ndescription: D\ndate: 2024-01-01")
        (content_dir / "blog" / "README.md").write_text("notes")

        assert [p.slug for p in repository.list_blog_posts("en")] == ["post"]

    def test_excludes_drafts_for_every_locale(self, repository, write_doc):
        for locale in ("en", "ko"):
            write_doc(
                f"blog/draft-post/{locale}.mdx",
                "title: Draft\ndescription: D\ndate: 2024-01-01\ndraft: true",
            )
            write_doc(
                f"blog/live-post/{locale}.mdx",
                "title: Live\ndescription: D\ndate: 2024-01-01",
            )

        for locale in ("en", "ko"):
            slugs = [p.slug for p in repository.list_blog_posts(locale)]
            assert slugs == ["live-post"]

    def test_sorted_newest_first(self, repository, write_doc):
        write_doc("blog/old/en.mdx", "title: Old\ndescription: D\ndate: 2022-01-01")
        write_doc("blog/new/en.mdx", "title: New\ndescription: D\ndate: 2024-01-01")
        write_doc("blog/mid/en.mdx", "title: Mid\ndescription: D\ndate: 2023-01-01")

        assert [p.slug for p in repository.list_blog_posts("en")] == ["new", "mid", "old"]

    def test_quoted_dates_are_ordered(self, repository, write_doc):
        write_doc("blog/a/en.mdx", "title: A\ndescription: D\ndate: \"Jan 5, 2024\"")
        write_doc("blog/b/en.mdx", "title: B\ndescription: D\ndate: \"2024-03-01T10:00:00\"")
        write_doc("blog/c/en.mdx", "title: C\ndescription: D\ndate: 2023-06-01")

        assert [p.slug for p in repository.list_blog_posts("en")] == ["b", "a", "c"]

    def test_korean_reading_time(self, repository, write_doc):
        write_doc("blog/post/ko.mdx", "title: 글\ndescription: 설명\ndate: 2024-01-01", "가" * 600)

        assert repository.list_blog_posts("ko")[0].reading_time == 2

    def test_unsafe_locale_returns_empty(self, repository, write_doc):
        write_doc("blog/post/en.mdx", "title: P\ndescription: D\ndate: 2024-01-01")
        assert repository.list_blog_posts("../blog") == []

    def test_invalid_front_matter_raises(self, repository, write_doc):
        write_doc("blog/broken/en.mdx", "title: [unclosed")
        with pytest.raises(DocumentParseError):
            repository.list_blog_posts("en")


class TestGetBlogPost:
    def test_end_to_end(self, repository, write_doc, english_body):
        write_doc(
            "blog/hello/en.mdx",
            'title: "Hello"\ndescription: "D"\ndate: "2024-01-15"',
            english_body,
        )

        post = repository.get_blog_post("en", "hello")

        assert post is not None
        assert post.meta.date == "2024-01-15"
        assert post.meta.reading_time == 2
        assert post.meta.tags == []
        assert post.meta.draft is False
        assert post.body == english_body

    def test_missing_file_returns_none(self, repository):
        assert repository.get_blog_post("en", "nope") is None

    def test_draft_can_be_fetched_directly(self, repository, write_doc):
        write_doc("blog/draft/en.mdx", "title: D\ndescription: D\ndate: 2024-01-01\ndraft: true")

        post = repository.get_blog_post("en", "draft")

        assert post is not None
        assert post.meta.draft is True

    @pytest.mark.parametrize("slug", UNSAFE_SLUGS)
    def test_unsafe_slug_does_not_touch_filesystem(self, repository, slug):
        with patch("portfolio_content.managers.content_manager.os.path.exists") as mock_exists, patch(
            "portfolio_content.managers.content_manager.read_document"
        ) as mock_read:
            assert repository.get_blog_post("en", slug) is None

        mock_exists.assert_not_called()
        mock_read.assert_not_called()


class TestListCaseStudies:
    def test_missing_directory_returns_empty(self, repository):
        assert repository.list_case_studies("en") == []

    def test_parses_front_matter(self, repository, write_doc):
        write_doc(
            "projects/project/en.mdx",
            "title: E-commerce Rebuild\ndescription: Rebuilt platform\nclientType: SaaS\n"
            "status: completed\ntechStack:\n  - Next.js\n  - TypeScript\nlaunchDate: 2023-06-01",
        )

        studies = repository.list_case_studies("en")

        assert len(studies) == 1
        assert studies[0].slug == "project"
        assert studies[0].client_type == "SaaS"
        assert studies[0].tech_stack == ["Next.js", "TypeScript"]
        assert studies[0].launch_date == "2023-06-01"
        assert studies[0].featured is False

    def test_sorted_by_launch_date_descending(self, repository, write_doc):
        for slug, launched in (("a", "2022-01-01"), ("b", "2024-01-01"), ("c", "2023-01-01")):
            write_doc(
                f"projects/{slug}/en.mdx",
                f"title: {slug}\ndescription: D\nclientType: T\nstatus: active\nlaunchDate: {launched}",
            )

        assert [s.launch_date for s in repository.list_case_studies("en")] == [
            "2024-01-01",
            "2023-01-01",
            "2022-01-01",
        ]

    def test_ignores_sub_documents(self, repository, write_doc, case_study_front_matter):
        write_doc("projects/p/en.mdx", case_study_front_matter)
        write_doc("projects/p/design.en.mdx", "", "Design")
        write_doc("projects/p/casestudy.en.mdx", "", "Deep dive")

        assert [s.slug for s in repository.list_case_studies("en")] == ["p"]

    def test_skips_missing_locale(self, repository, write_doc, case_study_front_matter):
        write_doc("projects/p/en.mdx", case_study_front_matter)
        assert repository.list_case_studies("ko") == []


class TestGetCaseStudy:
    def test_returns_meta_and_body(self, repository, write_doc, case_study_front_matter):
        write_doc("projects/my-project/en.mdx", case_study_front_matter, "Case study body")

        study = repository.get_case_study("en", "my-project")

        assert study.meta.slug == "my-project"
        assert study.meta.title == "Project"
        assert study.body == "Case study body"

    def test_sanitizes_marketing_fields(self, repository, write_doc, case_study_front_matter):
        write_doc(
            "projects/my-project/en.mdx",
            case_study_front_matter
            + """
category: chrome-extension
thumbnail: "//cdn.example.com/image.jpg"
heroImage: hero.png
images:
  - shot1.png
  - shot2.png
keywords:
  primary: [tabs, productivity]
cta:
  primary:
    label: "Install"
    url: https://example.com/install
  secondary:
    label: "Bad"
    url: "javascript:alert(1)"
video: https://www.youtube.com/embed/abc123
""",
        )

        meta = repository.get_case_study("en", "my-project").meta

        assert meta.category == "chrome-extension"
        assert meta.thumbnail == ""
        assert meta.hero_image == "/images/projects/my-project/hero.png"
        assert meta.images == [
            "/images/projects/my-project/shot1.png",
            "/images/projects/my-project/shot2.png",
        ]
        assert meta.keywords == Keywords(primary=["tabs", "productivity"])
        assert meta.cta == CallToAction(
            primary=CtaButton(label="Install", url="https://example.com/install")
        )
        assert meta.video == "https://www.youtube.com/embed/abc123"

    def test_missing_returns_none(self, repository):
        assert repository.get_case_study("en", "missing") is None

    @pytest.mark.parametrize("slug", UNSAFE_SLUGS)
    def test_unsafe_slug_returns_none(self, repository, slug):
        with patch("portfolio_content.managers.content_manager.os.path.exists") as mock_exists:
            assert repository.get_case_study("en", slug) is None
        mock_exists.assert_not_called()


class TestSubDocuments:
    def test_has_design_doc(self, repository, write_doc):
        write_doc("projects/p/design.en.mdx", "", "Design")

        assert repository.case_study_has_design_doc("en", "p") is True
        assert repository.case_study_has_design_doc("ko", "p") is False

    def test_has_deep_dive(self, repository, write_doc):
        write_doc("projects/p_1/casestudy.ko.mdx", "", "심층")

        assert repository.case_study_has_deep_dive("ko", "p_1") is True
        assert repository.case_study_has_deep_dive("en", "p_1") is False

    @pytest.mark.parametrize("slug", UNSAFE_SLUGS)
    def test_existence_checks_reject_unsafe_slugs(self, repository, slug):
        with patch("portfolio_content.managers.content_manager.os.path.exists") as mock_exists:
            assert repository.case_study_has_design_doc("en", slug) is False
            assert repository.case_study_has_deep_dive("en", slug) is False
            assert repository.get_case_study_design_doc("en", slug) is None
            assert repository.get_case_study_deep_dive("en", slug) is None
        mock_exists.assert_not_called()

    def test_design_doc_inherits_parent_meta(self, repository, write_doc, case_study_front_matter):
        write_doc(
            "projects/x/en.mdx",
            case_study_front_matter + "links:\n  github: https://github.com/x/x",
            "Parent body",
        )
        write_doc("projects/x/design.en.mdx", "title: Ignored", "Design body")

        doc = repository.get_case_study_design_doc("en", "x")

        assert doc.meta == repository.get_case_study("en", "x").meta
        assert doc.meta.title == "Project"
        assert doc.body == "Design body"

    def test_deep_dive_reads_own_body(self, repository, write_doc, case_study_front_matter):
        write_doc("projects/x/en.mdx", case_study_front_matter, "Parent body")
        write_doc("projects/x/casestudy.en.mdx", "", "Deep dive body")

        assert repository.get_case_study_deep_dive("en", "x").body == "Deep dive body"

    def test_orphan_design_doc_not_found(self, repository, write_doc):
        write_doc("projects/x/design.en.mdx", "", "Design body")

        assert repository.case_study_has_design_doc("en", "x") is True
        assert repository.get_case_study_design_doc("en", "x") is None

    def test_orphan_deep_dive_not_found(self, repository, write_doc):
        write_doc("projects/x/casestudy.en.mdx", "", "Deep dive")
        assert repository.get_case_study_deep_dive("en", "x") is None

    def test_missing_sub_document_not_found(self, repository, write_doc, case_study_front_matter):
        write_doc("projects/x/en.mdx", case_study_front_matter)
        assert repository.get_case_study_design_doc("en", "x") is None

    def test_list_design_doc_refs_skips_orphans(
        self, repository, write_doc, case_study_front_matter
    ):
        write_doc("projects/a/en.mdx", case_study_front_matter)
        write_doc("projects/a/design.en.mdx", "", "Design")
        write_doc("projects/a/ko.mdx", case_study_front_matter)
        write_doc("projects/a/design.ko.mdx", "", "디자인")
        write_doc("projects/orphan/design.en.mdx", "", "Design")

        assert repository.list_design_doc_refs(["en", "ko"]) == [
            SubDocumentRef(locale="en", slug="a"),
            SubDocumentRef(locale="ko", slug="a"),
        ]

    def test_list_deep_dive_refs(self, repository, write_doc, case_study_front_matter):
        write_doc("projects/a/en.mdx", case_study_front_matter)
        write_doc("projects/a/casestudy.en.mdx", "", "Deep dive")
        write_doc("projects/b/en.mdx", case_study_front_matter)

        assert repository.list_deep_dive_refs(["en", "ko"]) == [
            SubDocumentRef(locale="en", slug="a")
        ]


class TestAboutAndTestimonials:
    def test_about_missing_returns_none(self, repository):
        assert repository.get_about_content("en") is None

    def test_about_content(self, repository, write_doc):
        write_doc(
            "about/ko.mdx",
            "experience:\n  - period: 2020-2023\n    title: 개발자\n    description: 웹 개발\n    current: true",
            "소개",
        )

        about = repository.get_about_content("ko")

        assert about.body == "소개"
        assert len(about.experience) == 1
        assert about.experience[0].title == "개발자"
        assert about.experience[0].current is True

    def test_about_without_experience(self, repository, content_dir):
        (content_dir / "about").mkdir()
        (content_dir / "about" / "en.mdx").write_text("---\n---\nAbout content", encoding="utf-8")

        about = repository.get_about_content("en")

        assert about.experience == []
        assert about.body == "About content"

    def test_testimonials_missing_returns_empty(self, repository):
        assert repository.list_testimonials() == []

    def test_testimonials_loaded(self, repository, write_testimonials):
        write_testimonials(
            [
                {
                    "quote": "Excellent",
                    "authorName": "Lee",
                    "authorRole": "PM",
                    "authorCompany": "Acme",
                    "featured": True,
                },
                {
                    "quote": "Solid",
                    "authorName": "Park",
                    "authorRole": "CEO",
                    "authorCompany": "Beta",
                },
            ]
        )

        testimonials = repository.list_testimonials()

        assert [t.author_name for t in testimonials] == ["Lee", "Park"]
        assert testimonials[0].featured is True
        assert testimonials[1].featured is None

    def test_testimonials_empty_array(self, repository, write_testimonials):
        write_testimonials([])
        assert repository.list_testimonials() == []
