"""Tests for loading and validating the static content dataset."""

import datetime
import json
from io import StringIO

import pytest
from django.apps import apps
from django.core.management import call_command
from django.core.management.base import CommandError

from grizzly.content.catalog import get_catalog
from grizzly.content.loader import BLOG_POSTS_FILENAME
from grizzly.content.loader import WORK_PROJECTS_FILENAME
from grizzly.content.loader import ContentLoadError
from grizzly.content.loader import load_catalog
from grizzly.content.loader import parse_records
from grizzly.content.schemas import BlogPost
from grizzly.content.schemas import WorkProject


def _raw_post(**overrides):
    data = {
        "id": "hello-world",
        "slug": "hello-world",
        "title": "Hello world",
        "excerpt": "First post.",
        "date": "2025-01-15",
        "readTime": "3 min read",
        "body": "<p>Welcome to the blog.</p>",
        "category": "News",
        "author": "Sarah Chen",
        "image": "https://images.example.com/hello.jpg",
        "tags": ["Intro", "News"],
    }
    data.update(overrides)
    return data


def _raw_project(**overrides):
    data = {
        "id": 1,
        "slug": "chantelle-international",
        "title": "Chantelle International",
        "date": "2024-11-18",
        "category": "E-commerce",
        "tags": ["Next.js"],
        "image": "/static/images/work/chantelle.jpg",
        "description": "Multi-regional storefront.",
        "projectUrl": "https://chantelle.com/",
        "metrics": {"regions": "10+ Countries"},
        "quote": {"text": "Great work.", "author": "Marie Dubois", "title": "Director"},
    }
    data.update(overrides)
    return data


def _write_dataset(directory, posts, projects):
    (directory / BLOG_POSTS_FILENAME).write_text(json.dumps(posts), encoding="utf-8")
    (directory / WORK_PROJECTS_FILENAME).write_text(json.dumps(projects), encoding="utf-8")


class TestParseRecords:
    def test_parses_blog_post_fields(self):
        (post,) = parse_records([_raw_post()], BlogPost)

        assert post.date == datetime.date(2025, 1, 15)
        assert post.read_time == "3 min read"
        assert post.tags == ("Intro", "News")

    def test_blog_post_body_is_sanitized(self):
        (post,) = parse_records(
            [_raw_post(body='<h2 id="intro">Intro</h2><script>alert(1)</script>')],
            BlogPost,
        )

        assert post.body.startswith('<h2 id="intro">Intro</h2>')
        assert "<script" not in post.body

    def test_blog_post_requires_body(self):
        raw = _raw_post()
        del raw["body"]

        with pytest.raises(ContentLoadError):
            parse_records([raw], BlogPost)

    def test_numeric_ids_become_strings(self):
        (project,) = parse_records([_raw_project()], WorkProject)

        assert project.id == "1"
        assert project.technologies == ("Next.js",)
        assert project.quote.author == "Marie Dubois"

    def test_duplicate_slug_is_rejected(self):
        raw = [_raw_post(id="one"), _raw_post(id="two")]

        with pytest.raises(ContentLoadError, match="Duplicate slugs"):
            parse_records(raw, BlogPost)

    def test_duplicate_id_is_rejected(self):
        raw = [_raw_post(slug="one"), _raw_post(slug="two")]

        with pytest.raises(ContentLoadError, match="Duplicate ids"):
            parse_records(raw, BlogPost)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"slug": "Not A Slug"},
            {"date": "15/01/2025"},
            {"title": ""},
            {"unexpected": "field"},
        ],
    )
    def test_schema_violations_are_rejected(self, overrides):
        with pytest.raises(ContentLoadError):
            parse_records([_raw_post(**overrides)], BlogPost)

    def test_records_are_immutable(self):
        (post,) = parse_records([_raw_post()], BlogPost)

        with pytest.raises(ValueError):  # noqa: PT011
            post.title = "Changed"


class TestLoadCatalog:
    def test_loads_both_repositories(self, tmp_path):
        _write_dataset(tmp_path, [_raw_post()], [_raw_project()])

        catalog = load_catalog(tmp_path)

        assert catalog.blog.get_by_slug("hello-world").title == "Hello world"
        assert len(catalog.work) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(ContentLoadError, match="not found"):
            load_catalog(tmp_path)

    def test_invalid_json(self, tmp_path):
        (tmp_path / BLOG_POSTS_FILENAME).write_text("[{", encoding="utf-8")
        (tmp_path / WORK_PROJECTS_FILENAME).write_text("[]", encoding="utf-8")

        with pytest.raises(ContentLoadError, match="not valid JSON"):
            load_catalog(tmp_path)


class TestShippedDataset:
    def test_app_loads_catalog_at_startup(self):
        catalog = get_catalog()

        assert catalog is apps.get_app_config("content").catalog
        assert len(catalog.blog) > 0
        assert len(catalog.work) > 0

    def test_shipped_blog_is_newest_first(self):
        posts = get_catalog().blog.get_all()

        assert posts[0].slug == "sticky-scroll-animations-react"
        # Defined after nextjs-performance-optimization but dated later.
        slugs = [post.slug for post in posts]
        assert slugs.index("devops-best-practices") < slugs.index(
            "nextjs-performance-optimization",
        )


def test_check_content_command_reports_summary():
    out = StringIO()

    call_command("check_content", stdout=out)

    assert "Content catalog is valid." in out.getvalue()
    assert "Blog posts: 13 records" in out.getvalue()


def test_check_content_command_fails_on_bad_data(tmp_path):
    _write_dataset(tmp_path, [_raw_post(), _raw_post(id="other")], [])

    with pytest.raises(CommandError, match="Duplicate slugs"):
        call_command("check_content", data_dir=str(tmp_path), stdout=StringIO())
