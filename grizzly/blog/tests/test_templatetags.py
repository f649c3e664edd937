from grizzly.blog.templatetags.blog_tags import excerpt_preview
from grizzly.blog.templatetags.blog_tags import latest_blog_posts
from grizzly.blog.templatetags.blog_tags import most_recent_blog_post


def test_most_recent_blog_post(catalog):
    assert most_recent_blog_post().slug == "frontend-new"


def test_latest_blog_posts_respects_limit(catalog):
    assert [post.slug for post in latest_blog_posts(2)] == ["frontend-new", "backend-mid"]


def test_excerpt_preview_truncates_long_text():
    text = "x" * 150

    preview = excerpt_preview(text)

    assert len(preview) == 100
    assert preview.endswith("...")


def test_excerpt_preview_leaves_short_text():
    assert excerpt_preview("Short excerpt") == "Short excerpt"
    assert excerpt_preview(None) == ""
