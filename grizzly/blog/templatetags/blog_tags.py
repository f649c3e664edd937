from django import template
from django.utils.text import Truncator

from grizzly.blog.constants import EXCERPT_PREVIEW_MAX_LENGTH
from grizzly.blog.constants import LATEST_POSTS_LIMIT
from grizzly.content.catalog import get_catalog

register = template.Library()


@register.simple_tag
def most_recent_blog_post():
    """Return the most recently published blog post or ``None``."""

    posts = get_catalog().blog.get_all()
    return posts[0] if posts else None


@register.simple_tag
def latest_blog_posts(limit=LATEST_POSTS_LIMIT):
    return get_catalog().blog.get_all()[:limit]


@register.filter
def excerpt_preview(value, length=EXCERPT_PREVIEW_MAX_LENGTH):
    """Shorten an excerpt for cards: ``"First hundred chars..."``."""
    return Truncator(value or "").chars(int(length), truncate="...")
