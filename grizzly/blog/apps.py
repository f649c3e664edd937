"""Blog app configuration."""

from django.apps import AppConfig


class BlogConfig(AppConfig):
    name = "grizzly.blog"
    verbose_name = "Blog"
