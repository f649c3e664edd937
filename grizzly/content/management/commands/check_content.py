"""
Validate the static content dataset without starting the site.

Content changes ship with a deployment, so run this in CI after editing the
JSON files under ``grizzly/content/data/``.

Usage:
    python manage.py check_content
    python manage.py check_content --data-dir /path/to/data
"""

from __future__ import annotations

from django.conf import settings
from django.core.management.base import BaseCommand
from django.core.management.base import CommandError

from grizzly.content.loader import ContentLoadError
from grizzly.content.loader import load_catalog


class Command(BaseCommand):
    help = "Validate blog posts and work projects and summarize the catalog."

    def add_arguments(self, parser):
        parser.add_argument(
            "--data-dir",
            default=None,
            help="Directory holding blog_posts.json and work_projects.json.",
        )

    def handle(self, *args, **options):
        data_dir = options["data_dir"] or settings.CONTENT_DATA_DIR
        try:
            catalog = load_catalog(data_dir)
        except ContentLoadError as exc:
            raise CommandError(str(exc)) from exc

        for label, repository in (("Blog posts", catalog.blog), ("Work projects", catalog.work)):
            categories = repository.get_all_categories()
            newest = repository.get_all()[0].date if len(repository) else "-"
            self.stdout.write(
                f"{label}: {len(repository)} records, "
                f"{len(categories)} categories, newest {newest}",
            )
        self.stdout.write(self.style.SUCCESS("Content catalog is valid."))
