"""
Load and validate the static content dataset.

The JSON files are read exactly once, when the ``content`` app is ready. Every
record is validated against its pydantic schema and the ``id``/``slug``
uniqueness invariants are checked here, so nothing downstream has to
second-guess the data.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from grizzly.content.repository import ContentRepository
from grizzly.content.schemas import BlogPost
from grizzly.content.schemas import ContentRecord
from grizzly.content.schemas import WorkProject

logger = logging.getLogger(__name__)

BLOG_POSTS_FILENAME = "blog_posts.json"
WORK_PROJECTS_FILENAME = "work_projects.json"

RecordT = TypeVar("RecordT", bound=ContentRecord)


class ContentLoadError(Exception):
    """Raised when the static dataset is missing, malformed or inconsistent."""


@dataclass(frozen=True)
class ContentCatalog:
    """The site's blog and work repositories, loaded together at startup."""

    blog: ContentRepository[BlogPost]
    work: ContentRepository[WorkProject]


def _duplicates(values) -> list[str]:
    return sorted(value for value, count in Counter(values).items() if count > 1)


def parse_records(raw: object, schema: type[RecordT], source: str = "") -> tuple[RecordT, ...]:
    """Validate a list of raw dicts and check the uniqueness invariants."""
    label = source or schema.__name__
    try:
        records = TypeAdapter(tuple[schema, ...]).validate_python(raw)
    except PydanticValidationError as exc:
        raise ContentLoadError(f"Invalid records in {label}: {exc}") from exc

    duplicate_ids = _duplicates(record.id for record in records)
    if duplicate_ids:
        raise ContentLoadError(f"Duplicate ids in {label}: {', '.join(duplicate_ids)}")
    duplicate_slugs = _duplicates(record.slug for record in records)
    if duplicate_slugs:
        raise ContentLoadError(
            f"Duplicate slugs in {label}: {', '.join(duplicate_slugs)}",
        )
    return records


def load_records(path: Path, schema: type[RecordT]) -> tuple[RecordT, ...]:
    try:
        with path.open(encoding="utf-8") as fh:
            raw = json.load(fh)
    except FileNotFoundError as exc:
        raise ContentLoadError(f"Content file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ContentLoadError(f"Content file {path} is not valid JSON: {exc}") from exc
    return parse_records(raw, schema, source=path.name)


def load_catalog(data_dir: Path | str) -> ContentCatalog:
    data_dir = Path(data_dir)
    blog_posts = load_records(data_dir / BLOG_POSTS_FILENAME, BlogPost)
    work_projects = load_records(data_dir / WORK_PROJECTS_FILENAME, WorkProject)
    logger.info(
        "Loaded content catalog from %s: %d blog posts, %d work projects",
        data_dir,
        len(blog_posts),
        len(work_projects),
    )
    return ContentCatalog(
        blog=ContentRepository(blog_posts),
        work=ContentRepository(work_projects),
    )
