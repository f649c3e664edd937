"""
Record schemas for the static content catalog.

Blog posts and work projects share the ``ContentRecord`` base: the fields the
repository needs for lookup, filtering and ordering. Records are frozen so the
catalog cannot be mutated after it has been loaded.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from grizzly.core.utils import render_html_safe

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class ContentRecord(BaseModel):
    """Fields shared by every catalog entry."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    id: str = Field(min_length=1)
    slug: str = Field(pattern=SLUG_PATTERN)
    title: str = Field(min_length=1)
    date: datetime.date
    category: str = Field(min_length=1)
    tags: tuple[str, ...] = ()
    image: str = Field(min_length=1)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        # Work projects are numbered in the source data.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class BlogPost(ContentRecord):
    excerpt: str = Field(min_length=1)
    author: str = Field(min_length=1)
    read_time: str = Field(alias="readTime", min_length=1)
    # Article HTML, cleaned once when the catalog loads.
    body: str = Field(min_length=1)

    @field_validator("body")
    @classmethod
    def sanitize_body(cls, value: str) -> str:
        return render_html_safe(value)


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str = Field(min_length=1)
    author: str = Field(min_length=1)
    title: str = ""


class WorkProject(ContentRecord):
    """A portfolio entry; ``tags`` lists the technologies used."""

    description: str = Field(min_length=1)
    project_url: str = Field(alias="projectUrl", default="")
    metrics: dict[str, str] = Field(default_factory=dict)
    quote: Quote | None = None

    @property
    def technologies(self) -> tuple[str, ...]:
        return self.tags
