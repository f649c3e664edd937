"""
Read-only views over a static set of content records.

A ``ContentRepository`` is built once from already validated records and never
changes afterwards. All accessors are deterministic:

- ``get_all()`` orders by date, newest first; ties keep definition order.
- ``get_by_category()`` keeps that same order.
- ``get_all_categories()`` keeps the order in which categories first appear in
  the data as defined.
- ``get_related()`` takes the newest records other than the current one.

Only ``get_by_slug()`` can fail; every other accessor returns an empty tuple
when nothing matches.
"""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Iterator
from typing import Generic
from typing import TypeVar

from grizzly.content.schemas import ContentRecord

RecordT = TypeVar("RecordT", bound=ContentRecord)

DEFAULT_RELATED_LIMIT = 3
DEFAULT_FEATURED_LIMIT = 3


class ContentNotFoundError(LookupError):
    """Raised when no record has the requested slug."""

    def __init__(self, slug: str):
        super().__init__(f"No content record with slug '{slug}'.")
        self.slug = slug


class ContentRepository(Generic[RecordT]):
    def __init__(self, records: Iterable[RecordT]):
        self._records: tuple[RecordT, ...] = tuple(records)
        # sorted() is stable, so equal dates keep their definition order.
        self._by_date: tuple[RecordT, ...] = tuple(
            sorted(self._records, key=lambda record: record.date, reverse=True),
        )
        self._by_slug: dict[str, RecordT] = {}
        for record in self._records:
            if record.slug in self._by_slug:
                raise ValueError(f"Duplicate slug '{record.slug}'.")
            self._by_slug[record.slug] = record

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self._by_date)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def get_all(self) -> tuple[RecordT, ...]:
        return self._by_date

    def get_by_slug(self, slug: str) -> RecordT:
        try:
            return self._by_slug[slug]
        except KeyError:
            raise ContentNotFoundError(slug) from None

    def get_by_category(self, category: str) -> tuple[RecordT, ...]:
        return tuple(record for record in self._by_date if record.category == category)

    def get_all_categories(self) -> tuple[str, ...]:
        # dict keeps insertion order, giving first-occurrence ordering.
        return tuple(dict.fromkeys(record.category for record in self._records))

    def get_related(
        self,
        current_slug: str,
        limit: int = DEFAULT_RELATED_LIMIT,
    ) -> tuple[RecordT, ...]:
        """
        Up to ``limit`` of the newest records, never including ``current_slug``.

        This is a plain recency rule, not a relevance ranking.
        """
        if limit <= 0:
            return ()
        related = []
        for record in self._by_date:
            if record.slug == current_slug:
                continue
            related.append(record)
            if len(related) == limit:
                break
        return tuple(related)

    def get_featured(self, limit: int = DEFAULT_FEATURED_LIMIT) -> tuple[RecordT, ...]:
        """The first ``limit`` records in definition order."""
        if limit <= 0:
            return ()
        return self._records[:limit]
