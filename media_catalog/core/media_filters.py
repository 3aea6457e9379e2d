"""Media Filters — pure predicates and ordering used by the catalog store.

Invariants:
    - Filters preserve the relative order of their input
    - Type matching is exact and case-sensitive; unknown types simply match nothing
    - Search is a case-insensitive substring match on title, artist, or category
    - Ranking is stable: equal ranks keep insertion order

Design Decisions:
    - Pure functions over store methods: a persistent backend can reuse them
      for in-process filtering without duplicating the rules
"""

from typing import Iterable, TypeVar

from media_catalog.core.repository_protocols import MediaLike, RankedLike

M = TypeVar("M", bound=MediaLike)
R = TypeVar("R", bound=RankedLike)

SEARCHABLE_FIELDS = ("title", "artist", "category")


def matches_query(item: MediaLike, query: str) -> bool:
    """True when any searchable field contains query, ignoring case."""
    needle = query.lower()
    return any(
        needle in getattr(item, name).lower() for name in SEARCHABLE_FIELDS
    )


def filter_featured(items: Iterable[M]) -> list[M]:
    return [item for item in items if item.featured]


def filter_by_type(items: Iterable[M], media_type: str) -> list[M]:
    return [item for item in items if item.type == media_type]


def search(items: Iterable[M], query: str) -> list[M]:
    # Empty queries are rejected by the API before reaching here.
    return [item for item in items if matches_query(item, query)]


def order_by_rank(rows: Iterable[R]) -> list[R]:
    return sorted(rows, key=lambda row: row.rank)
