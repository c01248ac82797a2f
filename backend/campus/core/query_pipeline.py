"""Query Pipeline - filter, sort, paginate over any entity collection.

Invariants:
    - Stages run in fixed order: filter -> sort -> paginate
    - A missing stage input (criteria, sort, page) is a pass-through
    - Input sequences are never mutated; every stage returns a new list
    - Sorting is stable; a pair with an absent value compares equal
    - That equality is not transitive: once absent values are mixed with present
      ones, the present values are only partially ordered among themselves
      (each is ordered against its neighbours, not necessarily globally).
      With no absent values the order is total
    - Strings compare locale-aware, numbers numerically
    - Page size is capped at MAX_PAGE_SIZE; an out-of-range page is empty

Design Decisions:
    - All functions are PURE: no IO, no shared state
    - Criteria is a Protocol: each entity kind supplies its own predicate set
      (see core/criteria.py), the pipeline only calls matches()
"""

import locale
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Protocol, TypeVar

from campus.core.domain_types import SortDirection, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class Criteria(Protocol[T_contra]):
    """Per-kind predicate set. Absent fields impose no constraint."""
    def matches(self, entity: T_contra) -> bool: ...


@dataclass(frozen=True)
class SortSpec:
    """Sort key (attribute name) plus direction."""
    key: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, key: str, direction: str | None = None) -> "SortSpec":
        return cls(key=key, direction=SortDirection.parse(direction))

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


@dataclass(frozen=True)
class PageOptions:
    """Zero-indexed page request."""
    page_size: int | None = DEFAULT_PAGE_SIZE
    page_number: int | None = 0

    @property
    def effective_size(self) -> int:
        if self.page_size is None or self.page_size <= 0:
            return DEFAULT_PAGE_SIZE
        return min(self.page_size, MAX_PAGE_SIZE)

    @property
    def effective_number(self) -> int:
        return 0 if self.page_number is None else self.page_number


# ─── Stage 1: filter ────────────────────────────────────────────

def filter_entities(items: Iterable[T], criteria: Criteria[T] | None) -> list[T]:
    if criteria is None:
        return list(items)
    return [item for item in items if criteria.matches(item)]


# ─── Stage 2: sort ──────────────────────────────────────────────

def compare_values(a: Any, b: Any) -> int:
    """Three-way compare. Absent or mismatched values compare equal."""
    if a is None or b is None:
        return 0
    if isinstance(a, str) and isinstance(b, str):
        return _locale_compare(a, b)
    if _is_number(a) and _is_number(b):
        return (a > b) - (a < b)
    return 0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _locale_compare(a: str, b: str) -> int:
    primary = locale.strcoll(a.casefold(), b.casefold())
    if primary:
        return 1 if primary > 0 else -1
    secondary = locale.strcoll(a, b)
    return (secondary > 0) - (secondary < 0)


def sort_entities(items: Iterable[T], sort: SortSpec | None) -> list[T]:
    if sort is None:
        return list(items)

    def cmp(left: T, right: T) -> int:
        result = compare_values(
            getattr(left, sort.key, None), getattr(right, sort.key, None),
        )
        return -result if sort.descending else result

    # sorted() is stable; descending is expressed in cmp (not reverse=True)
    # so ties keep input order in both directions
    return sorted(items, key=cmp_to_key(cmp))


# ─── Stage 3: paginate ──────────────────────────────────────────

def paginate(items: Sequence[T], page: PageOptions | None) -> list[T]:
    if page is None:
        return list(items)
    number = page.effective_number
    if number < 0:
        return []
    size = page.effective_size
    start = number * size
    return list(items[start:start + size])


# ─── Pipeline ───────────────────────────────────────────────────

def run_pipeline(
    items: Iterable[T],
    criteria: Criteria[T] | None = None,
    sort: SortSpec | None = None,
    page: PageOptions | None = None,
) -> list[T]:
    """filter -> sort -> paginate."""
    return paginate(sort_entities(filter_entities(items, criteria), sort), page)
