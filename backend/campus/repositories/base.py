"""Repository Base - ID-keyed storage, unique indexes, and list via the query pipeline.

Invariants:
    - _items preserves insertion order (list order == creation order)
    - UniqueIndex keys are normalize_key(value); a self-match is not a conflict
    - get() raises NotFoundError; find() returns None
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from campus.core.domain_types import EntityKind
from campus.core.errors import ConflictError, NotFoundError, ValidationError
from campus.core.id_allocator import IdAllocator
from campus.core.query_pipeline import Criteria, PageOptions, SortSpec, run_pipeline
from campus.core.validation import normalize_key

T = TypeVar("T")


class UniqueIndex:
    """Normalized value -> owning entity ID."""

    def __init__(self, kind: EntityKind, field: str):
        self._kind = kind
        self._field = field
        self._owners: dict[str, str] = {}

    def check(self, value: str, exclude_id: str | None = None) -> None:
        owner = self._owners.get(normalize_key(value))
        if owner is not None and owner != exclude_id:
            raise ConflictError(self._kind.label, self._field, value)

    def claim(self, value: str, owner_id: str) -> None:
        self._owners[normalize_key(value)] = owner_id

    def release(self, value: str) -> None:
        self._owners.pop(normalize_key(value), None)

    def owner_of(self, value: str) -> str | None:
        return self._owners.get(normalize_key(value))

    def clear(self) -> None:
        self._owners.clear()


class InMemoryRepository(Generic[T]):
    """Shared storage for one entity kind. Subclasses add create/update/delete."""

    kind: EntityKind

    def __init__(self, allocator: IdAllocator):
        self._allocator = allocator
        self._items: dict[str, T] = {}
        allocator.register(self.kind, len(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def all(self) -> list[T]:
        return list(self._items.values())

    def find(self, entity_id: str) -> T | None:
        return self._items.get(entity_id)

    def get(self, entity_id: str) -> T:
        entity = self._items.get(entity_id)
        if entity is None:
            raise NotFoundError(self.kind.label, entity_id)
        return entity

    def exists(self, entity_id: str) -> bool:
        return entity_id in self._items

    def list(
        self,
        criteria: Criteria[T] | None = None,
        sort: SortSpec | None = None,
        page: PageOptions | None = None,
    ) -> list[T]:
        return run_pipeline(self._items.values(), criteria, sort, page)

    def clear(self) -> None:
        self._items.clear()

    def _allocate_id(self) -> str:
        return self._allocator.next(self.kind)

    def _store(self, entity_id: str, entity: T) -> None:
        self._items[entity_id] = entity

    def _discard(self, entity_id: str) -> T | None:
        return self._items.pop(entity_id, None)


def reject_unknown_fields(changes: Mapping[str, Any], allowed: frozenset[str]) -> None:
    unknown = sorted(set(changes) - allowed)
    if unknown:
        raise ValidationError(f"Unknown field(s): {', '.join(unknown)}", unknown[0])
