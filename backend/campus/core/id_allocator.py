"""Identifier Allocator - monotonically increasing string IDs per entity kind.

Invariants:
    - next(kind) returns str(n) with n strictly increasing per kind
    - The first ID for a kind is (collection size at registration) + 1
    - IDs are never reused, even after the entity is deleted
    - Gaps left by deletions are never filled
    - A kind is registered at most once; a second register() raises instead of
      rewinding the counter

Design Decisions:
    - Pure counter, no locking: the Registrar serializes every caller
"""

from collections.abc import Mapping

from campus.core.domain_types import EntityKind


class IdAllocator:
    """Per-kind counters. Not thread-safe on its own."""

    def __init__(self, initial_sizes: Mapping[EntityKind, int] | None = None):
        self._last: dict[EntityKind, int] = {kind: 0 for kind in EntityKind}
        self._registered: set[EntityKind] = set()
        for kind, size in (initial_sizes or {}).items():
            self.register(kind, size)

    def register(self, kind: EntityKind, collection_size: int) -> None:
        """Start issuing IDs for `kind` after an existing collection of this size."""
        if collection_size < 0:
            raise ValueError("collection_size must be >= 0")
        if kind in self._registered:
            raise ValueError(f"{kind.label} IDs are already being issued by this allocator")
        self._registered.add(kind)
        self._last[kind] = collection_size

    def next(self, kind: EntityKind) -> str:
        self._last[kind] += 1
        return str(self._last[kind])

    def last_issued(self, kind: EntityKind) -> int:
        return self._last[kind]

    def reset(self) -> None:
        for kind in self._last:
            self._last[kind] = 0
