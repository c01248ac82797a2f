"""Identifier Allocator - tests for per-kind monotonic string IDs.

Tests cover:
    - IDs start at collection size + 1
    - Kinds have independent counters
    - IDs are never reused and gaps are never filled
    - reset() starts every kind over
"""

import pytest

from campus.core.domain_types import EntityKind
from campus.core.id_allocator import IdAllocator


def test_first_id_is_one_for_empty_collection():
    allocator = IdAllocator()
    assert allocator.next(EntityKind.LEARNER) == "1"


def test_first_id_follows_existing_collection_size():
    allocator = IdAllocator({EntityKind.SUBJECT: 4})
    assert allocator.next(EntityKind.SUBJECT) == "5"


def test_ids_are_strictly_increasing_strings():
    allocator = IdAllocator()
    issued = [allocator.next(EntityKind.LEARNER) for _ in range(3)]
    assert issued == ["1", "2", "3"]


def test_kinds_have_independent_counters():
    allocator = IdAllocator()
    allocator.next(EntityKind.LEARNER)
    allocator.next(EntityKind.LEARNER)
    assert allocator.next(EntityKind.SUBJECT) == "1"
    assert allocator.next(EntityKind.CREDENTIAL) == "1"


def test_last_issued_tracks_counter():
    allocator = IdAllocator({EntityKind.LEARNER: 2})
    assert allocator.last_issued(EntityKind.LEARNER) == 2
    allocator.next(EntityKind.LEARNER)
    assert allocator.last_issued(EntityKind.LEARNER) == 3


def test_negative_collection_size_rejected():
    with pytest.raises(ValueError):
        IdAllocator({EntityKind.LEARNER: -1})


def test_reset_restarts_all_kinds():
    allocator = IdAllocator({EntityKind.LEARNER: 10})
    allocator.next(EntityKind.SUBJECT)
    allocator.reset()
    assert allocator.next(EntityKind.LEARNER) == "1"
    assert allocator.next(EntityKind.SUBJECT) == "1"


def test_second_registration_of_a_kind_rejected():
    allocator = IdAllocator()
    allocator.register(EntityKind.LEARNER, 0)
    allocator.next(EntityKind.LEARNER)
    with pytest.raises(ValueError):
        allocator.register(EntityKind.LEARNER, 0)
    assert allocator.next(EntityKind.LEARNER) == "2"


def test_reset_keeps_registrations():
    allocator = IdAllocator({EntityKind.SUBJECT: 3})
    allocator.reset()
    with pytest.raises(ValueError):
        allocator.register(EntityKind.SUBJECT, 0)
