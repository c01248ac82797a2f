"""Repositories - in-memory entity collections with uniqueness enforcement.

Invariants:
    - Each repository owns exactly one collection plus its unique indexes
    - A failed create/update leaves the collection and indexes untouched
    - Deletes cascade into the enrollment store before returning

Design Decisions:
    - Primary map keyed by ID (insertion-ordered dict) plus normalized unique
      indexes, instead of linear scans
"""
