"""Core Layer - pure domain logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or repositories/
    - All functions are deterministic given their inputs

Design Decisions:
    - Functional core separated from the imperative shell (services + api)
"""
