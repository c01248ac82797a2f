"""Pydantic Schemas - payload validation for create/update requests.

Invariants:
    - Schemas check shape and strip text; domain ranges live in core/validation.py
    - Update schemas distinguish "absent" from "null" via model_fields_set
    - parse_payload() is the only place pydantic errors become domain ValidationError

Design Decisions:
    - Separate from models: schemas are API contracts, models are stored entities
"""
