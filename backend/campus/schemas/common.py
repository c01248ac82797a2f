"""Payload Parsing - pydantic validation mapped onto the domain error hierarchy.

Invariants:
    - A pydantic failure surfaces as ValidationError naming the first offending field
    - changes_of() returns only the fields the caller actually supplied
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from campus.core.errors import ValidationError

M = TypeVar("M", bound=BaseModel)


def parse_payload(model: type[M], data: Mapping[str, Any]) -> M:
    """Validate raw input into `model`, raising the domain ValidationError on failure."""
    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or "input"
        raise ValidationError(f"{field}: {first['msg']}", field) from exc


def changes_of(payload: BaseModel) -> dict[str, Any]:
    """Supplied fields only (explicit nulls kept, absent fields dropped)."""
    return payload.model_dump(exclude_unset=True)


def strip_text(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v
