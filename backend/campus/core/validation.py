"""Field Validation - pure range and format rules for entity fields.

Invariants:
    - Every check raises ValidationError (with the field name) or returns the clean value
    - Checks never touch a collection; uniqueness lives in the repositories
    - Email shape is local@domain.tld: no whitespace, one "@", a dot in the domain
"""

import re

from campus.core.domain_types import (
    MIN_LEARNER_AGE,
    MIN_CREDIT_HOURS,
    MAX_CREDIT_HOURS,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_BYTES,
)
from campus.core.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def check_required_text(value: str | None, field: str) -> str:
    """Strip and require a non-empty string."""
    if value is None:
        raise ValidationError(f"{field} cannot be null", field)
    cleaned = value.strip()
    if not cleaned:
        raise ValidationError(f"{field} cannot be empty", field)
    return cleaned


def check_email(value: str | None, field: str = "email") -> str:
    cleaned = check_required_text(value, field)
    if not EMAIL_PATTERN.match(cleaned):
        raise ValidationError(f"'{cleaned}' is not a valid email address", field)
    return cleaned


def check_age(value: int | None, field: str = "age") -> int:
    if value is None:
        raise ValidationError(f"{field} cannot be null", field)
    if value < MIN_LEARNER_AGE:
        raise ValidationError(
            f"{field} must be at least {MIN_LEARNER_AGE} (got {value})", field,
        )
    return value


def check_credit_hours(value: int | None, field: str = "credit_hours") -> int:
    if value is None:
        raise ValidationError(f"{field} cannot be null", field)
    if not MIN_CREDIT_HOURS <= value <= MAX_CREDIT_HOURS:
        raise ValidationError(
            f"{field} must be between {MIN_CREDIT_HOURS} and {MAX_CREDIT_HOURS} "
            f"(got {value})",
            field,
        )
    return value


def check_password(value: str | None, field: str = "password") -> str:
    if value is None:
        raise ValidationError(f"{field} cannot be null", field)
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"{field} must be at least {MIN_PASSWORD_LENGTH} characters", field,
        )
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"{field} must be at most {MAX_PASSWORD_BYTES} bytes", field,
        )
    return value


def normalize_key(value: str) -> str:
    """Key used by unique indexes (email, code): trimmed and case-folded."""
    return value.strip().casefold()
