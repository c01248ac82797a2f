"""Credential Schemas - register/login payload shape.

Password length and email shape are checked in core/validation.py so the
failure kind (ValidationError vs AuthenticationError) depends on the operation.
"""

from pydantic import BaseModel, Field


class CredentialsIn(BaseModel):
    """Email + password pair for register and login."""
    email: str = Field(max_length=320)
    password: str = Field(max_length=1024)
