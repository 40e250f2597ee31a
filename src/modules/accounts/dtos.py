"""Account DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``RegisterAccountDTO``: input for registration.
- ``LoginDTO``: input for authentication.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator

from modules.accounts.constants import NAME_MAX_LENGTH, PASSWORD_MIN_LENGTH

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(value: str) -> str:
    return value.strip().lower()


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class RegisterAccountDTO(BaseModel):
    """Immutable DTO for registration requests.

    Validates:
    - ``name`` is non-empty and at most 100 characters.
    - ``email`` is well formed; normalised to lower case.
    - ``password`` has at least 6 characters (kept verbatim).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    password: str

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be empty.")
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(f"Name must be at most {NAME_MAX_LENGTH} characters.")
        return v

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, v: str) -> str:
        v = normalize_email(v)
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Enter a valid email address.")
        return v

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        if len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters."
            )
        return v


class LoginDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def email_lowercase(cls, v: str) -> str:
        return normalize_email(v)

