"""Shared domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer translates them into HTTP responses through
``modules.core.exception_handler``; services never build responses.

Every error carries a stable ``code`` so callers can render a message
without parsing the human-readable text.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for every error the core surfaces to its callers."""

    code: str = "domain_error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    @property
    def attr(self) -> Optional[str]:
        """Name of the offending input field, when there is one."""
        return None

    @property
    def extra(self) -> Dict[str, Any]:
        """Structured fields a caller needs to render its own message."""
        return {}

    def as_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "detail": self.message,
            "attr": self.attr,
            **self.extra,
        }


class ValidationError(DomainError):
    """Bad input, recoverable by the caller correcting ``field``."""

    code = "invalid"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field

    @property
    def attr(self) -> Optional[str]:
        return self.field


class NotFound(DomainError):
    """The requested entity does not exist (or was hard-deleted)."""

    code = "not_found"

    def __init__(self, entity_kind: str, id: str) -> None:
        super().__init__(f"{entity_kind} {id} not found.")
        self.entity_kind = entity_kind
        self.id = id

    @property
    def extra(self) -> Dict[str, Any]:
        return {"entity_kind": self.entity_kind, "id": self.id}


class Forbidden(DomainError):
    """The session is valid but its role is insufficient."""

    code = "permission_denied"

    def __init__(self, required_role: str) -> None:
        super().__init__(f"This operation requires the {required_role} role.")
        self.required_role = required_role

    @property
    def extra(self) -> Dict[str, Any]:
        return {"required_role": self.required_role}
