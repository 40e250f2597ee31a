"""Bridge between Pydantic DTO validation and the domain taxonomy.

Services accept raw mappings (as parsed from JSON) or ready DTOs and
must surface bad input as ``ValidationError{field, message}``.
"""

from __future__ import annotations

from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import ValidationError

D = TypeVar("D", bound=BaseModel)

_VALUE_ERROR_PREFIX = "Value error, "


def parse_dto(dto_class: Type[D], data: Union[D, Mapping[str, Any]]) -> D:
    """Return ``data`` as a ``dto_class`` instance or raise ``ValidationError``.

    Only the first failing field is reported, matching the field-tagged
    error the API renders.
    """
    if isinstance(data, dto_class):
        return data
    try:
        return dto_class.model_validate(data)
    except PydanticValidationError as exc:
        raise from_pydantic(exc) from exc


def from_pydantic(exc: PydanticValidationError) -> ValidationError:
    error = exc.errors()[0]
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else "non_field_errors"
    message = error.get("msg", "Invalid value.")
    if message.startswith(_VALUE_ERROR_PREFIX):
        message = message[len(_VALUE_ERROR_PREFIX):]
    return ValidationError(field, message)


def as_mapping(data: Any) -> Any:
    """Flatten a DRF ``QueryDict`` into a plain dict; other data unchanged."""
    if hasattr(data, "dict"):
        return data.dict()
    return data
