"""DRF exception handler producing one error envelope for every failure.

Domain errors raised by the services and DRF's own errors are rendered
as::

    {"type": "client_error", "errors": [{"code": ..., "detail": ..., "attr": ...}]}

Anything else is left to DRF (and ends as a 500): the handler never
swallows unexpected exceptions.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from modules.accounts.exceptions import DuplicateAccount, InvalidCredentials
from modules.core.authentication import authenticate_header
from modules.core.exceptions import DomainError, Forbidden, NotFound, ValidationError
from modules.sessions.exceptions import SessionExpired, SessionNotFound
from modules.sweets.exceptions import OutOfStock

logger = structlog.get_logger(__name__)

STATUS_BY_ERROR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    DuplicateAccount: status.HTTP_409_CONFLICT,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    SessionExpired: status.HTTP_401_UNAUTHORIZED,
    SessionNotFound: status.HTTP_401_UNAUTHORIZED,
    Forbidden: status.HTTP_403_FORBIDDEN,
    OutOfStock: status.HTTP_409_CONFLICT,
}


def status_for(exc: DomainError) -> int:
    for error_class, code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_class):
            return code
    return status.HTTP_400_BAD_REQUEST


def envelope(errors: List[Dict[str, Any]], status_code: int) -> Dict[str, Any]:
    error_type = "server_error" if status_code >= 500 else "client_error"
    if status_code == status.HTTP_400_BAD_REQUEST:
        error_type = "validation_error"
    return {"type": error_type, "errors": errors}


def shop_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    if isinstance(exc, DomainError):
        status_code = status_for(exc)
        logger.info("api.domain_error", code=exc.code, status_code=status_code)
        response = Response(envelope([exc.as_dict()], status_code), status=status_code)
        if status_code == status.HTTP_401_UNAUTHORIZED:
            response["WWW-Authenticate"] = authenticate_header()
        return response

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    code = getattr(exc, "default_code", "error")
    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    response.data = envelope(
        [{"code": code, "detail": str(detail or exc), "attr": None}],
        response.status_code,
    )
    return response
