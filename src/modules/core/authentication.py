"""Bearer token extraction for the HTTP API.

The views hand the raw token to ``AccessGate``, which is the only
component that decides whether a session is valid.  This module only
enforces the ``Authorization: Bearer <token>`` transport format.

Security decisions
------------------
* **Fail Closed**: a missing or malformed header is reported exactly
  like an unknown token (``SessionNotFound`` -> 401).
* The token is opaque to the API layer; it is never decoded here.
"""

from __future__ import annotations

from rest_framework.request import Request

from modules.sessions.exceptions import SessionNotFound

KEYWORD = "Bearer"


def bearer_token(request: Request) -> str:
    """Return the bearer token of ``request``.

    Raises:
        SessionNotFound: no ``Authorization`` header, or not a Bearer one.
    """
    header = request.META.get("HTTP_AUTHORIZATION", "")
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != KEYWORD.lower():
        raise SessionNotFound()
    return parts[1]


def authenticate_header() -> str:
    """Value for the ``WWW-Authenticate`` response header on 401."""
    return f'{KEYWORD} realm="api"'
