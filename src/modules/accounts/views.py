"""Authentication API views.

Exposes ``AccountDirectory`` and ``SessionManager`` over HTTP:
register, login, logout and the current-account look-up.  Domain
exceptions propagate to ``modules.core.exception_handler``, which maps
them to HTTP status codes.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.accounts.constants import UserRole
from modules.accounts.entities import Account
from modules.accounts.serializers import AccountSerializer, AuthResponseSerializer
from modules.core.apps import get_container
from modules.core.authentication import bearer_token
from modules.core.validation import as_mapping


class AuthView(APIView):
    """Base class giving every auth endpoint access to the container."""

    @property
    def container(self):
        return get_container()

    def _session_response(self, account: Account, status_code: int) -> Response:
        session = self.container.sessions.issue(account.id)
        data = AuthResponseSerializer(
            {"user": account, "token": session.token, "expires_at": session.expires_at}
        ).data
        return Response(data, status=status_code)


class RegisterView(AuthView):
    """POST /api/v1/auth/register/"""

    throttle_scope = "auth"

    def post(self, request: Request) -> Response:
        account = self.container.directory.register(as_mapping(request.data))
        return self._session_response(account, status.HTTP_201_CREATED)


class LoginView(AuthView):
    """POST /api/v1/auth/login/"""

    throttle_scope = "auth"

    def post(self, request: Request) -> Response:
        account = self.container.directory.authenticate(as_mapping(request.data))
        return self._session_response(account, status.HTTP_200_OK)


class LogoutView(AuthView):
    """POST /api/v1/auth/logout/

    Idempotent: logging out an already revoked or expired token still
    answers 204.
    """

    def post(self, request: Request) -> Response:
        self.container.sessions.revoke(bearer_token(request))
        return Response(status=status.HTTP_204_NO_CONTENT)


class MeView(AuthView):
    """GET /api/v1/auth/me/"""

    def get(self, request: Request) -> Response:
        account = self.container.gate.authorize(bearer_token(request), UserRole.USER)
        return Response(AccountSerializer(account).data)
