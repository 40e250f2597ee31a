"""Sweet API views.

Exposes ``InventoryLedger`` and the catalog search via a DRF ViewSet.
Every call goes through ``AccessGate`` with the role the operation
requires; domain exceptions propagate to
``modules.core.exception_handler``; the view never swallows them.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.accounts.constants import UserRole
from modules.core.apps import get_container
from modules.core.authentication import bearer_token
from modules.core.validation import as_mapping, parse_dto
from modules.sweets.dtos import PurchaseDTO, RestockDTO
from modules.sweets.entities import Sweet
from modules.sweets.filters import build_predicate, filter_sweets
from modules.sweets.serializers import SweetSerializer


class SweetViewSet(ViewSet):
    """ViewSet for the sweet catalog and its stock operations.

    Reads and purchases need any valid session; catalog management
    (create, update, delete, restock) needs an ADMIN session.
    """

    @property
    def container(self):
        return get_container()

    def _call(self, request: Request, role: str, operation, *args):
        return self.container.gate.call(bearer_token(request), role, operation, *args)

    # ------------------------------------------------------------------
    # List / Retrieve / Search
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/sweets/"""
        sweets = self._call(request, UserRole.USER, self.container.ledger.list)
        return Response(SweetSerializer(sweets, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/sweets/{pk}/"""
        ledger = self.container.ledger
        sweet = self._call(request, UserRole.USER, ledger.get_or_raise, pk)
        return Response(SweetSerializer(sweet).data)

    @action(detail=False, methods=["get"], url_path="search")
    def search(self, request: Request) -> Response:
        """GET /api/v1/sweets/search/?name=&category=&minPrice=&maxPrice="""
        sweets = self._call(request, UserRole.USER, self.container.ledger.list)
        predicate = build_predicate(request.query_params)
        matches = filter_sweets(sweets, predicate)
        return Response(SweetSerializer(matches, many=True).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/sweets/"""
        ledger = self.container.ledger
        sweet = self._call(
            request, UserRole.ADMIN, ledger.create, as_mapping(request.data)
        )
        return Response(SweetSerializer(sweet).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/sweets/{pk}/"""
        sweet = self._call(
            request,
            UserRole.ADMIN,
            self.container.ledger.update,
            pk,
            as_mapping(request.data),
        )
        return Response(SweetSerializer(sweet).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/sweets/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/sweets/{pk}/"""
        self._call(request, UserRole.ADMIN, self.container.ledger.delete, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    @action(detail=True, methods=["post"], url_path="purchase")
    def purchase(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/sweets/{pk}/purchase/

        Accepts an optional ``{"quantity": N}``; defaults to one unit.
        """
        sweet = self._call(request, UserRole.USER, self._purchase, pk, request.data)
        return Response(
            {
                "message": "Purchase successful.",
                "remaining_quantity": sweet.quantity,
                "sweet": SweetSerializer(sweet).data,
            }
        )

    @action(detail=True, methods=["post"], url_path="restock")
    def restock(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/sweets/{pk}/restock/

        Requires ``{"quantity": N}`` with ``N > 0``.
        """
        sweet = self._call(request, UserRole.ADMIN, self._restock, pk, request.data)
        return Response(
            {
                "message": "Restock successful.",
                "new_quantity": sweet.quantity,
                "sweet": SweetSerializer(sweet).data,
            }
        )

    def _purchase(self, pk: str, data) -> Sweet:
        dto = parse_dto(PurchaseDTO, as_mapping(data))
        return self.container.ledger.purchase(pk, dto.quantity)

    def _restock(self, pk: str, data) -> Sweet:
        dto = parse_dto(RestockDTO, as_mapping(data))
        return self.container.ledger.restock(pk, dto.quantity)
