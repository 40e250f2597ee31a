"""Sweet DRF serializers for API output.

The serializer operates at the Interface layer (API views) and only
renders ``Sweet`` entities.  Input validation lives in the Pydantic
DTOs consumed by ``InventoryLedger``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.sweets.constants import PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS


class SweetSerializer(serializers.Serializer):
    """Read-only representation of a ``Sweet``.

    ``price`` is rendered with two fraction digits; the stored Decimal is
    never rounded.
    """

    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    category = serializers.CharField(read_only=True)
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        read_only=True,
    )
    quantity = serializers.IntegerField(read_only=True)
    in_stock = serializers.BooleanField(read_only=True)
    description = serializers.CharField(read_only=True, allow_null=True)
    image_url = serializers.CharField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
