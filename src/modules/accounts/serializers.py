"""Account DRF serializers for API output.

Input is validated by the Pydantic DTOs in ``dtos.py`` inside the
Service Layer; these serializers only render entities.
"""

from __future__ import annotations

from rest_framework import serializers


class AccountSerializer(serializers.Serializer):
    """Read-only public view of an ``Account`` (never the password hash)."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)
    role = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class AuthResponseSerializer(serializers.Serializer):
    user = AccountSerializer(read_only=True)
    token = serializers.CharField(read_only=True)
    expires_at = serializers.DateTimeField(read_only=True)
