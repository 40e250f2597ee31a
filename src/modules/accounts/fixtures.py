"""Accounts the directory is seeded with at startup.

Exactly one ADMIN and one USER; these are design constants, not
runtime configuration.
"""

from __future__ import annotations

from modules.accounts.constants import UserRole

SEED_ACCOUNTS = [
    {
        "id": "usr_admin_001",
        "name": "Store Manager",
        "email": "admin@sweetshop.com",
        "password": "admin123",
        "role": UserRole.ADMIN,
    },
    {
        "id": "usr_customer_001",
        "name": "Jane Customer",
        "email": "user@sweetshop.com",
        "password": "user123",
        "role": UserRole.USER,
    },
]
