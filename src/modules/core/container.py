"""Composition root.

Builds one explicit instance of every service and wires collaborators
by reference.  Nothing here is a module-level singleton: the Django app
config owns the container used by the HTTP views, and tests build their
own isolated ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import structlog
from django.conf import settings

from modules.accounts.fixtures import SEED_ACCOUNTS
from modules.accounts.repositories.memory_repository import InMemoryAccountRepository
from modules.accounts.services import AccountDirectory
from modules.core.access import AccessGate
from modules.sessions.repositories.memory_repository import InMemorySessionRepository
from modules.sessions.services import SessionManager
from modules.sweets.fixtures import STARTER_CATALOG
from modules.sweets.repositories.memory_repository import InMemorySweetRepository
from modules.sweets.services import InventoryLedger

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ShopContainer:
    directory: AccountDirectory
    sessions: SessionManager
    ledger: InventoryLedger
    gate: AccessGate


def build_container(
    seed_catalog: Optional[bool] = None, signing_key: Optional[str] = None
) -> ShopContainer:
    """Wire in-memory repositories into the services.

    The directory is always seeded with its fixture accounts; the
    starter catalog follows ``SWEETS_SEED_CATALOG`` unless overridden.
    """
    if seed_catalog is None:
        seed_catalog = getattr(settings, "SWEETS_SEED_CATALOG", True)

    directory = AccountDirectory(repository=InMemoryAccountRepository())
    directory.seed(SEED_ACCOUNTS)

    sessions = SessionManager(
        repository=InMemorySessionRepository(),
        directory=directory,
        signing_key=signing_key or settings.SECRET_KEY,
    )

    ledger = InventoryLedger(repository=InMemorySweetRepository())
    if seed_catalog:
        ledger.seed(STARTER_CATALOG)

    logger.info("container.built", seed_catalog=seed_catalog)
    return ShopContainer(
        directory=directory,
        sessions=sessions,
        ledger=ledger,
        gate=AccessGate(sessions=sessions),
    )
