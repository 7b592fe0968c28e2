"""Process-wide wiring of the store and the services built on it.

The container is built on first use from settings and lives until the
process exits. Tests install their own with ``set_container``.
"""

import logging
import threading
from dataclasses import dataclass

from django.conf import settings

from marketplace.services import EnrollmentLedger, MarketplaceService, MeetingRoomGate
from marketplace.services.demo_data import seed_demo_data
from marketplace.stores import DjangoMarketplaceStore, InMemoryMarketplaceStore, MarketplaceStore

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_container: "Container | None" = None


@dataclass(frozen=True)
class Container:
    store: MarketplaceStore
    ledger: EnrollmentLedger
    gate: MeetingRoomGate
    service: MarketplaceService


def build_store(backend: str) -> MarketplaceStore:
    if backend == "memory":
        return InMemoryMarketplaceStore()
    if backend == "django":
        return DjangoMarketplaceStore()
    raise ValueError(f"Unknown MARKETPLACE_STORE backend: {backend!r}")


def build_container(store: MarketplaceStore | None = None, current_username: str | None = None) -> Container:
    if store is None:
        store = build_store(settings.MARKETPLACE_STORE)
        if isinstance(store, InMemoryMarketplaceStore) and settings.MARKETPLACE_SEED_DEMO_DATA:
            seed_demo_data(store)
    gate = MeetingRoomGate(store)
    return Container(
        store=store,
        ledger=EnrollmentLedger(store),
        gate=gate,
        service=MarketplaceService(
            store,
            gate,
            current_username=current_username or settings.MARKETPLACE_CURRENT_USERNAME,
        ),
    )


def get_container() -> Container:
    global _container
    with _lock:
        if _container is None:
            _container = build_container()
            logger.info("Marketplace container ready (store=%s)", type(_container.store).__name__)
        return _container


def set_container(container: Container | None) -> None:
    """Replace the process container; ``None`` rebuilds it from settings on next use."""
    global _container
    with _lock:
        _container = container
