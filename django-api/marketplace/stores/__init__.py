from marketplace.stores.django_store import DjangoMarketplaceStore
from marketplace.stores.interfaces import MarketplaceStore
from marketplace.stores.memory_store import InMemoryMarketplaceStore

__all__ = [
    "MarketplaceStore",
    "InMemoryMarketplaceStore",
    "DjangoMarketplaceStore",
]
