"""Cache entities - value objects, protocols and settings."""

from .config import ADISettings
from .models import CacheItemArgs, ListQueryOpts, PaginatedResult
from .protocols import (
    ALL_ITEMS_KEY,
    OPTIONAL_CAPABILITIES,
    REQUIRED_CAPABILITIES,
    Backend,
    BackendMap,
    ClearableStoreBackend,
    DefaultStore,
    Fallback,
    Listener,
    Predicate,
    StoreBackend,
    Unsubscriber,
)

__all__ = [
    "ALL_ITEMS_KEY",
    "ADISettings",
    "CacheItemArgs",
    "ListQueryOpts",
    "PaginatedResult",
    "OPTIONAL_CAPABILITIES",
    "REQUIRED_CAPABILITIES",
    "Backend",
    "BackendMap",
    "ClearableStoreBackend",
    "DefaultStore",
    "Fallback",
    "Listener",
    "Predicate",
    "StoreBackend",
    "Unsubscriber",
]
