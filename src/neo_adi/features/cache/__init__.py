"""Cache feature for neo-adi.

Feature-First architecture:
- entities/: value objects, backend protocols and settings
- services/: validation, store resolution, subscribers and the ADI itself
- adapters/: default local store plus memory and Redis backends
- api/: FastAPI router exposing the ADI over HTTP
"""

from .entities import (
    ALL_ITEMS_KEY,
    ADISettings,
    CacheItemArgs,
    ListQueryOpts,
    PaginatedResult,
    StoreBackend,
    ClearableStoreBackend,
)

from .services import (
    ApplicationDataInterface,
    CacheInterface,
    ScopedListener,
    SubscriberRegistry,
    create_data_cache_api,
    validate_backend_map,
)

from .adapters import LocalStore, MemoryBackend, RedisBackend

__all__ = [
    # Entities
    "ALL_ITEMS_KEY",
    "ADISettings",
    "CacheItemArgs",
    "ListQueryOpts",
    "PaginatedResult",
    "StoreBackend",
    "ClearableStoreBackend",
    
    # Services
    "ApplicationDataInterface",
    "CacheInterface",
    "ScopedListener",
    "SubscriberRegistry",
    "create_data_cache_api",
    "validate_backend_map",
    
    # Adapters
    "LocalStore",
    "MemoryBackend",
    "RedisBackend",
]
