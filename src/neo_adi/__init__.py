"""Neo-ADI - Application Data Interface for the NeoMultiTenant platform.

One API over a set of named asynchronous key-value stores plus a default
store, with subscribers notified whenever a value is written or refetched.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .core.exceptions import (
    NeoADIError,
    ConfigurationError,
    NotInitializedError,
    MissingKeyError,
    SubscriptionError,
    InvalidSubscriberError,
    EmptyScopeError,
    BackendError,
    create_error_response,
    get_http_status_code,
)

from .features.cache import (
    ALL_ITEMS_KEY,
    ADISettings,
    ApplicationDataInterface,
    CacheItemArgs,
    ListQueryOpts,
    LocalStore,
    MemoryBackend,
    PaginatedResult,
    RedisBackend,
    StoreBackend,
    create_data_cache_api,
    validate_backend_map,
)

__all__ = [
    "__version__",
    
    # Exceptions
    "NeoADIError",
    "ConfigurationError",
    "NotInitializedError",
    "MissingKeyError",
    "SubscriptionError",
    "InvalidSubscriberError",
    "EmptyScopeError",
    "BackendError",
    "create_error_response",
    "get_http_status_code",
    
    # ADI
    "ALL_ITEMS_KEY",
    "ADISettings",
    "ApplicationDataInterface",
    "CacheItemArgs",
    "ListQueryOpts",
    "LocalStore",
    "MemoryBackend",
    "PaginatedResult",
    "RedisBackend",
    "StoreBackend",
    "create_data_cache_api",
    "validate_backend_map",
]
