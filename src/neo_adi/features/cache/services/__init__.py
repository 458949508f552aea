"""Cache services - validation, store resolution, subscribers and the ADI."""

from .adi_service import ApplicationDataInterface
from .cache_interface import CacheInterface
from .factory import create_data_cache_api
from .subscriber_registry import ScopedListener, SubscriberRegistry
from .validation import (
    get_capability,
    has_capability,
    validate_backend,
    validate_backend_map,
)

__all__ = [
    "ApplicationDataInterface",
    "CacheInterface",
    "create_data_cache_api",
    "ScopedListener",
    "SubscriberRegistry",
    "get_capability",
    "has_capability",
    "validate_backend",
    "validate_backend_map",
]
