"""Exceptions module for neo-adi.

This module provides the complete exception hierarchy for neo-adi.
"""

from .base import (
    NeoADIError,
    create_error_response,
)

from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

from .domain import (
    # Configuration Errors
    ConfigurationError,
    
    # Lifecycle Errors
    NotInitializedError,
    
    # Item Errors
    MissingKeyError,
    
    # Subscription Errors
    SubscriptionError,
    InvalidSubscriberError,
    EmptyScopeError,
)

from .infrastructure import (
    BackendError,
    BackendConnectionError,
    BackendSerializationError,
)

__all__ = [
    "NeoADIError",
    "get_http_status_code",
    "HTTP_STATUS_MAP",
    "create_error_response",
    "ConfigurationError",
    "NotInitializedError",
    "MissingKeyError",
    "SubscriptionError",
    "InvalidSubscriberError",
    "EmptyScopeError",
    "BackendError",
    "BackendConnectionError",
    "BackendSerializationError",
]
