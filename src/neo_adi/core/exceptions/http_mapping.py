"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import NeoADIError
from .domain import (
    ConfigurationError,
    EmptyScopeError,
    InvalidSubscriberError,
    MissingKeyError,
    NotInitializedError,
    SubscriptionError,
)
from .infrastructure import BackendConnectionError, BackendError


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    MissingKeyError: 400,
    InvalidSubscriberError: 400,
    EmptyScopeError: 400,
    SubscriptionError: 400,
    
    # 500 Internal Server Error
    ConfigurationError: 500,
    BackendError: 500,
    
    # 503 Service Unavailable
    NotInitializedError: 503,
    BackendConnectionError: 503,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception, walking the class hierarchy.
    
    Args:
        exception: The exception instance
        
    Returns:
        HTTP status code (500 when nothing in the MRO is mapped)
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
        if exception_type is NeoADIError:
            break
    return 500
