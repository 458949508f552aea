"""Domain-specific exceptions for neo-adi.

Every error here is a precondition violation raised at the call site.
None of them are retried internally.
"""

from .base import NeoADIError


# Configuration Errors
class ConfigurationError(NeoADIError):
    """Raised when the backend map is malformed."""
    pass


# Lifecycle Errors
class NotInitializedError(NeoADIError):
    """Raised when a gated operation runs before start()."""
    
    def __init__(self, message: str = "ADI is not initialized", **kwargs):
        super().__init__(message, **kwargs)


# Item Errors
class MissingKeyError(NeoADIError):
    """Raised when an item key was not supplied for caching."""
    
    def __init__(self, message: str = "Item Key was not supplied for caching", **kwargs):
        super().__init__(message, **kwargs)


# Subscription Errors
class SubscriptionError(NeoADIError):
    """Base class for subscriber registry errors."""
    pass


class InvalidSubscriberError(SubscriptionError):
    """Raised when a listener is not callable."""
    
    def __init__(self, message: str = "Invalid ADI subscriber", **kwargs):
        super().__init__(message, **kwargs)


class EmptyScopeError(SubscriptionError):
    """Raised when a scoped subscription names no stores."""
    
    def __init__(
        self,
        message: str = "Subscription requires at least one cache name",
        **kwargs
    ):
        super().__init__(message, **kwargs)
