"""Infrastructure-specific exceptions for neo-adi.

Raised by the bundled store backends. The ADI itself never catches them;
they propagate to the caller of the operation that touched the backend.
"""

from .base import NeoADIError


class BackendError(NeoADIError):
    """Base class for store backend errors."""
    pass


class BackendConnectionError(BackendError):
    """Raised when a backend connection fails."""
    pass


class BackendSerializationError(BackendError):
    """Raised when a value cannot be serialized or deserialized."""
    pass
