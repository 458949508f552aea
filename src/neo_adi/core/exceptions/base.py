"""Base exceptions for neo-adi.

This module defines the root of the neo-adi exception hierarchy and the
error envelope used by the HTTP surface.
"""

from typing import Any, Dict, Optional


class NeoADIError(Exception):
    """Base exception for all neo-adi errors.
    
    All exceptions in the neo-adi library inherit from this base class
    and include structured error information for better debugging and API responses.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: NeoADIError) -> Dict[str, Any]:
    """Create standardized error response from exception.
    
    Args:
        exception: The neo-adi exception
        
    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
