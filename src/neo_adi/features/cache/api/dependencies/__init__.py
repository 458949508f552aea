"""ADI API dependencies."""

from .adi_dependencies import get_adi

__all__ = [
    "get_adi",
]
