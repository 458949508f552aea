"""ADI API routers."""

from .adi_router import adi_router

__all__ = [
    "adi_router",
]
