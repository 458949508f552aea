"""ADI HTTP API - FastAPI router, dependencies and models."""

from .dependencies import get_adi
from .installer import install_adi
from .routers import adi_router

__all__ = [
    "adi_router",
    "get_adi",
    "install_adi",
]
