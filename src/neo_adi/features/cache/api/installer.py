"""Wiring of an ADI into a FastAPI application."""

from fastapi import FastAPI

from ..services.adi_service import ApplicationDataInterface
from .routers.adi_router import adi_router


def install_adi(app: FastAPI, adi: ApplicationDataInterface, include_router: bool = True) -> None:
    """Attach an ADI to an application and optionally mount its router.
    
    ```python
    adi = create_data_cache_api({"users": MemoryBackend()}, start=True)
    app = FastAPI()
    install_adi(app, adi)
    ```
    """
    app.state.adi = adi
    if include_router:
        app.include_router(adi_router)
