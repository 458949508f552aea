"""ADI dependencies.

Provides FastAPI dependency injection for the ADI instance attached to an
application.
"""

from fastapi import HTTPException, Request, status

from ...services.adi_service import ApplicationDataInterface


async def get_adi(request: Request) -> ApplicationDataInterface:
    """Get the ADI attached to the running application.
    
    Usage in endpoints:
    
    ```python
    @router.get("/profile/{user_id}")
    async def get_profile(user_id: str, adi: ApplicationDataInterface = Depends(get_adi)):
        return await adi.get_item(user_id, "users", fallback=lambda: load_user(user_id))
    ```
    """
    adi = getattr(request.app.state, "adi", None)
    if adi is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="ADI is not configured for this application",
        )
    return adi
