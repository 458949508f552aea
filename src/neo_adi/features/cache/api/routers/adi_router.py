"""ADI router.

HTTP access to the Application Data Interface. Every endpoint maps onto one
ADI operation, so writes made here notify in-process subscribers exactly as
direct calls would.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies.adi_dependencies import get_adi
from ..models.requests.cache_item_request import CacheItemRequest
from ..models.requests.clear_items_request import ClearItemsRequest
from ..models.responses.item_response import ItemResponse
from ..models.responses.operation_response import OperationResponse
from ..models.responses.status_response import StatusResponse
from ...entities.models import ListQueryOpts, PaginatedResult
from ...services.adi_service import ApplicationDataInterface
from .....core.exceptions import NeoADIError, create_error_response, get_http_status_code


adi_router = APIRouter(
    prefix="/adi",
    tags=["ADI"],
)


def _http_error(error: NeoADIError) -> HTTPException:
    return HTTPException(
        status_code=get_http_status_code(error),
        detail=create_error_response(error),
    )


@adi_router.get(
    "/status",
    response_model=StatusResponse,
    summary="ADI status",
)
async def get_status(adi: ApplicationDataInterface = Depends(get_adi)) -> StatusResponse:
    """Report lifecycle state and configured stores."""
    return StatusResponse(
        initialized=adi.is_initialized(),
        stores=adi.store_names,
        subscribers=adi.subscriber_count,
    )


@adi_router.get(
    "/items/{key}",
    response_model=ItemResponse,
    summary="Get item",
    description="Read an item. With publish=true subscribers are notified even on a hit.",
)
async def get_item(
    key: str,
    store_name: Optional[str] = Query(default=None),
    publish: bool = Query(default=False),
    adi: ApplicationDataInterface = Depends(get_adi)
) -> ItemResponse:
    """Get an item from a store."""
    try:
        if publish:
            value = await adi.publish_item(key, store_name)
        else:
            value = await adi.get_item(key, store_name)
    except NeoADIError as e:
        raise _http_error(e)

    return ItemResponse(key=key, value=value, found=value is not None, store_name=store_name)


@adi_router.put(
    "/items/{key}",
    response_model=OperationResponse,
    summary="Cache item",
)
async def cache_item(
    key: str,
    request: CacheItemRequest,
    adi: ApplicationDataInterface = Depends(get_adi)
) -> OperationResponse:
    """Write an item; a null value removes it."""
    try:
        await adi.cache_item(key, request.value, request.store_name)
    except NeoADIError as e:
        raise _http_error(e)

    removed = request.value is None
    return OperationResponse(
        success=True,
        message="Item removed" if removed else "Item cached",
        data={"key": key, "store_name": request.store_name},
    )


@adi_router.delete(
    "/items/{key}",
    response_model=OperationResponse,
    summary="Remove item",
)
async def remove_item(
    key: str,
    store_name: Optional[str] = Query(default=None),
    adi: ApplicationDataInterface = Depends(get_adi)
) -> OperationResponse:
    """Remove an item from a store."""
    try:
        await adi.remove_item(key, store_name)
    except NeoADIError as e:
        raise _http_error(e)

    return OperationResponse(
        success=True,
        message="Item removed",
        data={"key": key, "store_name": store_name},
    )


@adi_router.get(
    "/stores/{store_name}/items",
    response_model=PaginatedResult[Any],
    summary="List store items",
)
async def list_items(
    store_name: str,
    page: Optional[int] = Query(default=None, ge=1),
    results_per_page: Optional[int] = Query(default=None, ge=1),
    order_by: Optional[str] = Query(default=None),
    publish: bool = Query(default=False),
    adi: ApplicationDataInterface = Depends(get_adi)
) -> Any:
    """List a named store, optionally notifying subscribers of the refetch."""
    opts = ListQueryOpts(
        store_name=store_name,
        page=page,
        results_per_page=results_per_page,
        order_by=order_by,
    )
    try:
        if publish:
            return await adi.publish_items(opts)
        return await adi.list_items(opts)
    except NeoADIError as e:
        raise _http_error(e)


@adi_router.post(
    "/stores/clear",
    response_model=OperationResponse,
    summary="Clear stores",
)
async def clear_items(
    request: ClearItemsRequest,
    adi: ApplicationDataInterface = Depends(get_adi)
) -> OperationResponse:
    """Clear the default store, one backend, or everything."""
    try:
        await adi.clear_items(request.store_name)
    except NeoADIError as e:
        raise _http_error(e)

    return OperationResponse(
        success=True,
        message="Stores cleared",
        data={"store_name": request.store_name},
    )
