"""ADI API models."""

from .requests import CacheItemRequest, ClearItemsRequest
from .responses import ItemResponse, OperationResponse, StatusResponse

__all__ = [
    "CacheItemRequest",
    "ClearItemsRequest",
    "ItemResponse",
    "OperationResponse",
    "StatusResponse",
]
