"""ADI API request models."""

from .cache_item_request import CacheItemRequest
from .clear_items_request import ClearItemsRequest

__all__ = [
    "CacheItemRequest",
    "ClearItemsRequest",
]
