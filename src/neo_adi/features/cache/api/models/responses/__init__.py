"""ADI API response models."""

from .item_response import ItemResponse
from .operation_response import OperationResponse
from .status_response import StatusResponse

__all__ = [
    "ItemResponse",
    "OperationResponse",
    "StatusResponse",
]
