"""Request model for clearing stores."""

from typing import Optional

from pydantic import BaseModel, Field


class ClearItemsRequest(BaseModel):
    """Body of ``POST /adi/stores/clear``."""
    
    store_name: Optional[str] = Field(
        default=None,
        description='Store to clear; omitted clears the default store, "all" clears everything',
    )
