"""Request model for writing a single item."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class CacheItemRequest(BaseModel):
    """Body of ``PUT /adi/items/{key}``. A null value removes the item."""
    
    value: Any = Field(default=None, description="Value to store, null removes the key")
    store_name: Optional[str] = Field(default=None, description="Target store, omitted for the default store")
