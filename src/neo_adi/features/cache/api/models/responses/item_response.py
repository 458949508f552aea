"""Response model for single item reads."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ItemResponse(BaseModel):
    """Result of reading one item."""
    
    key: str = Field(description="Item key")
    value: Any = Field(default=None, description="Item value, null when not found")
    found: bool = Field(description="Whether the store held a value")
    store_name: Optional[str] = Field(default=None, description="Store that was read")
