"""Response model for ADI status."""

from typing import List

from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    """Lifecycle state of the ADI."""
    
    initialized: bool = Field(description="Whether the ADI is started")
    stores: List[str] = Field(default_factory=list, description="Configured store names")
    subscribers: int = Field(description="Number of registered listeners")
