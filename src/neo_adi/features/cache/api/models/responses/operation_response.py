"""Response model for write operations."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class OperationResponse(BaseModel):
    """Outcome of a write, remove or clear."""
    
    success: bool = Field(description="Whether the operation completed")
    message: str = Field(description="Human readable summary")
    data: Optional[Dict[str, Any]] = Field(default=None, description="Operation details")
