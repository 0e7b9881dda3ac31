# schemas/base.py
"""
Base Pydantic Models
Shared data structures across all API endpoints
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseRequest(BaseModel):
    """Base request model with common fields"""

    # Allow extra fields for flexibility
    model_config = ConfigDict(extra="allow")

    request_id: Optional[str] = Field(
        None, description="Optional request ID for tracking"
    )
    metadata: Optional[Dict[str, Any]] = Field(
        default_factory=dict, description="Additional metadata"
    )


class BaseResponse(BaseModel):
    """Base response model with common fields"""

    success: bool = Field(True, description="Request success status")
    timestamp: datetime = Field(
        default_factory=datetime.now, description="Response timestamp"
    )
    metadata: Optional[Dict[str, Any]] = Field(
        default_factory=dict, description="Additional response metadata"
    )


class ErrorResponse(BaseModel):
    """Standard error response"""

    success: bool = Field(False)
    error_code: str = Field(..., description="Error code identifier")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        default_factory=dict, description="Additional error details"
    )
    timestamp: datetime = Field(default_factory=datetime.now)
