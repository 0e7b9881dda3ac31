# schemas/__init__.py
from .agent import AgentRunRequest, AgentToolListResponse, ToolInfo
from .base import BaseRequest, BaseResponse, ErrorResponse

__all__ = [
    # Base schemas
    "BaseRequest",
    "BaseResponse",
    "ErrorResponse",
    # Agent schemas
    "AgentRunRequest",
    "AgentToolListResponse",
    "ToolInfo",
]
