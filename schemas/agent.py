# schemas/agent.py
"""
Agent API Schemas
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, StrictStr, field_validator

from core.agents.agent_loop import DEFAULT_STEPS, MAX_STEPS, clamp_steps
from .base import BaseRequest, BaseResponse


class AgentRunRequest(BaseRequest):
    """Agent run request: a goal plus an optional step budget"""

    goal: StrictStr = Field(..., description="What the agent should achieve")
    steps: Any = Field(
        None,
        description="Step budget; numbers are clamped to [1, 20], anything else uses the default",
    )

    @field_validator("goal")
    def validate_goal(cls, v):
        if not v.strip():
            raise ValueError("Goal cannot be empty")
        return v

    def step_budget(self, default: int = DEFAULT_STEPS, upper: int = MAX_STEPS) -> int:
        return clamp_steps(self.steps, default=default, upper=upper)


class ToolInfo(BaseModel):
    """Tool information structure"""

    name: str = Field(..., description="Tool name")
    description: str = Field(..., description="Tool description")
    usage: str = Field("", description="Input shape as documented to the model")
    parameters: Dict[str, Any] = Field(
        default_factory=dict, description="JSON schema of the tool input"
    )
    timeout_seconds: float = Field(..., description="Execution timeout")


class AgentToolListResponse(BaseResponse):
    """Available tools"""

    tools: List[ToolInfo] = Field(..., description="Registered tools")
    total_count: int = Field(..., description="Number of tools")
