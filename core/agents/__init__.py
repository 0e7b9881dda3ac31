# core/agents/__init__.py
"""
Agent System Core Module
Provides the step-bounded agent loop, reply classification and tool execution
"""

from .agent_loop import (
    DEFAULT_STEPS,
    MAX_STEPS,
    MIN_STEPS,
    AgentLoop,
    RunState,
    clamp_steps,
)
from .classifier import ReplyClassifier, classify
from .conversation import Conversation, Message
from .events import (
    CallbackEmitter,
    CollectingEmitter,
    DisplayEvent,
    DisplayLog,
    EventEmitter,
)
from .executor import ToolInvoker, ToolResult
from .tool_registry import (
    ToolMetadata,
    ToolRegistry,
    ToolRequest,
    create_default_registry,
    get_registry,
)

__all__ = [
    "DEFAULT_STEPS",
    "MAX_STEPS",
    "MIN_STEPS",
    "AgentLoop",
    "RunState",
    "clamp_steps",
    "ReplyClassifier",
    "classify",
    "Conversation",
    "Message",
    "CallbackEmitter",
    "CollectingEmitter",
    "DisplayEvent",
    "DisplayLog",
    "EventEmitter",
    "ToolInvoker",
    "ToolResult",
    "ToolMetadata",
    "ToolRegistry",
    "ToolRequest",
    "create_default_registry",
    "get_registry",
]
