# core/agents/tool_registry.py
"""
Tool Registry System
Manages registration, discovery, and metadata for agent tools
"""

import inspect
import json
import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel

from ..exceptions import ToolNotFoundError

logger = logging.getLogger(__name__)


def _default_summary(name: str, result: Any, max_chars: int) -> str:
    return f"Tool result for {name}:\n{str(result)[:max_chars]}"


@dataclass
class ToolMetadata:
    """Tool metadata and configuration"""

    name: str
    description: str
    input_model: Type[BaseModel]
    function: Callable[..., Any]
    usage: str = ""
    summarize: Optional[Callable[[Any, int], str]] = None
    success_note: str = "Tool completed."
    category: str = "web"
    timeout_seconds: Optional[float] = None
    is_async: bool = False

    def summarize_result(self, result: Any, max_chars: int) -> str:
        """Render a tool result as the text folded back into the conversation"""
        if self.summarize is None:
            return _default_summary(self.name, result, max_chars)
        return self.summarize(result, max_chars)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "name": self.name,
            "description": self.description,
            "usage": self.usage,
            "parameters": self.input_model.model_json_schema(by_alias=True),
            "category": self.category,
            "timeout_seconds": self.timeout_seconds,
            "is_async": self.is_async,
        }


@dataclass(frozen=True)
class ToolRequest:
    """A validated tool call: registered tool name plus its parsed input"""

    name: str
    input: BaseModel

    def arguments(self) -> Dict[str, Any]:
        """Keyword arguments for the tool callable"""
        return self.input.model_dump()

    def wire_input(self) -> Dict[str, Any]:
        """Input as the model wrote it (aliases, unset optionals dropped)"""
        return self.input.model_dump(by_alias=True, exclude_none=True)

    def display(self) -> str:
        """Raw call line shown in the UI run log"""
        payload = json.dumps(self.wire_input(), separators=(",", ":"), ensure_ascii=False)
        return f"{self.name} {payload}"


class ToolRegistry:
    """
    Capability set of agent tools
    Dispatch is by tool name; adding a tool never touches the agent loop
    """

    def __init__(self):
        self._tools: Dict[str, ToolMetadata] = {}

    def register_function(
        self,
        name: str,
        function: Callable[..., Any],
        description: str,
        input_model: Type[BaseModel],
        usage: str = "",
        summarize: Optional[Callable[[Any, int], str]] = None,
        success_note: str = "Tool completed.",
        category: str = "web",
        timeout_seconds: Optional[float] = None,
    ) -> ToolMetadata:
        """Register a function as a tool"""
        target = function.func if isinstance(function, partial) else function
        metadata = ToolMetadata(
            name=name,
            description=description,
            input_model=input_model,
            function=function,
            usage=usage,
            summarize=summarize,
            success_note=success_note,
            category=category,
            timeout_seconds=timeout_seconds,
            is_async=inspect.iscoroutinefunction(target),
        )
        self.register_tool(metadata)
        return metadata

    def register_tool(self, metadata: ToolMetadata):
        """Register a tool with metadata"""
        if metadata.name in self._tools:
            logger.warning(f"Replacing registered tool: {metadata.name}")
        self._tools[metadata.name] = metadata
        logger.info(f"Registered tool: {metadata.name}")

    def get_tool(self, name: str) -> Optional[ToolMetadata]:
        """Get tool metadata by name"""
        return self._tools.get(name)

    def list_tools(self) -> List[str]:
        """List all registered tool names"""
        return list(self._tools.keys())

    def is_tool_available(self, name: str) -> bool:
        """Check if tool is available"""
        return name in self._tools

    def get_all_tools_info(self) -> Dict[str, Dict[str, Any]]:
        """Get information for all tools"""
        return {name: metadata.to_dict() for name, metadata in self._tools.items()}

    def build_request(self, name: str, arguments: Dict[str, Any]) -> ToolRequest:
        """
        Validate raw tool input against the tool's input model

        Raises ToolNotFoundError for unknown names and pydantic's
        ValidationError for inputs that do not fit the schema.
        """
        metadata = self.get_tool(name)
        if metadata is None:
            raise ToolNotFoundError(name)
        return ToolRequest(name=name, input=metadata.input_model.model_validate(arguments))

    def describe_tools(self) -> str:
        """One documentation line per tool, as shown to the model"""
        lines = []
        for metadata in self._tools.values():
            line = f"- {metadata.name}: {metadata.description}"
            if metadata.usage:
                line += f" {metadata.usage}"
            lines.append(line)
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools


def create_default_registry(agent_config=None) -> ToolRegistry:
    """Build the registry holding web.search, web.fetch and web.extract"""
    from ..config import AgentConfig
    from .tools import register_web_tools

    registry = ToolRegistry()
    register_web_tools(registry, agent_config or AgentConfig())
    return registry


# Global registry instance
_default_registry = None


def get_registry() -> ToolRegistry:
    """Get the default web tool registry"""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry
