# core/llm/base.py
"""
Abstract LLM Interface
Standardized interface for chat completion providers
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)


@dataclass
class ChatMessage:
    """Standardized chat message"""

    role: str  # "system", "user", "assistant"
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class LLMResponse:
    """Standardized LLM response"""

    content: str
    model_name: str
    usage: Dict[str, int] = field(default_factory=dict)
    metadata: Optional[Dict[str, Any]] = None


class BaseLLM(ABC):
    """Abstract base class for all chat completion providers"""

    def __init__(self, model_name: str):
        self.model_name = model_name

    @abstractmethod
    def chat(
        self, messages: List[Union[ChatMessage, Dict[str, str]]], **kwargs
    ) -> LLMResponse:
        """Chat completion with message history"""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider can serve requests"""
        pass

    def complete(self, messages: List[Union[ChatMessage, Dict[str, str]]]) -> str:
        """Return only the reply text of a chat completion"""
        return self.chat(messages).content

    def format_messages(
        self, messages: List[Union[ChatMessage, Dict[str, str]]]
    ) -> List[Dict[str, str]]:
        """Normalize messages to plain role/content dictionaries"""
        formatted = []
        for msg in messages:
            if isinstance(msg, dict):
                formatted.append(
                    {"role": msg.get("role", "user"), "content": msg.get("content", "")}
                )
            elif hasattr(msg, "to_dict"):
                formatted.append(msg.to_dict())
            else:
                formatted.append({"role": msg.role, "content": msg.content})
        return formatted
