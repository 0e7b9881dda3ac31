# core/llm/__init__.py
"""
LLM Module
Chat completion providers used by the agent loop
"""

from .base import BaseLLM, ChatMessage, LLMResponse
from .openai_llm import OpenAIChatLLM

__all__ = ["BaseLLM", "ChatMessage", "LLMResponse", "OpenAIChatLLM"]
