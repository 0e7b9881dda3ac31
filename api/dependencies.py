# api/dependencies.py
"""
Centralized dependency providers for FastAPI routers.
- Single source of truth for settings
- Lazy-loaded global singletons for the model client, tool registry and invoker
- No side effects at import time (no network calls here)
"""
from __future__ import annotations

import logging

from fastapi import Depends

from core.agents.agent_loop import AgentLoop
from core.agents.classifier import ReplyClassifier
from core.agents.executor import ToolInvoker
from core.agents.tool_registry import ToolRegistry, create_default_registry
from core.config import AppConfig, get_config
from core.llm.base import BaseLLM
from core.llm.openai_llm import OpenAIChatLLM

logger = logging.getLogger(__name__)


# Lazy singletons: keep all globals in one place

_settings = None  # App settings
_llm = None  # Chat completion client (exposes complete(messages))
_registry = None  # Web tool capability set
_invoker = None  # Tool executor (owns a worker thread pool)


def get_settings() -> AppConfig:
    """App-wide settings (single source of truth)."""
    global _settings
    if _settings is None:
        _settings = get_config()
    return _settings


def get_llm(settings: AppConfig = Depends(get_settings)) -> BaseLLM:
    """
    Completion client. Raises ConfigurationError when no credential is
    configured, which rejects the request before any streaming starts.
    """
    global _llm
    if _llm is None:
        _llm = OpenAIChatLLM.from_config(settings.llm)
        logger.info(f"LLM client ready: {settings.llm.model}")
    return _llm


def get_tool_registry(settings: AppConfig = Depends(get_settings)) -> ToolRegistry:
    global _registry
    if _registry is None:
        _registry = create_default_registry(settings.agent)
    return _registry


def get_tool_invoker(
    registry: ToolRegistry = Depends(get_tool_registry),
    settings: AppConfig = Depends(get_settings),
) -> ToolInvoker:
    global _invoker
    if _invoker is None:
        _invoker = ToolInvoker(
            registry,
            default_timeout=settings.agent.tool_timeout_seconds,
            result_max_chars=settings.agent.tool_result_max_chars,
        )
    return _invoker


def get_agent_loop(
    llm: BaseLLM = Depends(get_llm),
    invoker: ToolInvoker = Depends(get_tool_invoker),
    settings: AppConfig = Depends(get_settings),
) -> AgentLoop:
    """A fresh loop per request; collaborators are shared and read-only"""
    return AgentLoop(
        llm,
        invoker,
        classifier=ReplyClassifier(invoker.registry),
        max_steps=settings.agent.max_steps,
    )


def shutdown_dependencies() -> None:
    """Release worker threads and drop cached singletons"""
    global _settings, _llm, _registry, _invoker
    if _invoker is not None:
        _invoker.cleanup()
    _settings = _llm = _registry = _invoker = None
