# tests/mocks/__init__.py
"""
Mock工具包
"""

from .model_mocks import (
    EXTRACT_CALL,
    FETCH_CALL,
    SEARCH_CALL,
    FailingLLM,
    FakeWebTools,
    ScriptedLLM,
    build_fake_registry,
)
from .sample_data import (
    ARTICLE_HTML,
    ARTICLE_PARAGRAPH,
    BARE_HTML,
    DIV_SOUP_HTML,
    DUCKDUCKGO_HTML,
)

__all__ = [
    # Model and tool mocks
    "EXTRACT_CALL",
    "FETCH_CALL",
    "SEARCH_CALL",
    "FailingLLM",
    "FakeWebTools",
    "ScriptedLLM",
    "build_fake_registry",
    # Sample data
    "ARTICLE_HTML",
    "ARTICLE_PARAGRAPH",
    "BARE_HTML",
    "DIV_SOUP_HTML",
    "DUCKDUCKGO_HTML",
]
