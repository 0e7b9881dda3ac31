# core/__init__.py
"""
Core Web Agent Lab Components
"""

from .config import AgentConfig, APIConfig, AppConfig, LLMConfig, get_config
from .exceptions import (
    AgentError,
    ConfigurationError,
    ModelError,
    ToolExecutionError,
    ToolNotFoundError,
    ValidationError,
    WebAgentError,
)

# 版本資訊
__version__ = "0.1.0"
__author__ = "Web Agent Lab Team"

__all__ = [
    # 配置
    "AgentConfig",
    "APIConfig",
    "AppConfig",
    "LLMConfig",
    "get_config",
    # 例外
    "AgentError",
    "ConfigurationError",
    "ModelError",
    "ToolExecutionError",
    "ToolNotFoundError",
    "ValidationError",
    "WebAgentError",
    "__version__",
    "__author__",
]
