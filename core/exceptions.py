# core/exceptions.py
"""
Unified Exception Classes
Standardized error handling across the agent, tools and API layers
"""

import logging
from functools import wraps
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class WebAgentError(Exception):
    """Base exception for Web Agent Lab"""

    status_code: int = 400

    def __init__(self, message: str, error_code: str = "UNKNOWN", details: dict = None):  # type: ignore
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


# Validation
class ValidationError(WebAgentError):
    """Request body validation failed; no run starts"""

    status_code = 400

    def __init__(self, field: str, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(
            f"Validation error in field '{field}': {message}",
            "VALIDATION_ERROR",
            {"field": field, "errors": errors or []},
        )


# Configuration
class ConfigurationError(WebAgentError):
    """Missing or invalid configuration (credentials, endpoints)"""

    status_code = 500

    def __init__(self, config_key: str, reason: str = ""):
        message = f"Configuration error: {config_key}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "CONFIGURATION_ERROR", {"config_key": config_key})


# Model
class ModelError(WebAgentError):
    """Language-model completion failed; fatal for a run"""

    status_code = 502

    def __init__(
        self, message: str, model_name: str = "", error_code: str = "MODEL_ERROR"
    ):
        super().__init__(message, error_code, {"model_name": model_name})


# Agent
class AgentError(WebAgentError):
    """Agent execution errors"""

    status_code = 500

    def __init__(self, agent_name: str, reason: str = ""):
        message = f"Agent error: {agent_name}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "AGENT_ERROR", {"agent_name": agent_name})


class ToolExecutionError(AgentError):
    """A tool collaborator failed"""

    def __init__(self, tool_name: str, reason: str = ""):
        super().__init__(f"tool {tool_name}", reason)
        self.error_code = "TOOL_EXECUTION_ERROR"
        self.details["tool_name"] = tool_name
        self.reason = reason


class ToolNotFoundError(AgentError):
    """Requested tool is not registered"""

    def __init__(self, tool_name: str):
        super().__init__(f"tool {tool_name}", "not registered")
        self.error_code = "TOOL_NOT_FOUND"
        self.details["tool_name"] = tool_name


def handle_model_error(func):
    """Decorator converting transport failures of a model client into ModelError"""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except WebAgentError:
            raise
        except requests.RequestException as e:
            model_name = getattr(args[0], "model_name", "") if args else ""
            raise ModelError(f"Model request failed: {e}", model_name) from e
        except ValueError as e:
            # Undecodable JSON body
            model_name = getattr(args[0], "model_name", "") if args else ""
            raise ModelError(
                f"Invalid model response: {e}", model_name, "MODEL_RESPONSE_ERROR"
            ) from e

    return wrapper


def error_payload(exc: Exception, error_code: Optional[str] = None) -> Dict[str, Any]:
    """Build the JSON body returned by the API exception handlers"""
    if isinstance(exc, WebAgentError):
        return {
            "success": False,
            "error_code": error_code or exc.error_code,
            "message": exc.message,
            "details": exc.details,
        }
    return {
        "success": False,
        "error_code": error_code or "INTERNAL_ERROR",
        "message": "Internal server error occurred",
        "details": {},
    }
