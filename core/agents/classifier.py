# core/agents/classifier.py
"""
Reply Classifier
Decides whether a model reply is a tool call or final answer text
"""

import json
import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ToolNotFoundError
from ..utils.logging import preview_text
from .tool_registry import ToolRegistry, ToolRequest, get_registry

logger = logging.getLogger(__name__)


class ReplyClassifier:
    """
    Parses ``{"name": ..., "input": {...}}`` replies against a tool registry

    Anything that does not parse, names an unknown tool, or fails the
    tool's input model is treated as final answer text. No exception
    reaches the caller.
    """

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    @staticmethod
    def candidate_text(raw: str) -> str:
        """Whole trimmed reply if it opens with '{', else its first line"""
        trimmed = raw.strip()
        if trimmed.startswith("{"):
            return trimmed
        return trimmed.split("\n", 1)[0]

    def classify(self, raw: str) -> Optional[ToolRequest]:
        try:
            payload = json.loads(self.candidate_text(raw))
        except (ValueError, RecursionError):
            # Undecodable or too deeply nested to decode
            return None

        if not isinstance(payload, dict):
            return None

        name = payload.get("name")
        arguments = payload.get("input")
        if not isinstance(name, str) or not isinstance(arguments, dict):
            logger.debug(f"JSON reply without tool shape: {preview_text(raw, 80)}")
            return None

        try:
            return self.registry.build_request(name, arguments)
        except ToolNotFoundError:
            logger.info(f"Reply names unknown tool '{name}', treating as final answer")
        except PydanticValidationError as e:
            logger.info(
                f"Invalid input for tool '{name}' ({e.error_count()} errors), "
                "treating as final answer"
            )
        return None


def classify(raw: str, registry: Optional[ToolRegistry] = None) -> Optional[ToolRequest]:
    """Classify a reply against the given registry (default web tools if omitted)"""
    return ReplyClassifier(registry or get_registry()).classify(raw)
