# core/utils/__init__.py
"""
Utility modules for Web Agent Lab
"""

from .logging import (
    PerformanceLogger,
    StructuredFormatter,
    get_logger,
    preview_text,
    setup_structured_logging,
)

__all__ = [
    "PerformanceLogger",
    "StructuredFormatter",
    "get_logger",
    "preview_text",
    "setup_structured_logging",
]
