# core/utils/logging.py
"""
Structured Logging Utilities
JSON logging, run timing, and log previews
"""

import json
import logging
import logging.handlers
import time
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PREVIEW_LIMIT = 200


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        # Add extra fields
        if hasattr(record, "extra_data"):
            log_entry.update(record.extra_data)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class PerformanceLogger:
    """Performance tracking logger"""

    def __init__(self, logger_name: str = "performance"):
        self.logger = logging.getLogger(logger_name)
        self.start_times: Dict[str, float] = {}

    def start_operation(self, operation_id: str, operation_type: str, **metadata):
        """Start tracking an operation"""
        self.start_times[operation_id] = time.time()

        self.logger.info(
            f"Operation started: {operation_type}",
            extra={
                "extra_data": {
                    "operation_id": operation_id,
                    "operation_type": operation_type,
                    "event": "operation_start",
                    **metadata,
                }
            },
        )

    def end_operation(
        self, operation_id: str, success: bool = True, **metadata
    ) -> Optional[float]:
        """End tracking an operation"""
        if operation_id not in self.start_times:
            self.logger.warning(f"Operation {operation_id} not found in start times")
            return None

        duration = time.time() - self.start_times.pop(operation_id)

        self.logger.info(
            f"Operation completed: {operation_id} in {duration:.2f}s",
            extra={
                "extra_data": {
                    "operation_id": operation_id,
                    "event": "operation_end",
                    "duration_seconds": duration,
                    "success": success,
                    **metadata,
                }
            },
        )

        return duration


def setup_structured_logging(log_config: Optional[Dict[str, Any]] = None) -> None:
    """Configure the root logger from the ``logging`` section of app.yaml"""
    log_config = log_config or {}

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(log_config.get("level", "INFO")).upper()))

    # Clear existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    if log_config.get("structured", False):
        console_handler.setFormatter(StructuredFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter(log_config.get("format", DEFAULT_FORMAT))
        )
    root_logger.addHandler(console_handler)

    log_file = log_config.get("file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5  # 10MB
        )
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)


def get_logger(
    name: str, extra_data: Optional[Dict[str, Any]] = None
) -> logging.Logger:
    """Get logger with optional extra data"""
    logger = logging.getLogger(name)

    if extra_data:
        # Create adapter to inject extra data
        class LoggerAdapter(logging.LoggerAdapter):
            def process(self, msg, kwargs):
                if "extra" not in kwargs:
                    kwargs["extra"] = {}
                if "extra_data" not in kwargs["extra"]:
                    kwargs["extra"]["extra_data"] = {}
                kwargs["extra"]["extra_data"].update(self.extra)
                return msg, kwargs

        return LoggerAdapter(logger, extra_data)  # type: ignore

    return logger


def preview_text(text: str, limit: int = PREVIEW_LIMIT) -> str:
    """Create a single-line preview for logging."""
    text = text.replace("\n", " ").strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit]}...(truncated)..."
