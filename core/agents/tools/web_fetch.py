# core/agents/tools/web_fetch.py
"""
Web Fetch Tool
Raw GET of a URL; the status is reported, never raised
"""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

import requests
from pydantic import BaseModel, StrictStr, field_validator

from ...exceptions import ToolExecutionError

logger = logging.getLogger(__name__)

TOOL_NAME = "web.fetch"


def validate_url(value: str) -> str:
    """Require an http(s) scheme and a host"""
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("must be an absolute http(s) URL")
    return value


class UrlInput(BaseModel):
    url: StrictStr

    @field_validator("url")
    @classmethod
    def check_url(cls, v: str) -> str:
        return validate_url(v)


@dataclass
class FetchResult:
    url: str
    status: int
    text: str
    content_type: Optional[str] = None


def fetch(url: str, *, user_agent: str = "Mozilla/5.0", timeout: float = 20.0) -> FetchResult:
    """Fetch a URL and return its status, content type and body text"""
    logger.info(f"Fetching {url}")
    try:
        response = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
    except requests.RequestException as e:
        raise ToolExecutionError(TOOL_NAME, f"Fetch failed: {e}") from e

    return FetchResult(
        url=url,
        status=response.status_code,
        text=response.text,
        content_type=response.headers.get("content-type") or None,
    )


def summarize(result: FetchResult, max_chars: int) -> str:
    content_type = result.content_type or "unknown"
    return (
        f"Tool result for {TOOL_NAME} ({result.status} {content_type}):\n"
        f"{result.text[:max_chars]}"
    )
