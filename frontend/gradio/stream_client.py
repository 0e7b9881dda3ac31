# frontend/gradio/stream_client.py
"""
Streaming client for the agent endpoint
Reads NDJSON display events and keeps the display log current
"""

import logging
import os
from typing import Dict, Iterator, List, Optional

import requests
from pydantic import ValidationError

from core.agents.events import DisplayEvent, DisplayLog

logger = logging.getLogger(__name__)

# API configuration
API_BASE = os.getenv("AGENT_API_BASE", "http://localhost:8000/api/v1")

Entries = List[Dict[str, str]]


def stream_run(
    goal: str,
    steps: int = 6,
    api_base: str = API_BASE,
    session: Optional[requests.Session] = None,
    timeout: float = 300,
) -> Iterator[Entries]:
    """
    Start a run and yield a snapshot of the display log after every event

    A non-2xx answer yields a single ``Error: <status>`` entry.
    """
    http = session or requests.Session()
    log = DisplayLog()

    try:
        with http.post(
            f"{api_base}/agent",
            json={"goal": goal, "steps": steps},
            stream=True,
            timeout=timeout,
        ) as response:
            if not response.ok:
                logger.error(f"Agent request failed: {response.status_code}")
                yield [{"role": "assistant", "content": f"Error: {response.status_code}"}]
                return

            for line in response.iter_lines():
                if not line:
                    continue
                try:
                    event = DisplayEvent.model_validate_json(line)
                except ValidationError as e:
                    logger.warning(f"Skipping malformed event line: {e}")
                    continue
                log.apply(event)
                yield log.to_list()
    finally:
        # Caller-provided sessions stay open
        if session is None:
            http.close()


def render_conversation(entries: Entries) -> str:
    """Markdown view of every display entry"""
    if not entries:
        return ""
    blocks = []
    for entry in entries:
        if entry["role"] == "tool":
            blocks.append(f"**tool** `{entry['content']}`")
        else:
            blocks.append(f"**{entry['role']}**: {entry['content']}")
    return "\n\n".join(blocks)


def render_run_log(entries: Entries) -> str:
    """Markdown list of the raw tool calls made so far"""
    calls = [entry["content"] for entry in entries if entry["role"] == "tool"]
    if not calls:
        return "No tool calls yet"
    return "\n".join(f"- `{call}`" for call in calls)
