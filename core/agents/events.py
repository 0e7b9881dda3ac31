# core/agents/events.py
"""
Display Events
One-way notifications from the agent loop to a remote observer
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

EventKind = Literal["append", "replace_last"]
DisplayRole = Literal["user", "assistant", "tool"]


class DisplayEvent(BaseModel):
    """How the observer's display log should change"""

    model_config = ConfigDict(frozen=True)

    kind: EventKind = Field(..., description="append or replace_last")
    role: DisplayRole = Field(..., description="Display role of the entry")
    content: str = Field(..., description="Entry text")

    @classmethod
    def append(cls, role: str, content: str) -> "DisplayEvent":
        return cls(kind="append", role=role, content=content)

    @classmethod
    def replace_last(cls, role: str, content: str) -> "DisplayEvent":
        return cls(kind="replace_last", role=role, content=content)

    def to_ndjson(self) -> str:
        """Encode as one line of a line-delimited JSON stream"""
        return self.model_dump_json() + "\n"


class EventEmitter(ABC):
    """Push channel; emit() is called synchronously by the agent loop"""

    @abstractmethod
    def emit(self, event: DisplayEvent) -> None:
        pass


class CallbackEmitter(EventEmitter):
    """Forwards each event to a callable"""

    def __init__(self, callback: Callable[[DisplayEvent], None]):
        self.callback = callback

    def emit(self, event: DisplayEvent) -> None:
        self.callback(event)


class CollectingEmitter(EventEmitter):
    """Keeps every emitted event in order"""

    def __init__(self):
        self.events: List[DisplayEvent] = []

    def emit(self, event: DisplayEvent) -> None:
        self.events.append(event)

    def kinds(self) -> List[str]:
        return [event.kind for event in self.events]


class DisplayLog:
    """
    Observer-side projection of display events

    append pushes an entry; replace_last overwrites the most recent entry,
    or pushes one when the log is still empty.
    """

    def __init__(self):
        self.entries: List[Dict[str, str]] = []

    def apply(self, event: DisplayEvent) -> None:
        entry = {"role": event.role, "content": event.content}
        if event.kind == "replace_last" and self.entries:
            self.entries[-1] = entry
        else:
            if event.kind == "replace_last":
                logger.debug("replace_last on empty display log, appending")
            self.entries.append(entry)

    def tool_entries(self) -> List[Dict[str, str]]:
        """Run log: only the raw tool-call lines"""
        return [entry for entry in self.entries if entry["role"] == "tool"]

    def to_list(self) -> List[Dict[str, str]]:
        return [dict(entry) for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)
