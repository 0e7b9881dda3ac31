# core/agents/conversation.py
"""Append-only message history sent to the language model"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

VALID_ROLES = ("system", "user", "assistant")


@dataclass(frozen=True)
class Message:
    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


class Conversation:
    """
    Ordered model-facing history

    Messages can only be appended; nothing is edited or removed, so the
    length never decreases during a run.
    """

    def __init__(self, messages: Optional[List[Message]] = None):
        self._messages: List[Message] = []
        for message in messages or []:
            self.append(message.role, message.content)

    def append(self, role: str, content: str) -> Message:
        if role not in VALID_ROLES:
            raise ValueError(f"Invalid message role: {role}")
        message = Message(role=role, content=content)
        self._messages.append(message)
        return message

    @property
    def last(self) -> Optional[Message]:
        return self._messages[-1] if self._messages else None

    def to_list(self) -> List[Dict[str, str]]:
        """Snapshot in chat-completions wire form"""
        return [message.to_dict() for message in self._messages]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(list(self._messages))

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]
