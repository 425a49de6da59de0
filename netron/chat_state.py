"""State held by the peer-to-peer chat view: messages and who is online."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any

SHORT_ID_LENGTH = 8


def current_timestamp() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def short_id(value: object) -> str:
    """The first eight characters of an identifier's text form."""
    return str(value)[:SHORT_ID_LENGTH]


@dataclass(frozen=True)
class ChatMessage:
    """One line in a chat room, either received or written locally."""

    sender: str
    nickname: str
    text: str
    timestamp: int
    is_own: bool = False

    @property
    def key(self) -> tuple[int, str]:
        """Identity used to tell messages apart when listing them."""
        return (self.timestamp, self.text)


@dataclass
class ActiveChat:
    """A joined chat room: its history, online peers and topic."""

    topic_id: str
    messages: list[ChatMessage] = field(default_factory=list)
    online_users: dict[str, str] = field(default_factory=dict)
    sender: Any = None

    def add_message(self, message: ChatMessage) -> None:
        self.messages.append(message)

    def set_online(self, peer: object, nickname: str) -> None:
        """Record that a peer is online, keeping its latest nickname."""
        self.online_users[str(peer)] = nickname