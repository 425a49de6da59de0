"""The peer-to-peer chat panel: what each button does to the chat's state."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from netron.chat_state import ActiveChat, ChatMessage, current_timestamp, short_id

_log = logging.getLogger(__name__)

BROWSER_ONLY = "P2P chat only works in browser mode"
INITIAL_STATUS = "P2P Chat - Click to initialize node"
NEED_NODE = "Please initialize the node first"
NEED_TICKET = "Please enter a ticket to join"
NO_NODE = "Node not initialized yet"


class ChannelSender(Protocol):
    def broadcast(self, text: str) -> None: ...


class Channel(Protocol):
    sender: ChannelSender

    def id(self) -> str: ...

    def ticket(
        self, *, include_myself: bool, include_bootstrap: bool, include_neighbors: bool
    ) -> str: ...


class ChatNode(Protocol):
    def node_id(self) -> str: ...

    def create(self, nickname: str) -> Channel: ...

    def join(self, ticket: str, nickname: str) -> Channel: ...


def _system_message(text: str) -> ChatMessage:
    return ChatMessage("system", "System", text, current_timestamp())


@dataclass
class ChatPanel:
    """State of the chat view.

    Without a ``node_spawner`` no network node can be started, and the panel
    behaves as it does when rendered on the server.
    """

    node_spawner: Callable[[], ChatNode] | None = None
    username: str = "unnamed_user"
    ticket: str | None = None
    join_ticket: str = ""
    message_input: str = ""
    status: str = INITIAL_STATUS
    node_ready: bool = False
    active_chat: ActiveChat | None = None
    node: ChatNode | None = field(default=None, repr=False)

    def initialize_node(self) -> None:
        if self.node_spawner is None:
            self.status = BROWSER_ONLY
            return
        self.status = "Initializing P2P node..."
        try:
            node = self.node_spawner()
        except Exception as exc:
            self.status = f"Failed to start P2P node: {exc!r}"
            return
        self.status = f"Node ready! ID: {short_id(node.node_id())}..."
        self.node = node
        self.node_ready = True

    def _open_channel(self, channel: Channel, welcome: str) -> None:
        self.active_chat = ActiveChat(
            topic_id=short_id(channel.id()),
            messages=[_system_message(welcome)],
            sender=channel.sender,
        )

    def create_chat(self) -> None:
        if not self.node_ready:
            self.status = NEED_NODE
            return
        if self.node_spawner is None:
            self.status = BROWSER_ONLY
            return
        if self.node is None:
            self.status = NO_NODE
            return
        self.status = "Creating chat room..."
        try:
            channel = self.node.create(self.username)
            ticket = channel.ticket(
                include_myself=True, include_bootstrap=True, include_neighbors=True
            )
        except Exception as exc:
            self.status = f"Failed to create chat: {exc!r}"
            return
        self.ticket = ticket
        self._open_channel(
            channel, "Chat room created! Others can now join using the ticket."
        )
        self.status = "Chat room created successfully!"

    def join_chat(self) -> None:
        ticket = self.join_ticket
        if not ticket:
            self.status = NEED_TICKET
            return
        if not self.node_ready:
            self.status = NEED_NODE
            return
        if self.node_spawner is None:
            self.status = BROWSER_ONLY
            return
        if self.node is None:
            self.status = NO_NODE
            return
        self.status = "Joining chat room..."
        username = self.username
        try:
            channel = self.node.join(ticket, username)
        except Exception as exc:
            self.status = f"Failed to join chat: {exc!r}"
            return
        self._open_channel(channel, f"Joined chat room! Welcome, {username}.")
        self.status = "Successfully joined chat room!"

    def send_message(self) -> None:
        """Post the typed message locally and broadcast it when a sender exists."""
        text = self.message_input.strip()
        if not text or self.active_chat is None:
            return
        chat = self.active_chat
        sender: Any = chat.sender
        if self.node_spawner is not None and sender is None:
            return
        chat.add_message(
            ChatMessage("self", self.username, text, current_timestamp(), is_own=True)
        )
        self.message_input = ""
        if sender is not None:
            try:
                sender.broadcast(text)
            except Exception as exc:
                _log.warning("Failed to send message: %r", exc)

    def leave_chat(self) -> None:
        """Leave the room; the node stays ready for reuse."""
        self.active_chat = None
        self.ticket = None