"""A chat contact together with the messages exchanged with it."""

from __future__ import annotations

from dataclasses import dataclass, field

from pidgypost.message import Message


@dataclass
class Contact:
    """A person messages are exchanged with."""

    name: str
    originated_msgs: list[Message] = field(default_factory=list)
    terminated_msgs: list[Message] = field(default_factory=list)

    def add_originated(self, message: Message) -> None:
        """Record a message that this contact originated."""
        self.originated_msgs.append(message)

    def add_terminated(self, message: Message) -> None:
        """Record a message that terminated at this contact."""
        self.terminated_msgs.append(message)