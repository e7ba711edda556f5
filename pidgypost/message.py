"""Chat messages and the metadata that travels with them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Metadata:
    """Information about a message beyond its text."""

    sent_from_client: bool


@dataclass(frozen=True)
class Message:
    """A single chat message."""

    contents: str
    metadata: Metadata


def new_sent_message(contents: str) -> Message:
    """Create a message sent from this client."""
    return Message(contents=contents, metadata=Metadata(sent_from_client=True))


def new_received_message(contents: str) -> Message:
    """Create a message received from a remote party."""
    return Message(contents=contents, metadata=Metadata(sent_from_client=False))