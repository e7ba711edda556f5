"""Entries shown in the contact list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactItem:
    """A contact as shown in the list: a title and a preview line."""

    title: str = ""
    description: str = ""

    def filter_value(self) -> str:
        """Text the list filters on."""
        return self.title