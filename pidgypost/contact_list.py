"""The contact list pane and the keys that act on its entries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pidgypost.contact_item import ContactItem
from pidgypost.keys import ItemKeyMap, KeyBinding


@dataclass(frozen=True)
class ContactChosen:
    """Event raised when a contact has been chosen from the list."""

    contact: ContactItem


class ContactList:
    """A list of contacts with a cursor, a title and a status bar."""

    def __init__(
        self,
        items: Iterable[ContactItem] = (),
        width: int = 0,
        height: int = 0,
        title: str = "",
        help_bindings: Sequence[KeyBinding] = (),
    ) -> None:
        self.items = list(items)
        self.index = 0
        self.width = width
        self.height = height
        self.title = title
        self.help_bindings = list(help_bindings)
        self.show_title = self.show_filter = self.filtering_enabled = True
        self.show_status_bar = self.show_pagination = self.show_help = True
        self.show_spinner = False
        self.status_message = ""

    def selected_item(self) -> ContactItem | None:
        """The item under the cursor, or None when the list is empty."""
        return self.items[self.index] if self.items else None

    def remove_item(self, index: int) -> None:
        """Remove the item at index; out-of-range indices are ignored."""
        if 0 <= index < len(self.items):
            del self.items[index]
            self.index = min(self.index, max(0, len(self.items) - 1))

    def insert_item(self, index: int, item: ContactItem) -> None:
        """Insert an item at index, clamped to the bounds of the list."""
        self.items.insert(max(0, min(index, len(self.items))), item)

    def set_status(self, text: str) -> None:
        """Show a message in the status bar."""
        self.status_message = text

    def move_up(self) -> None:
        """Move the cursor one item up, stopping at the first item."""
        self.index = max(0, self.index - 1)

    def move_down(self) -> None:
        """Move the cursor one item down, stopping at the last item."""
        self.index = max(0, min(self.index + 1, len(self.items) - 1))

    def set_size(self, width: int, height: int) -> None:
        """Set the space the list may occupy."""
        self.width, self.height = width, height

    def _per_page(self) -> int:
        if self.height <= 0:
            return max(1, len(self.items))
        chrome = 2 * self.show_title + 2 * self.show_status_bar + self.show_pagination + 2 * self.show_help
        return max(1, (self.height - chrome + 1) // 3)

    def render(self) -> str:
        """Render the list as plain text lines."""
        lines: list[str] = []
        if self.show_title:
            lines += [self.title + (" ⣾" if self.show_spinner else ""), ""]
        if self.show_status_bar:
            count = len(self.items)
            default = "No items" if count == 0 else f"{count} item" + ("s" if count > 1 else "")
            lines += [self.status_message or default, ""]

        per_page = self._per_page()
        page = self.index // per_page
        start = page * per_page
        if not self.items:
            lines.append("No items.")
        for position, item in enumerate(self.items[start:start + per_page], start):
            if position > start:
                lines.append("")
            marker = "│ " if position == self.index else "  "
            lines += [marker + item.title, marker + item.description]

        pages = max(1, -(-len(self.items) // per_page))
        if self.show_pagination and pages > 1:
            lines.append(" ".join("•" if n == page else "·" for n in range(pages)))
        if self.show_help:
            entries = ["↑/k up • ↓/j down"]
            entries += [f"{b.help_key} {b.help_desc}" for b in self.help_bindings if b.enabled]
            lines += ["", " • ".join(entries + ["q quit"])]
        return "\n".join(lines)


def handle_item_key(keys: ItemKeyMap, key: str, contact_list: ContactList) -> list[ContactChosen]:
    """Apply an item-level key to the list and return any resulting events."""
    if keys.choose.matches(key):
        item = contact_list.selected_item()
        if item is None:
            return []
        contact_list.set_status(f"You chose {item.title}")
        return [ContactChosen(item)]
    if keys.remove.matches(key):
        contact_list.remove_item(contact_list.index)
        if not contact_list.items:
            keys.remove.enabled = False
        contact_list.set_status("Deleted ")
    return []