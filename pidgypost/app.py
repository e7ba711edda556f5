"""The chat application: a contact list beside a chat pane."""

from __future__ import annotations

import textwrap
from collections import deque
from dataclasses import dataclass, field
from typing import Union

from blessed import Terminal

from pidgypost.contact_item import ContactItem
from pidgypost.contact_list import ContactChosen, ContactList, handle_item_key
from pidgypost.keys import ItemKeyMap, ListKeyMap, new_item_key_map, new_list_key_map
from pidgypost.widgets import TextArea, Viewport

_PAD_V, _PAD_H = 1, 2
_EMPTY_CONTACT = ContactItem()
_KEY_NAMES = {
    "KEY_UP": "up", "KEY_DOWN": "down", "KEY_LEFT": "left", "KEY_RIGHT": "right",
    "KEY_ENTER": "enter", "KEY_ESCAPE": "esc", "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "backspace", "KEY_PGUP": "pgup", "KEY_PGDOWN": "pgdown", "KEY_TAB": "tab",
    "\x03": "ctrl+c", "\x04": "ctrl+d", "\x15": "ctrl+u", "\r": "enter", "\n": "enter",
    "\x1b": "esc", "\x7f": "backspace", "\x08": "backspace",
}


@dataclass(frozen=True)
class Resize:
    """The terminal has a new size."""

    width: int
    height: int


Event = Union[str, Resize, ContactChosen]


def _fit(lines: list[str], width: int) -> list[str]:
    width = width if width > 0 else max((len(line) for line in lines), default=0)
    return [line[:width].ljust(width) for line in lines]


@dataclass
class ChatModel:
    """State of the whole application and how it reacts to events."""

    contacts: ContactList
    list_keys: ListKeyMap
    item_keys: ItemKeyMap
    viewport: Viewport
    textarea: TextArea
    messages: list[str] = field(default_factory=list)
    err: Exception | None = None
    selected: ContactItem = _EMPTY_CONTACT
    quitting: bool = False

    def select(self, contact: ContactItem) -> None:
        """Make a contact the active conversation."""
        self.selected = contact

    def clear_selection(self) -> None:
        """Return focus to the contact list."""
        self.selected = _EMPTY_CONTACT

    def update(self, event: Event) -> list[Event]:
        """Apply an event and return any events it gives rise to."""
        if isinstance(event, Resize):
            self._resize(event)
        elif isinstance(event, ContactChosen):
            self.select(event.contact)
        elif self.selected == _EMPTY_CONTACT:
            return self._list_key(event)
        elif self.list_keys.clear_selection.matches(event):
            self.clear_selection()
        else:
            self.viewport.handle_key(event)
            self.textarea.handle_key(event)
        return []

    def _resize(self, event: Resize) -> None:
        list_width = event.width // 3
        chat_width = event.width - list_width
        self.contacts.set_size(list_width - 2 * _PAD_H, event.height - 2 * _PAD_V)
        self.viewport.width = self.textarea.width = chat_width
        self.viewport.height = event.height - self.textarea.height - 1
        if self.messages:
            wrapped = "\n".join(
                "\n".join(textwrap.wrap(line, chat_width) or [""]) if chat_width > 0 else line
                for line in "\n".join(self.messages).split("\n")
            )
            self.viewport.set_content(wrapped)
        self.viewport.goto_bottom()

    def _list_key(self, key: str) -> list[Event]:
        keys, contacts = self.list_keys, self.contacts
        if keys.toggle_spinner.matches(key):
            contacts.show_spinner = not contacts.show_spinner
        elif keys.toggle_title_bar.matches(key):
            shown = not contacts.show_title
            contacts.show_title = contacts.show_filter = contacts.filtering_enabled = shown
        elif keys.toggle_status_bar.matches(key):
            contacts.show_status_bar = not contacts.show_status_bar
        elif keys.toggle_pagination.matches(key):
            contacts.show_pagination = not contacts.show_pagination
        elif keys.toggle_help_menu.matches(key):
            contacts.show_help = not contacts.show_help
        elif keys.insert_item.matches(key):
            self.item_keys.remove.enabled = True
            new_item = ContactItem("New Item!", "New description...")
            contacts.insert_item(0, new_item)
            contacts.set_status(f"Added {new_item.title}")
        elif key in ("q", "ctrl+c"):
            self.quitting = True
        else:
            if key in ("up", "k"):
                contacts.move_up()
            elif key in ("down", "j"):
                contacts.move_down()
            return list(handle_item_key(self.item_keys, key, contacts))
        return []

    def view(self) -> str:
        """Render the whole screen as text."""
        left = _fit(self.contacts.render().split("\n"), self.contacts.width)
        right = _fit(
            self.viewport.render().split("\n") + self.textarea.render().split("\n"),
            self.viewport.width,
        )
        height = max(len(left), len(right))
        left_w = len(left[0]) if left else 0
        right_w = len(right[0]) if right else 0
        left += [" " * left_w] * (height - len(left))
        right += [" " * right_w] * (height - len(right))
        side = " " * _PAD_H
        blank = [" " * (left_w + right_w + 2 * _PAD_H)] * _PAD_V
        body = [side + a + b + side for a, b in zip(left, right)]
        return "\n".join(blank + body + blank)


def initial_model() -> ChatModel:
    """Build the application in its starting state."""
    item_keys = new_item_key_map()
    items = [ContactItem(f"Name{number}", "Message preview...") for number in range(4)]
    viewport = Viewport(30, 5)
    viewport.set_content("Welcome to the chat room!\nType a message and press Enter to send.")
    return ChatModel(
        contacts=ContactList(items, title="Contacts", help_bindings=item_keys.short_help()),
        list_keys=new_list_key_map(),
        item_keys=item_keys,
        viewport=viewport,
        textarea=TextArea(
            width=30, height=3, prompt="┃ ", placeholder="Send a message...", char_limit=280
        ),
    )


def _dispatch(model: ChatModel, event: Event) -> None:
    pending: deque[Event] = deque([event])
    while pending:
        pending.extend(model.update(pending.popleft()))


def start() -> None:
    """Run the application in the terminal until the user quits."""
    term = Terminal()
    model = initial_model()
    size = None
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        dirty = True
        while not model.quitting:
            if (term.width, term.height) != size:
                size = (term.width, term.height)
                _dispatch(model, Resize(*size))
                dirty = True
            if dirty:
                print(term.home + term.clear + model.view(), end="", flush=True)
                dirty = False
            keystroke = term.inkey(timeout=0.1)
            if keystroke:
                raw = (keystroke.name or str(keystroke)) if keystroke.is_sequence else str(keystroke)
                _dispatch(model, _KEY_NAMES.get(raw, raw))
                dirty = True