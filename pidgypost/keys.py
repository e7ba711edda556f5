"""Key bindings for the contact list and its items."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class KeyBinding:
    """A set of keys bound to one action, with its help text."""

    keys: tuple[str, ...]
    help_key: str = ""
    help_desc: str = ""
    enabled: bool = True

    def matches(self, key: str) -> bool:
        """Return whether the key triggers this binding."""
        return self.enabled and key in self.keys


@dataclass
class ListKeyMap:
    """Bindings that act on the contact list as a whole."""

    toggle_spinner: KeyBinding
    toggle_title_bar: KeyBinding
    toggle_status_bar: KeyBinding
    toggle_pagination: KeyBinding
    toggle_help_menu: KeyBinding
    insert_item: KeyBinding
    clear_selection: KeyBinding


@dataclass
class ItemKeyMap:
    """Bindings that act on the selected contact."""

    choose: KeyBinding
    remove: KeyBinding

    def short_help(self) -> list[KeyBinding]:
        """Bindings shown in the short help line."""
        return [self.choose, self.remove]

    def full_help(self) -> list[list[KeyBinding]]:
        """Bindings shown in the full help view, grouped in columns."""
        return [[self.choose, self.remove]]


def new_list_key_map() -> ListKeyMap:
    """Build the default list key map."""
    return ListKeyMap(
        insert_item=KeyBinding(("a",), "a", "add item"),
        clear_selection=KeyBinding(("esc",), "esc", "clear selection"),
        toggle_spinner=KeyBinding(("s",), "s", "toggle spinner"),
        toggle_title_bar=KeyBinding(("T",), "T", "toggle title"),
        toggle_status_bar=KeyBinding(("S",), "S", "toggle status"),
        toggle_pagination=KeyBinding(("P",), "P", "toggle pagination"),
        toggle_help_menu=KeyBinding(("H",), "H", "toggle help"),
    )


def new_item_key_map() -> ItemKeyMap:
    """Build the default item key map."""
    return ItemKeyMap(
        choose=KeyBinding(("enter",), "enter", "choose"),
        remove=KeyBinding(("x", "backspace"), "x", "delete"),
    )