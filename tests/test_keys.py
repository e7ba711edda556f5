import pytest

from pidgypost.keys import KeyBinding, new_item_key_map, new_list_key_map


@pytest.mark.parametrize(
    "attr, key, desc",
    [
        ("insert_item", "a", "add item"),
        ("clear_selection", "esc", "clear selection"),
        ("toggle_spinner", "s", "toggle spinner"),
        ("toggle_title_bar", "T", "toggle title"),
        ("toggle_status_bar", "S", "toggle status"),
        ("toggle_pagination", "P", "toggle pagination"),
        ("toggle_help_menu", "H", "toggle help"),
    ],
)
def test_list_key_map_bindings(attr, key, desc):
    binding = getattr(new_list_key_map(), attr)
    assert binding.matches(key)
    assert binding.help_key == key
    assert binding.help_desc == desc


def test_list_key_map_is_case_sensitive():
    keys = new_list_key_map()
    assert keys.toggle_spinner.matches("s")
    assert not keys.toggle_spinner.matches("S")
    assert keys.toggle_status_bar.matches("S")


def test_item_choose_binding():
    keys = new_item_key_map()
    assert keys.choose.matches("enter")
    assert keys.choose.help_desc == "choose"


def test_item_remove_binding_has_two_keys():
    keys = new_item_key_map()
    assert keys.remove.matches("x")
    assert keys.remove.matches("backspace")
    assert keys.remove.help_key == "x"
    assert keys.remove.help_desc == "delete"


def test_disabled_binding_matches_nothing():
    keys = new_item_key_map()
    keys.remove.enabled = False
    assert not keys.remove.matches("x")
    assert not keys.remove.matches("backspace")
    keys.remove.enabled = True
    assert keys.remove.matches("x")


def test_binding_does_not_match_other_keys():
    binding = KeyBinding(("a",), "a", "add item")
    assert not binding.matches("b")


def test_short_help_lists_choose_then_remove():
    keys = new_item_key_map()
    assert keys.short_help() == [keys.choose, keys.remove]


def test_full_help_is_single_column():
    keys = new_item_key_map()
    assert keys.full_help() == [keys.short_help()]


def test_key_maps_are_independent():
    first = new_item_key_map()
    second = new_item_key_map()
    first.remove.enabled = False
    assert second.remove.enabled is True