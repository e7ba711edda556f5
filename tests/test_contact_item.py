import dataclasses

import pytest

from pidgypost.contact_item import ContactItem


def test_fields_are_kept():
    item = ContactItem("Name0", "Message preview...")
    assert item.title == "Name0"
    assert item.description == "Message preview..."


def test_filter_value_is_title():
    item = ContactItem("New Item!", "New description...")
    assert item.filter_value() == "New Item!"


def test_default_item_is_empty():
    assert ContactItem() == ContactItem("", "")
    assert ContactItem().filter_value() == ""


def test_items_compare_by_value():
    assert ContactItem("Name1", "x") == ContactItem("Name1", "x")
    assert ContactItem("Name1", "x") != ContactItem()


def test_item_is_hashable_and_immutable():
    item = ContactItem("Name2", "Message preview...")
    assert {item, ContactItem("Name2", "Message preview...")} == {item}
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.title = "other"