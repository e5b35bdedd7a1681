"""Tests for keyed entry pairing helpers."""

import pytest

from kt_core.entries import Entry, GroupedEntry, build_entries, find_value_at_key, positize


pytestmark = pytest.mark.unit_core


def test_build_entries_empty_input_returns_empty() -> None:
    assert build_entries([], [1, 2]) == []
    assert build_entries(["a"], []) == []


def test_build_entries_pairs_up_to_shorter_sequence() -> None:
    entries = build_entries(["a", "b", "c"], [1, 2])
    assert entries == [
        Entry(value=1, key="a", index=0),
        Entry(value=2, key="b", index=1),
    ]
    assert all(entry.visible and not entry.checked for entry in entries)


def test_default_index_is_unset() -> None:
    assert Entry(value="x", key="x").index == -1


def test_grouped_entry_item_index_aliases_index() -> None:
    entry = GroupedEntry(value="wall", key="A101", group_key="Level 1")
    entry.group_index = 2
    entry.item_index = 5
    assert entry.index == 5
    assert entry.index_key == "2\t5"


def test_find_value_at_key_uses_first_occurrence() -> None:
    keys = ["rev A", "rev B", "rev A"]
    values = [10, 20, 30]
    assert find_value_at_key("rev A", values, keys) == 10
    assert find_value_at_key("rev C", values, keys, default=-1) == -1


def test_find_value_at_key_past_end_of_values() -> None:
    assert find_value_at_key("c", [1, 2], ["a", "b", "c"]) is None


def test_positize_replaces_negatives() -> None:
    assert positize([-1, 0, 3, -7]) == [0, 0, 3, 0]
    assert positize([-1, 2], replace_with=9) == [9, 2]
