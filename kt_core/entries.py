"""Keyed entries: values paired with display keys and origin indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Entry(Generic[T]):
    """A value paired with a display key and its position in the origin sequence.

    ``index`` is fixed at construction (-1 when unset). ``checked`` and
    ``visible`` are the UI-facing flags.
    """

    value: T
    key: str
    index: int = -1
    checked: bool = False
    visible: bool = True


@dataclass
class GroupedEntry(Entry[T]):
    """An entry additionally tagged with a group, for two-axis correlation.

    ``(group_index, item_index)`` is reassigned when a matrix is built and is
    the only identity that stays meaningful afterwards; ``key`` and
    ``group_key`` need not be unique.
    """

    group_value: T | None = None
    group_key: str = ""
    group_index: int = -1

    @property
    def item_index(self) -> int:
        return self.index

    @item_index.setter
    def item_index(self, value: int) -> None:
        self.index = value

    @property
    def index_key(self) -> str:
        return f"{self.group_index}\t{self.item_index}"


def build_entries(keys: Sequence[str], values: Sequence[T]) -> list[Entry[T]]:
    """Pair keys and values positionally, up to the shorter of the two.

    Returns an empty list when either input is empty; never raises.
    """
    count = min(len(keys), len(values))
    return [Entry(value=values[i], key=keys[i], index=i) for i in range(count)]


def find_value_at_key(
    find_key: str,
    values: Sequence[T],
    keys: Sequence[str],
    default: T | None = None,
) -> T | None:
    """Return the value paired with the first occurrence of ``find_key``."""
    try:
        position = list(keys).index(find_key)
    except ValueError:
        return default
    if position < len(values):
        return values[position]
    return default


def positize(integers: Sequence[int], replace_with: int = 0) -> list[int]:
    """Replace every negative integer (unset index) with ``replace_with``."""
    return [value if value > -1 else replace_with for value in integers]
