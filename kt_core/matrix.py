"""Bucketing of grouped entries into a keyed matrix."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Iterator, Sequence, TypeVar

from kt_core.entries import GroupedEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class KeyedMatrix(Generic[T]):
    """Group keys aligned with one bucket of grouped entries per key.

    Every entry lives in exactly one bucket or in ``unkeyed``. Buckets are
    only handed out as tuples; use the bounds-checked mutators to change
    entry flags.
    """

    group_keys: list[str] = field(default_factory=list)
    _buckets: list[list[GroupedEntry[T]]] = field(default_factory=list, repr=False)
    _unkeyed: list[GroupedEntry[T]] = field(default_factory=list, repr=False)

    @property
    def buckets(self) -> tuple[tuple[GroupedEntry[T], ...], ...]:
        return tuple(tuple(bucket) for bucket in self._buckets)

    @property
    def unkeyed(self) -> tuple[GroupedEntry[T], ...]:
        return tuple(self._unkeyed)

    @property
    def has_unkeyed(self) -> bool:
        return len(self._unkeyed) > 0

    def __len__(self) -> int:
        return len(self.group_keys)

    def __iter__(self) -> Iterator[tuple[str, tuple[GroupedEntry[T], ...]]]:
        for key, bucket in zip(self.group_keys, self._buckets):
            yield key, tuple(bucket)

    def accessible_at(self, group_index: int, item_index: int) -> bool:
        """Return True if ``(group_index, item_index)`` addresses a bucket slot."""
        if group_index < 0 or item_index < 0:
            return False
        if group_index >= len(self.group_keys) or group_index >= len(self._buckets):
            return False
        return item_index < len(self._buckets[group_index])

    def is_accessible(self, entry: GroupedEntry[T]) -> bool:
        return self.accessible_at(entry.group_index, entry.item_index)

    def set_visible(self, entry: GroupedEntry[T], show: bool = True) -> bool:
        """Set visibility of the slot addressed by ``entry``.

        Returns False, without mutating anything, when the entry's indices
        do not address a slot of this matrix.
        """
        if not self.is_accessible(entry):
            logger.debug("Rejected visibility change for stale entry %s", entry.index_key)
            return False
        self._buckets[entry.group_index][entry.item_index].visible = show
        return True

    def set_checked(self, entry: GroupedEntry[T], check: bool = True) -> bool:
        """Set the checked flag of the slot addressed by ``entry``.

        Returns False, without mutating anything, when the entry's indices
        do not address a slot of this matrix.
        """
        if not self.is_accessible(entry):
            logger.debug("Rejected check change for stale entry %s", entry.index_key)
            return False
        self._buckets[entry.group_index][entry.item_index].checked = check
        return True

    def get_group(self, key: str) -> tuple[GroupedEntry[T], ...] | None:
        """Return the bucket for ``key``, or None if the key is unknown."""
        try:
            position = self.group_keys.index(key)
        except ValueError:
            return None
        return tuple(self._buckets[position])

    def refresh_item_indices(self) -> None:
        """Renumber every bucket member to its current position in the bucket."""
        for bucket in self._buckets:
            for position, entry in enumerate(bucket):
                entry.item_index = position


def build_matrix(
    group_keys: Sequence[str],
    entries: Sequence[GroupedEntry[T]],
    sort_groups: bool = True,
) -> KeyedMatrix[T]:
    """Bucket ``entries`` by their group key.

    The caller's ``group_keys`` are never reordered; sorting applies to a
    private copy. Matched entries receive their new ``(group_index,
    item_index)``; unmatched entries keep their indices and land in
    ``unkeyed``.
    """
    if not group_keys:
        return KeyedMatrix()

    keys = sorted(group_keys) if sort_groups else list(group_keys)
    positions: dict[str, int] = {}
    for position, key in enumerate(keys):
        positions.setdefault(key, position)

    buckets: list[list[GroupedEntry[T]]] = [[] for _ in keys]
    unkeyed: list[GroupedEntry[T]] = []

    for entry in entries:
        group_index = positions.get(entry.group_key)
        if group_index is None:
            unkeyed.append(entry)
            continue
        bucket = buckets[group_index]
        entry.group_index = group_index
        entry.item_index = len(bucket)
        bucket.append(entry)

    if unkeyed:
        logger.debug("%d entries did not match any group key", len(unkeyed))
    return KeyedMatrix(group_keys=keys, _buckets=buckets, _unkeyed=unkeyed)
