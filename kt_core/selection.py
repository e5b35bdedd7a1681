"""Filtered selection over keyed entries, independent of any widget toolkit.

A :class:`SelectionSession` owns the entries for one dialog invocation. The
UI layer renders :attr:`SelectionSession.displayed_rows`, lets the user flip
``DisplayRow.checked`` and forwards filter edits and confirmation as plain
method calls. The checked state the UI holds is copied back into the entries
by :meth:`SelectionSession.sync_displayed_rows` whenever the filter changes
and on commit, so toggles on rows about to be hidden are never lost.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar, Union

from rapidfuzz import fuzz

from kt_core.entries import Entry, build_entries

logger = logging.getLogger(__name__)

T = TypeVar("T")

MatchFn = Callable[[str, str], bool]


def contains_match(filter_text: str, key: str) -> bool:
    """Case-insensitive substring test."""
    return filter_text.lower() in key.lower()


def make_fuzzy_match(score_cutoff: float = 75.0) -> MatchFn:
    """Build a tolerant predicate scoring ``key`` with rapidfuzz.

    Only membership is fuzzy; the session keeps origin order regardless of
    the score.
    """

    def _match(filter_text: str, key: str) -> bool:
        if contains_match(filter_text, key):
            return True
        score = fuzz.partial_ratio(filter_text.lower(), key.lower())
        return score >= score_cutoff

    return _match


fuzzy_match = make_fuzzy_match()


@dataclass
class DisplayRow:
    """A row as the UI shows it: the entry key and its checkbox state."""

    key: str
    checked: bool = False


@dataclass(frozen=True)
class Cancelled:
    """The user dismissed the dialog or confirmed without a usable choice."""

    @property
    def cancelled(self) -> bool:
        return True

    @property
    def valid(self) -> bool:
        return False


@dataclass(frozen=True)
class Single(Generic[T]):
    value: T

    @property
    def cancelled(self) -> bool:
        return False

    @property
    def valid(self) -> bool:
        return True


@dataclass(frozen=True)
class Multiple(Generic[T]):
    values: tuple[T, ...]

    @property
    def cancelled(self) -> bool:
        return False

    @property
    def valid(self) -> bool:
        return True


SelectionOutcome = Union[Cancelled, Single[T], Multiple[T]]

CANCELLED = Cancelled()


class SelectionSession(Generic[T]):
    """Filtering, visibility and commit state for one selection dialog."""

    def __init__(
        self,
        keys: Sequence[str],
        values: Sequence[T],
        *,
        multi_select: bool = True,
        match_fn: MatchFn | None = None,
    ) -> None:
        self._entries: tuple[Entry[T], ...] = tuple(build_entries(keys, values))
        self.multi_select = multi_select
        self._match_fn = match_fn or contains_match
        self._filter_text = ""
        self._visible_indices: list[int] = list(range(len(self._entries)))
        self._rows: list[DisplayRow] = []
        self.highlighted_row: int | None = None
        self._load_displayed_rows()

    @property
    def entries(self) -> tuple[Entry[T], ...]:
        return self._entries

    @property
    def filter_text(self) -> str:
        return self._filter_text

    @property
    def visible_indices(self) -> tuple[int, ...]:
        return tuple(self._visible_indices)

    @property
    def displayed_rows(self) -> tuple[DisplayRow, ...]:
        """Rows in display order; ``checked`` may be flipped by the UI."""
        return tuple(self._rows)

    @property
    def highlighted_entry(self) -> Entry[T] | None:
        row = self.highlighted_row
        if row is None or not 0 <= row < len(self._rows):
            return None
        return self._entries[self._visible_indices[row]]

    def sync_displayed_rows(self) -> None:
        """Copy the checked state of every displayed row back into its entry."""
        for row, index in zip(self._rows, self._visible_indices):
            self._entries[index].checked = row.checked

    def on_filter_changed(self, text: str) -> None:
        """Recompute visibility for a new filter text."""
        self.sync_displayed_rows()
        self._filter_text = text
        visible: list[int] = []
        for position, entry in enumerate(self._entries):
            entry.visible = text == "" or self._match_fn(text, entry.key)
            if entry.visible:
                visible.append(position)
        self._visible_indices = visible
        self._load_displayed_rows()
        logger.debug(
            "Filter %r shows %d of %d entries", text, len(visible), len(self._entries)
        )

    def set_row_checked(self, row: int, checked: bool = True) -> bool:
        """Set the checkbox of a displayed row, as a click in the UI would."""
        if not 0 <= row < len(self._rows):
            return False
        self._rows[row].checked = checked
        return True

    def toggle_row(self, row: int) -> bool:
        if not 0 <= row < len(self._rows):
            return False
        self._rows[row].checked = not self._rows[row].checked
        return True

    def check_all(self) -> None:
        """Check every entry the current filter shows; hidden ones are untouched."""
        self._set_all_visible(True)

    def uncheck_all(self) -> None:
        """Uncheck every entry the current filter shows; hidden ones are untouched."""
        self._set_all_visible(False)

    def move_highlight(self, delta: int) -> None:
        if not self._rows:
            self.highlighted_row = None
            return
        if self.highlighted_row is None:
            self.highlighted_row = 0
            return
        self.highlighted_row = max(0, min(self.highlighted_row + delta, len(self._rows) - 1))

    def commit(self) -> SelectionOutcome[T]:
        """Resolve the session into an outcome.

        Multi-select yields every checked value in origin order, visible or
        not; checking nothing counts as a cancellation. Single-select yields
        the value under the highlighted row.
        """
        self.sync_displayed_rows()
        if self.multi_select:
            values = tuple(entry.value for entry in self._entries if entry.checked)
            if not values:
                logger.debug("Multi-select commit with nothing checked; cancelling")
                return CANCELLED
            return Multiple(values)

        entry = self.highlighted_entry
        if entry is None:
            logger.debug("Single-select commit without a highlighted row; cancelling")
            return CANCELLED
        return Single(entry.value)

    def cancel(self) -> SelectionOutcome[T]:
        return CANCELLED

    def _set_all_visible(self, checked: bool) -> None:
        for row, index in zip(self._rows, self._visible_indices):
            row.checked = checked
            self._entries[index].checked = checked

    def _load_displayed_rows(self) -> None:
        self._rows = [
            DisplayRow(key=self._entries[index].key, checked=self._entries[index].checked)
            for index in self._visible_indices
        ]
        self.highlighted_row = None
