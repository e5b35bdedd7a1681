"""Workflows for interactive selection of sheets, revisions and plain items."""

from __future__ import annotations

import logging
from typing import Any, Sequence, TypeVar

from kt_app.api import ProjectSnapshot, Revision, Sheet, revision_key, sheet_key
from kt_common.settings import TransmittalSettings
from kt_core.selection import (
    MatchFn,
    Multiple,
    SelectionOutcome,
    SelectionSession,
    fuzzy_match,
)
from kt_ui.tui.system.protocols import UI

logger = logging.getLogger(__name__)

T = TypeVar("T")


def match_fn_for(settings: TransmittalSettings) -> MatchFn | None:
    """Pick the filter predicate the settings ask for (``None`` = substring)."""
    return fuzzy_match if settings.fuzzy_filter else None


def select_from_list(
    ui: UI,
    keys: Sequence[str],
    values: Sequence[T],
    *,
    title: str | None = None,
    multi_select: bool = True,
    match_fn: MatchFn | None = None,
) -> SelectionOutcome[T]:
    """Ask the user to pick one or many of ``values`` labelled by ``keys``."""
    if title is None:
        title = "Select Item(s):" if multi_select else "Select Item:"
    session: SelectionSession[T] = SelectionSession(
        keys, values, multi_select=multi_select, match_fn=match_fn
    )
    outcome = ui.selector.select(session, title=title)
    logger.debug("Selection %r resolved to %s", title, type(outcome).__name__)
    return outcome


def candidate_sheets(
    snapshot: ProjectSnapshot, settings: TransmittalSettings
) -> list[Sheet]:
    if settings.sort_sheets:
        return snapshot.sorted_sheets()
    return [sheet for sheet in snapshot.sheets if not sheet.placeholder]


def candidate_revisions(
    snapshot: ProjectSnapshot, settings: TransmittalSettings
) -> list[Revision]:
    if settings.sort_revisions:
        return snapshot.sorted_revisions()
    return list(snapshot.revisions)


def select_sheets(
    ui: UI,
    snapshot: ProjectSnapshot,
    *,
    settings: TransmittalSettings | None = None,
    title: str = "Select Sheet(s):",
    multi_select: bool = True,
) -> SelectionOutcome[Sheet]:
    settings = settings or TransmittalSettings()
    sheets = candidate_sheets(snapshot, settings)
    return select_from_list(
        ui,
        [sheet_key(sheet) for sheet in sheets],
        sheets,
        title=title,
        multi_select=multi_select,
        match_fn=match_fn_for(settings),
    )


def select_revisions(
    ui: UI,
    snapshot: ProjectSnapshot,
    *,
    settings: TransmittalSettings | None = None,
    title: str = "Select Revision(s):",
    multi_select: bool = True,
) -> SelectionOutcome[Revision]:
    settings = settings or TransmittalSettings()
    revisions = candidate_revisions(snapshot, settings)
    return select_from_list(
        ui,
        [revision_key(revision) for revision in revisions],
        revisions,
        title=title,
        multi_select=multi_select,
        match_fn=match_fn_for(settings),
    )


def outcome_values(outcome: SelectionOutcome[Any]) -> list[Any]:
    """Flatten a valid outcome into a list; a cancellation yields ``[]``."""
    if outcome.cancelled:
        return []
    if isinstance(outcome, Multiple):
        return list(outcome.values)
    return [outcome.value]
