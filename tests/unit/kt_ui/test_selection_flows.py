"""Selection flows exercised through the headless UI."""

import pytest

from kt_app.project import ProjectSnapshot
from kt_common.settings import TransmittalSettings
from kt_core.selection import CANCELLED, Multiple, Single
from kt_ui.flows.selection import (
    outcome_values,
    select_from_list,
    select_revisions,
    select_sheets,
)
from kt_ui.tui.system.headless import HeadlessUI, ScriptedSelection

pytestmark = pytest.mark.unit_ui

FRUIT = ["Apple", "Banana", "Cherry"]


def test_unscripted_dialog_cancels() -> None:
    ui = HeadlessUI()
    outcome = select_from_list(ui, FRUIT, FRUIT)
    assert outcome is CANCELLED
    assert ui.recorded_selections[0].title == "Select Item(s):"
    assert ui.recorded_selections[0].keys == tuple(FRUIT)


def test_checks_made_before_refilter_are_kept() -> None:
    ui = HeadlessUI(
        scripted_selections=[ScriptedSelection(check=["Apple", "Cherry"], refilter="ban")]
    )
    outcome = select_from_list(ui, FRUIT, [0, 1, 2])
    assert outcome == Multiple((0, 2))


def test_check_all_only_reaches_filtered_rows() -> None:
    ui = HeadlessUI(scripted_selections=[ScriptedSelection(filter="an", check_all=True, refilter="")])
    assert select_from_list(ui, FRUIT, FRUIT) == Multiple(("Banana",))


def test_single_select_uses_highlight() -> None:
    ui = HeadlessUI(scripted_selections=[ScriptedSelection(filter="e", highlight="Cherry")])
    outcome = select_from_list(ui, FRUIT, FRUIT, multi_select=False)
    assert outcome == Single("Cherry")
    assert ui.recorded_selections[0].title == "Select Item:"


def test_highlight_of_hidden_row_cancels() -> None:
    ui = HeadlessUI(scripted_selections=[ScriptedSelection(filter="an", highlight="Apple")])
    assert select_from_list(ui, FRUIT, FRUIT, multi_select=False).cancelled


def test_single_select_without_highlight_cancels() -> None:
    ui = HeadlessUI(scripted_selections=[ScriptedSelection(filter="e")])
    assert select_from_list(ui, FRUIT, FRUIT, multi_select=False) is CANCELLED
    assert ui.recorded_selections[0].outcome is CANCELLED


def test_select_sheets_lists_sorted_non_placeholders(snapshot: ProjectSnapshot) -> None:
    ui = HeadlessUI(scripted_selections=[ScriptedSelection(filter="floor", check_all=True)])
    outcome = select_sheets(ui, snapshot)
    assert ui.recorded_selections[0].title == "Select Sheet(s):"
    assert ui.recorded_selections[0].keys == (
        "A-101: Ground Floor Plan",
        "A-102: Second Floor Plan",
        "A-201: Sections",
    )
    assert [sheet.number for sheet in outcome_values(outcome)] == ["A-101", "A-102"]


def test_select_revisions_respects_sort_setting(snapshot: ProjectSnapshot) -> None:
    ui = HeadlessUI(scripted_selections=[None])
    select_revisions(ui, snapshot, settings=TransmittalSettings(sort_revisions=False))
    assert ui.recorded_selections[0].keys[0].startswith("2: ")
    ui = HeadlessUI(scripted_selections=[None])
    select_revisions(ui, snapshot)
    assert ui.recorded_selections[0].keys[0].startswith("1: ")


def test_fuzzy_setting_tolerates_typos(snapshot: ProjectSnapshot) -> None:
    settings = TransmittalSettings(fuzzy_filter=True)
    ui = HeadlessUI(scripted_selections=[ScriptedSelection(filter="Sectoins", check_all=True)])
    outcome = select_sheets(ui, snapshot, settings=settings)
    assert [sheet.number for sheet in outcome_values(outcome)] == ["A-201"]


def test_outcome_values() -> None:
    assert outcome_values(CANCELLED) == []
    assert outcome_values(Single(1)) == [1]
    assert outcome_values(Multiple((1, 2))) == [1, 2]
