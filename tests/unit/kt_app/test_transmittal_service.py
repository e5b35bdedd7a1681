"""Tests for the document transmittal service."""

import pytest

from kt_app.project import ProjectSnapshot
from kt_app.transmittal_service import (
    SheetRevisionLookup,
    build_document_transmittal,
    revision_descriptors,
    sheet_descriptors,
)
from kt_common.settings import TransmittalSettings


pytestmark = pytest.mark.unit_app


def test_full_transmittal(snapshot: ProjectSnapshot) -> None:
    table = build_document_transmittal(snapshot.sorted_sheets(), snapshot.revisions)
    assert table.header == [
        "Number",
        "Name",
        "Current",
        "1: 2024-01-15 - For Comment",
        "2: 2024-03-01 - For Tender",
        "3: 2024-06-30 - For Construction",
    ]
    assert table.rows == [
        ["A-101", "Ground Floor Plan", "C1", "P1", "", "C1"],
        ["A-102", "Second Floor Plan", "P2", "P1", "P2", ""],
        ["A-201", "Sections", "-", "", "", ""],
    ]


def test_current_outside_selection_uses_sheet_number(snapshot: ProjectSnapshot) -> None:
    sheets = [sheet for sheet in snapshot.sheets if sheet.number == "A-101"]
    revisions = [snapshot.get_revision(11)]
    table = build_document_transmittal(sheets, revisions)
    assert table.rows == [["A-101", "Ground Floor Plan", "C1", "P1"]]


def test_settings_drive_labels_and_placeholder(snapshot: ProjectSnapshot) -> None:
    settings = TransmittalSettings(fixed_labels=("Sheet", "Title", "Rev"), placeholder="n/a")
    sheets = [sheet for sheet in snapshot.sheets if sheet.number == "A-201"]
    table = build_document_transmittal(sheets, [], settings)
    assert table.header == ["Sheet", "Title", "Rev"]
    assert table.rows == [["A-201", "Sections", "n/a"]]


def test_descriptors(snapshot: ProjectSnapshot) -> None:
    primaries = sheet_descriptors(snapshot.sorted_sheets())
    assert primaries[0].key == "A-101"
    assert primaries[0].fields == ("A-101", "Ground Floor Plan")
    assert primaries[0].current == 13
    secondaries = revision_descriptors(snapshot.sorted_revisions())
    assert [s.current_text for s in secondaries] == ["P1", "P2", "C1"]


def test_lookup(snapshot: ProjectSnapshot) -> None:
    lookup = SheetRevisionLookup(snapshot.sheets)
    assert lookup("A-102", 12) == "P2"
    assert lookup("A-102", 13) is None
    assert lookup("Z-999", 12) is None
