"""Tests for project snapshot models and loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from kt_app.project import ProjectSnapshot, Revision, Sheet, load_snapshot
from kt_common.errors import SnapshotError


pytestmark = pytest.mark.unit_app


def test_load_yaml_snapshot(snapshot_file: Path) -> None:
    snapshot = load_snapshot(snapshot_file)
    assert snapshot.name == "Tower Block"
    assert len(snapshot.sheets) == 4
    assert snapshot.get_revision(11).numbering == "P1"
    assert snapshot.get_revision(99) is None


def test_load_json_snapshot_coerces_revision_keys(tmp_path: Path, snapshot_data: dict) -> None:
    path = tmp_path / "project.json"
    path.write_text(json.dumps(snapshot_data))
    snapshot = load_snapshot(path)
    sheet = next(sheet for sheet in snapshot.sheets if sheet.number == "A-101")
    assert sheet.revision_number(13) == "C1"


def test_sorted_views(snapshot: ProjectSnapshot) -> None:
    assert [sheet.number for sheet in snapshot.sorted_sheets()] == ["A-101", "A-102", "A-201"]
    assert [sheet.number for sheet in snapshot.sorted_sheets(include_placeholders=True)][0] == "A-001"
    assert [revision.id for revision in snapshot.sorted_revisions()] == [11, 12, 13]


def test_revision_number_falls_back_to_sequence() -> None:
    assert Revision(id=1, sequence=4).number == "4"
    assert Revision(id=1, sequence=4, numbering="B").number == "B"


def test_duplicate_revision_ids_rejected(snapshot_data: dict) -> None:
    snapshot_data["revisions"].append({"id": 11, "sequence": 9})
    with pytest.raises(ValueError):
        ProjectSnapshot.model_validate(snapshot_data)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SnapshotError, match="not found"):
        load_snapshot(tmp_path / "nope.yaml")


def test_unparseable_file(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(SnapshotError, match="could not be parsed"):
        load_snapshot(path)


def test_invalid_sheet_reports_errors(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("sheets:\n  - name: No Number\n")
    with pytest.raises(SnapshotError) as excinfo:
        load_snapshot(path)
    assert excinfo.value.context["errors"]


def test_sheet_without_revisions() -> None:
    sheet = Sheet(number="A-201")
    assert sheet.revision_number(11) is None
