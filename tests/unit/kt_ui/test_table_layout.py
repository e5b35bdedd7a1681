import pytest
from rich.console import Console

from kt_ui.tui.system.components.table import RichTablePresenter
from kt_ui.tui.system.components.table_layout import build_rich_table
from kt_ui.tui.system.models import TableModel

pytestmark = pytest.mark.unit_ui


def _model() -> TableModel:
    return TableModel(
        title="Document Transmittal",
        columns=["Number", "Name", "Current", "1: 2024-01-15 - For Comment"],
        rows=[["A-101", "Ground Floor Plan " * 6, "C1", "P1"]],
        fixed_column_count=3,
    )


def test_secondary_columns_are_centered() -> None:
    table = build_rich_table(_model(), console=Console(width=80))
    assert [column.justify for column in table.columns] == ["left", "left", "left", "center"]
    assert table.columns[1].no_wrap is True


def test_fixed_columns_shrink_to_fit() -> None:
    table = build_rich_table(_model(), console=Console(width=80))
    assert table.columns[1].max_width < len("Ground Floor Plan " * 6)


def test_presenter_prints_rows() -> None:
    console = Console(width=120, record=True)
    RichTablePresenter(console).show(_model())
    text = console.export_text()
    assert "Document Transmittal" in text
    assert "A-101" in text


def test_presenter_captions_row_count() -> None:
    console = Console(width=120, record=True)
    RichTablePresenter(console).show(_model())
    assert f"{len(_model().rows)} rows" in console.export_text()
