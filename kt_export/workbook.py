"""Excel export of transmittal tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Alignment
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from kt_common.errors import ExportError
from kt_common.settings import TransmittalSettings
from kt_core.transmittal import TransmittalTable
from kt_export.access import ensure_writable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkbookLayout:
    """Formatting contract for the exported sheet.

    Fixed columns are wide and left as-is; secondary columns are narrow,
    centered, with rotated header text.
    """

    sheet_name: str = "Doctrans"
    header_row_height: float = 150.0
    fixed_column_width: float = 30.0
    secondary_column_width: float = 5.0
    header_rotation: int = 90

    @classmethod
    def from_settings(cls, settings: TransmittalSettings) -> "WorkbookLayout":
        return cls(
            sheet_name=settings.sheet_name,
            header_row_height=settings.header_row_height,
            fixed_column_width=settings.fixed_column_width,
            secondary_column_width=settings.secondary_column_width,
            header_rotation=settings.header_rotation,
        )


def _open_workbook(path: Path) -> Workbook:
    try:
        return load_workbook(str(path))
    except (InvalidFileException, BadZipFile) as exc:
        raise ExportError(
            f"Existing file is not an Excel workbook: {path}",
            context={"path": path},
            cause=exc,
        ) from exc


def _reset_worksheet(workbook: Workbook, sheet_name: str) -> Worksheet:
    """Return an empty worksheet, reusing the named (or first) sheet's slot."""
    if sheet_name in workbook.sheetnames:
        existing = workbook[sheet_name]
    else:
        existing = workbook.worksheets[0]
    position = workbook.index(existing)
    title = existing.title
    workbook.remove(existing)
    return workbook.create_sheet(title=title, index=position)


def write_matrix(worksheet: Worksheet, matrix: list[list[str]], start_row: int = 1, start_col: int = 1) -> None:
    """Write a matrix of strings, skipping None cells."""
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if value is None:
                continue
            worksheet.cell(row=r + start_row, column=c + start_col, value=value)


def _apply_layout(worksheet: Worksheet, table: TransmittalTable, layout: WorkbookLayout) -> None:
    worksheet.row_dimensions[1].height = layout.header_row_height
    centered = Alignment(horizontal="center")
    rotated = Alignment(horizontal="center", text_rotation=layout.header_rotation)
    last_row = len(table.rows) + 1

    for column in range(1, table.width + 1):
        letter = get_column_letter(column)
        if column <= table.fixed_column_count:
            worksheet.column_dimensions[letter].width = layout.fixed_column_width
            continue
        worksheet.column_dimensions[letter].width = layout.secondary_column_width
        worksheet.cell(row=1, column=column).alignment = rotated
        for row in range(2, last_row + 1):
            worksheet.cell(row=row, column=column).alignment = centered


def write_transmittal_workbook(
    table: TransmittalTable,
    path: Path,
    layout: WorkbookLayout | None = None,
) -> Path:
    """Write ``table`` to an xlsx file, replacing the target sheet's contents.

    The accessibility check runs before any workbook is touched so a locked
    file is reported as ExportBlockedError and the table can be retried.
    """
    layout = layout or WorkbookLayout()
    ensure_writable(path)

    exists = path.exists()
    if exists:
        workbook = _open_workbook(path)
        worksheet = _reset_worksheet(workbook, layout.sheet_name)
    else:
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = layout.sheet_name

    write_matrix(worksheet, table.as_matrix())
    _apply_layout(worksheet, table, layout)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(str(path))
    except OSError as exc:
        raise ExportError(
            f"Failed to save workbook: {path}",
            context={"path": path},
            cause=exc,
        ) from exc
    finally:
        workbook.close()

    logger.info(
        "%s transmittal workbook %s (%d rows)",
        "Updated" if exists else "Created",
        path,
        len(table.rows),
    )
    return path
