"""Public API surface for kt_export."""

from kt_export.access import ensure_writable, file_is_accessible
from kt_export.csv_export import write_transmittal_csv
from kt_export.workbook import WorkbookLayout, write_matrix, write_transmittal_workbook

__all__ = [
    "WorkbookLayout",
    "ensure_writable",
    "file_is_accessible",
    "write_matrix",
    "write_transmittal_csv",
    "write_transmittal_workbook",
]
