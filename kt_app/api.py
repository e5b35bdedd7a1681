"""Public API surface for kt_app."""

from kt_app.keys import (
    current_revision_number,
    export_key,
    make_string_valid,
    revision_key,
    sheet_key,
)
from kt_app.project import ProjectSnapshot, Revision, Sheet, load_snapshot
from kt_app.transmittal_service import (
    SheetRevisionLookup,
    build_document_transmittal,
    revision_descriptors,
    sheet_descriptors,
)

__all__ = [
    "ProjectSnapshot",
    "Revision",
    "Sheet",
    "SheetRevisionLookup",
    "build_document_transmittal",
    "current_revision_number",
    "export_key",
    "load_snapshot",
    "make_string_valid",
    "revision_descriptors",
    "revision_key",
    "sheet_descriptors",
    "sheet_key",
]
