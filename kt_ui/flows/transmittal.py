"""Document transmittal workflow: pick revisions and sheets, then export."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from kt_app.api import ProjectSnapshot, build_document_transmittal
from kt_common.errors import ExportBlockedError
from kt_common.settings import TransmittalSettings
from kt_core.transmittal import TransmittalTable
from kt_export.api import (
    WorkbookLayout,
    write_transmittal_csv,
    write_transmittal_workbook,
)
from kt_ui.flows.errors import FlowCancelled, UIFlowError
from kt_ui.flows.selection import (
    candidate_revisions,
    candidate_sheets,
    outcome_values,
    select_revisions,
    select_sheets,
)
from kt_ui.tui.system.models import TableModel
from kt_ui.tui.system.protocols import UI

logger = logging.getLogger(__name__)


@dataclass
class TransmittalResult:
    table: TransmittalTable
    path: Path


def transmittal_path(output_dir: Path, settings: TransmittalSettings, *, as_csv: bool) -> Path:
    target = output_dir / settings.file_name
    return target.with_suffix(".csv") if as_csv else target


def preview_model(table: TransmittalTable, title: str = "Document Transmittal") -> TableModel:
    return TableModel(
        title=title,
        columns=list(table.header),
        rows=[list(row) for row in table.rows],
        fixed_column_count=table.fixed_column_count,
    )


def _write(table: TransmittalTable, path: Path, settings: TransmittalSettings, as_csv: bool) -> None:
    if as_csv:
        write_transmittal_csv(table, path)
    else:
        write_transmittal_workbook(table, path, WorkbookLayout.from_settings(settings))


def export_with_retry(
    ui: UI,
    table: TransmittalTable,
    path: Path,
    settings: TransmittalSettings,
    *,
    as_csv: bool = False,
    max_attempts: int = 3,
) -> Path:
    """Write ``table`` to ``path``, asking to retry while the file is locked.

    The table is built once; only the write is repeated.
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            _write(table, path, settings, as_csv)
            return path
        except ExportBlockedError as exc:
            logger.warning("Export to %s blocked (attempt %d)", path, attempt)
            ui.present.failure(exc)
            if attempt >= max_attempts or not ui.form.confirm(
                f"Retry writing {path.name}?", default=True
            ):
                raise UIFlowError(f"Export aborted: {path} is not editable.") from exc


def run_document_transmittal(
    ui: UI,
    snapshot: ProjectSnapshot,
    output_dir: Path,
    *,
    settings: TransmittalSettings | None = None,
    as_csv: bool = False,
    all_sheets: bool = False,
    all_revisions: bool = False,
    preview: bool = True,
) -> TransmittalResult:
    """Select revisions then sheets, build the transmittal and export it.

    Raises FlowCancelled when either selection is dismissed or empty.
    """
    settings = settings or TransmittalSettings()

    if all_revisions:
        revisions = candidate_revisions(snapshot, settings)
    else:
        revisions = outcome_values(select_revisions(ui, snapshot, settings=settings))
    if not revisions:
        ui.present.cancelled()
        raise FlowCancelled()

    if all_sheets:
        sheets = candidate_sheets(snapshot, settings)
    else:
        sheets = outcome_values(select_sheets(ui, snapshot, settings=settings))
    if not sheets:
        ui.present.cancelled()
        raise FlowCancelled()

    with ui.progress.status("Building transmittal"):
        table = build_document_transmittal(sheets, revisions, settings)
    if preview:
        ui.tables.show(preview_model(table))

    path = transmittal_path(output_dir, settings, as_csv=as_csv)
    export_with_retry(ui, table, path, settings, as_csv=as_csv)
    ui.present.success(f"Transmittal written to {path}")
    return TransmittalResult(table=table, path=path)
