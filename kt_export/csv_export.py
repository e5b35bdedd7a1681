"""CSV export of transmittal tables."""

from __future__ import annotations

import logging
from pathlib import Path

from kt_common.errors import ExportError
from kt_core.transmittal import TransmittalTable
from kt_export.access import ensure_writable

logger = logging.getLogger(__name__)


def write_transmittal_csv(table: TransmittalTable, path: Path) -> Path:
    """Write header and rows to CSV using the table's column order."""
    ensure_writable(path)
    frame = table.to_frame()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(path, index=False)
    except OSError as exc:
        raise ExportError(
            f"Failed to write CSV: {path}",
            context={"path": path},
            cause=exc,
        ) from exc
    logger.info("Wrote transmittal CSV %s (%d rows)", path, len(table.rows))
    return path
