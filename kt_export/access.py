"""Accessibility checks for export targets."""

from __future__ import annotations

import logging
from pathlib import Path

from kt_common.errors import ExportBlockedError

logger = logging.getLogger(__name__)


def file_is_accessible(path: Path) -> bool:
    """Return True if ``path`` can be written.

    A missing file counts as accessible so it can be created. An existing
    file must open for reading and writing; a lock held by another
    application surfaces as PermissionError on most platforms.
    """
    if not path.exists():
        return True
    try:
        with path.open("r+b"):
            pass
    except OSError:
        return False
    return True


def ensure_writable(path: Path) -> None:
    """Raise ExportBlockedError when an existing target cannot be written."""
    if file_is_accessible(path):
        return
    logger.warning("Export target is locked or read-only: %s", path)
    raise ExportBlockedError(
        "File exists and is not editable. Ensure it is closed and try again.",
        context={"path": path},
    )
