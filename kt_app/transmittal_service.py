"""Document transmittal: sheets against issued revisions."""

from __future__ import annotations

import logging
from typing import Sequence

from kt_app.keys import revision_key
from kt_app.project import Revision, Sheet
from kt_common.settings import TransmittalSettings
from kt_core.transmittal import (
    PrimaryDescriptor,
    SecondaryDescriptor,
    TransmittalTable,
    build_transmittal,
)

logger = logging.getLogger(__name__)


class SheetRevisionLookup:
    """Resolve the revision number a sheet carries for a given revision."""

    def __init__(self, sheets: Sequence[Sheet]) -> None:
        self._by_number: dict[str, Sheet] = {}
        for sheet in sheets:
            self._by_number.setdefault(sheet.number, sheet)

    def __call__(self, sheet_number: str, revision_id: int) -> str | None:
        sheet = self._by_number.get(sheet_number)
        if sheet is None:
            return None
        return sheet.revision_number(revision_id)


def sheet_descriptors(sheets: Sequence[Sheet]) -> list[PrimaryDescriptor]:
    return [
        PrimaryDescriptor(
            key=sheet.number,
            fields=(sheet.number, sheet.name),
            current=sheet.current_revision,
        )
        for sheet in sheets
    ]


def revision_descriptors(revisions: Sequence[Revision]) -> list[SecondaryDescriptor]:
    return [
        SecondaryDescriptor(
            id=revision.id,
            label=revision_key(revision),
            indicator=revision.number,
        )
        for revision in revisions
    ]


def build_document_transmittal(
    sheets: Sequence[Sheet],
    revisions: Sequence[Revision],
    settings: TransmittalSettings | None = None,
) -> TransmittalTable:
    """Build the transmittal grid for the chosen sheets and revisions.

    Revisions are ordered by sequence number so columns follow issue order.
    """
    settings = settings or TransmittalSettings()
    ordered = sorted(revisions, key=lambda revision: revision.sequence)
    table = build_transmittal(
        sheet_descriptors(sheets),
        revision_descriptors(ordered),
        SheetRevisionLookup(sheets),
        fixed_labels=settings.fixed_labels,
        placeholder=settings.placeholder,
    )
    logger.info(
        "Document transmittal covers %d sheets across %d revisions",
        len(table.rows),
        table.secondary_count,
    )
    return table
