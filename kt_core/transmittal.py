"""Cross-tabulation of primary entities against secondary entities."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Hashable, Optional, Sequence

import pandas as pd

from kt_common.errors import TransmittalError

logger = logging.getLogger(__name__)

DEFAULT_FIXED_LABELS: tuple[str, ...] = ("Number", "Name", "Current")
DEFAULT_PLACEHOLDER = "-"

LookupFn = Callable[[str, Hashable], Optional[str]]


@dataclass(frozen=True)
class PrimaryDescriptor:
    """A table row source: stable key, fixed display fields, current secondary."""

    key: str
    fields: tuple[str, ...]
    current: Hashable | None = None


@dataclass(frozen=True)
class SecondaryDescriptor:
    """A table column source.

    ``label`` heads the column; ``indicator`` is what the current column
    shows for rows whose current secondary is this one (defaults to label).
    """

    id: Hashable
    label: str
    indicator: str | None = None

    @property
    def current_text(self) -> str:
        return self.label if self.indicator is None else self.indicator


@dataclass
class TransmittalTable:
    header: list[str]
    rows: list[list[str]] = field(default_factory=list)
    fixed_column_count: int = len(DEFAULT_FIXED_LABELS)

    @property
    def secondary_count(self) -> int:
        return len(self.header) - self.fixed_column_count

    @property
    def width(self) -> int:
        return len(self.header)

    def as_matrix(self) -> list[list[str]]:
        """Header followed by the rows, as one list of string rows."""
        return [list(self.header), *(list(row) for row in self.rows)]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=list(self.header), dtype=str)


def _validate_secondaries(secondaries: Sequence[SecondaryDescriptor]) -> None:
    seen: set[Hashable] = set()
    for secondary in secondaries:
        if secondary.id in seen:
            raise TransmittalError(
                f"Secondary id {secondary.id!r} appears more than once.",
                context={"secondary_id": secondary.id},
            )
        seen.add(secondary.id)


def build_transmittal(
    primaries: Sequence[PrimaryDescriptor],
    secondaries: Sequence[SecondaryDescriptor],
    lookup: LookupFn,
    *,
    fixed_labels: Sequence[str] = DEFAULT_FIXED_LABELS,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> TransmittalTable:
    """Correlate primaries (rows) against secondaries (columns).

    Every row is ``fields + [current] + [lookup(key, id) or "" per secondary]``
    and has exactly ``len(fixed_labels) + len(secondaries)`` cells.
    """
    _validate_secondaries(secondaries)
    fixed_count = len(fixed_labels)
    field_count = fixed_count - 1
    by_id = {secondary.id: secondary for secondary in secondaries}

    header = [*fixed_labels, *(secondary.label for secondary in secondaries)]
    rows: list[list[str]] = []
    for primary in primaries:
        if len(primary.fields) != field_count:
            raise TransmittalError(
                f"Primary {primary.key!r} has {len(primary.fields)} fixed fields, "
                f"expected {field_count}.",
                context={"primary": primary.key, "fields": list(primary.fields)},
            )
        row = [*primary.fields, _current_indicator(primary, by_id, lookup, placeholder)]
        for secondary in secondaries:
            value = lookup(primary.key, secondary.id)
            row.append("" if value is None else value)
        rows.append(row)

    logger.debug(
        "Built transmittal table with %d rows and %d secondary columns",
        len(rows),
        len(secondaries),
    )
    return TransmittalTable(header=header, rows=rows, fixed_column_count=fixed_count)


def _current_indicator(
    primary: PrimaryDescriptor,
    by_id: dict[Hashable, SecondaryDescriptor],
    lookup: LookupFn,
    placeholder: str,
) -> str:
    if primary.current is None:
        return placeholder
    secondary = by_id.get(primary.current)
    if secondary is not None:
        return secondary.current_text
    value = lookup(primary.key, primary.current)
    return placeholder if value is None else value
