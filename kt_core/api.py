"""Public API surface for kt_core."""

from kt_core.entries import (
    Entry,
    GroupedEntry,
    build_entries,
    find_value_at_key,
    positize,
)
from kt_core.matrix import KeyedMatrix, build_matrix
from kt_core.selection import (
    CANCELLED,
    Cancelled,
    DisplayRow,
    MatchFn,
    Multiple,
    SelectionOutcome,
    SelectionSession,
    Single,
    contains_match,
    fuzzy_match,
    make_fuzzy_match,
)
from kt_core.transmittal import (
    DEFAULT_FIXED_LABELS,
    DEFAULT_PLACEHOLDER,
    LookupFn,
    PrimaryDescriptor,
    SecondaryDescriptor,
    TransmittalTable,
    build_transmittal,
)

__all__ = [
    "CANCELLED",
    "Cancelled",
    "DEFAULT_FIXED_LABELS",
    "DEFAULT_PLACEHOLDER",
    "DisplayRow",
    "Entry",
    "GroupedEntry",
    "KeyedMatrix",
    "LookupFn",
    "MatchFn",
    "Multiple",
    "PrimaryDescriptor",
    "SecondaryDescriptor",
    "SelectionOutcome",
    "SelectionSession",
    "Single",
    "TransmittalTable",
    "build_entries",
    "build_matrix",
    "build_transmittal",
    "contains_match",
    "find_value_at_key",
    "fuzzy_match",
    "make_fuzzy_match",
    "positize",
]
