"""Keyed selection and cross-tabulation core."""

from kt_core.api import (
    SelectionSession,
    build_entries,
    build_matrix,
    build_transmittal,
)

__all__ = ["SelectionSession", "build_entries", "build_matrix", "build_transmittal"]
