"""Shared error taxonomy for keyed-transmittal."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class KTError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class ConfigurationError(KTError):
    """Failure due to invalid configuration."""


class SnapshotError(KTError):
    """Failure loading or validating a project snapshot."""


class TransmittalError(KTError):
    """Inputs to the cross-tabulation violate its column contract."""


class ExportError(KTError):
    """Failure while writing a table to its target file."""


class ExportBlockedError(ExportError):
    """The export target exists but cannot be opened for writing."""


T = TypeVar("T", bound=KTError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed KTError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: KTError) -> dict[str, Any]:
    """Convert a KTError to a flat payload for logs and CLI output."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
