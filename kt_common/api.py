"""Public API surface for kt_common."""

from kt_common.config.env import (
    parse_bool_env,
    parse_float_env,
    parse_int_env,
    parse_list_env,
)
from kt_common.errors import (
    ConfigurationError,
    ExportBlockedError,
    ExportError,
    KTError,
    SnapshotError,
    TransmittalError,
    error_to_payload,
    wrap_error,
)
from kt_common.logging import configure_logging
from kt_common.settings import TransmittalSettings, load_settings

__all__ = [
    "ConfigurationError",
    "ExportBlockedError",
    "ExportError",
    "KTError",
    "SnapshotError",
    "TransmittalError",
    "TransmittalSettings",
    "configure_logging",
    "error_to_payload",
    "load_settings",
    "parse_bool_env",
    "parse_float_env",
    "parse_int_env",
    "parse_list_env",
    "wrap_error",
]
