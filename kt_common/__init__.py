"""Shared helpers for keyed-transmittal."""

from kt_common.api import KTError, TransmittalSettings, configure_logging, load_settings

__all__ = ["KTError", "TransmittalSettings", "configure_logging", "load_settings"]
