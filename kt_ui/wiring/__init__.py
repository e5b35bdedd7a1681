"""UI wiring helpers for CLI/TUI setup."""

from kt_ui.wiring.dependencies import UIContext, configure_logging

__all__ = ["UIContext", "configure_logging"]
