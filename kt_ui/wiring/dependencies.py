from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from kt_common.api import TransmittalSettings, configure_logging, load_settings
from kt_ui.tui.system.facade import TUI
from kt_ui.tui.system.protocols import UI


@dataclass
class UIContext:
    """Container for UI services and state, initialized lazily."""
    headless: bool = False
    settings_path: Optional[Path] = None

    # Lazily initialized services
    _ui: Optional[UI] = None
    _settings: Optional[TransmittalSettings] = None

    @property
    def ui(self) -> UI:
        if self._ui is None:
            if self.headless:
                from kt_ui.tui.system.headless import HeadlessUI
                self._ui = HeadlessUI()
            else:
                self._ui = TUI()
        return self._ui

    @ui.setter
    def ui(self, value: UI):
        self._ui = value

    @property
    def settings(self) -> TransmittalSettings:
        if self._settings is None:
            self._settings = load_settings(self.settings_path)
        return self._settings

    @settings.setter
    def settings(self, value: TransmittalSettings):
        self._settings = value

    def use_settings_file(self, path: Path) -> None:
        if path != self.settings_path:
            self.settings_path = path
            self._settings = None

    def reset(self) -> None:
        """Drop cached services so the next access rebuilds them."""
        self._ui = None
        self._settings = None


__all__ = [
    "UIContext",
    "configure_logging",
]
