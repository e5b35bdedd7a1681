from typing import ContextManager

from rich.console import Console

from kt_ui.tui.core.theme import RICH_ACCENT
from kt_ui.tui.system.protocols import Progress


class RichProgress(Progress):
    """Spinner shown while a table is built or written."""

    def __init__(self, console: Console, spinner: str = "dots"):
        self._console = console
        self._spinner = spinner

    def status(self, message: str) -> ContextManager[None]:
        return self._console.status(
            f"[{RICH_ACCENT}]{message}…[/{RICH_ACCENT}]",
            spinner=self._spinner,
        )
