from rich.console import Console

from kt_ui.tui.core import theme
from kt_ui.tui.system.components.table_layout import build_rich_table
from kt_ui.tui.system.models import TableModel
from kt_ui.tui.system.protocols import TablePresenter

# Row separators stop paying off once a transmittal scrolls off screen.
LINED_ROW_LIMIT = 40


class RichTablePresenter(TablePresenter):
    def __init__(self, console: Console):
        self._console = console

    def show(self, table: TableModel) -> None:
        rich_table = build_rich_table(
            table,
            console=self._console,
            show_lines=len(table.rows) <= LINED_ROW_LIMIT,
            border_style=theme.RICH_BORDER_STYLE,
            header_style=theme.RICH_ACCENT_BOLD,
            title_style=theme.RICH_ACCENT_BOLD,
        )
        rich_table.caption = f"{len(table.rows)} rows"
        self._console.print(rich_table)
