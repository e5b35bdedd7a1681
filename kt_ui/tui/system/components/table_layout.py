from __future__ import annotations

import shutil

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from kt_ui.tui.system.models import TableModel


def _console_width(console: Console) -> int | None:
    try:
        width = int(getattr(console.size, "width"))
        if width > 0:
            return width
    except (AttributeError, TypeError, ValueError):
        pass
    width = int(shutil.get_terminal_size(fallback=(100, 24)).columns)
    return width if width > 0 else None


def _cell_width(value: str) -> int:
    return max((len(line) for line in str(value).splitlines()), default=0)


def build_rich_table(
    model: TableModel,
    *,
    console: Console,
    show_lines: bool = True,
    border_style: str = "blue",
    header_style: str = "bold blue",
    title_style: str = "bold blue",
    box_style: box.Box = box.ROUNDED,
) -> Table:
    """
    Build a Rich Table from a TableModel that fits the current terminal width.

    Fixed columns are left-aligned and shrink first; columns past
    ``model.fixed_column_count`` stay narrow and centered.
    """
    term_width = _console_width(console)
    max_table_width = max(60, (term_width - 2) if term_width else 100)
    min_col_width = 3

    title_text = Text.from_markup(str(model.title))
    title_text.no_wrap = True
    title_text.overflow = "ellipsis"
    title_max = max(10, max_table_width - 6)
    if len(title_text) > title_max:
        title_text.truncate(title_max, overflow="ellipsis")

    rich_table = Table(
        title=title_text,
        show_lines=show_lines,
        expand=False,
        box=box_style,
        border_style=border_style,
        header_style=header_style,
        title_style=title_style,
    )

    fixed = len(model.columns) if model.fixed_column_count is None else model.fixed_column_count
    column_count = max(1, len(model.columns))
    overhead = 4 + (column_count - 1) * 3

    desired: list[int] = []
    for idx, col in enumerate(model.columns):
        max_len = _cell_width(col)
        for row in model.rows:
            if idx < len(row):
                max_len = max(max_len, _cell_width(row[idx]))
        desired.append(max(min_col_width, min(max_len, max_table_width)))

    # Shrink the widest fixed column until the approximate total fits.
    while sum(desired) + overhead > max_table_width:
        candidates = [i for i in range(min(fixed, len(desired))) if desired[i] > min_col_width]
        if not candidates:
            break
        widest = max(candidates, key=lambda i: desired[i])
        desired[widest] -= 1

    for idx, col in enumerate(model.columns):
        if idx < fixed:
            rich_table.add_column(
                col,
                overflow="ellipsis",
                no_wrap=True,
                min_width=min_col_width,
                max_width=desired[idx],
            )
        else:
            rich_table.add_column(
                col,
                justify="center",
                overflow="fold",
                max_width=desired[idx],
            )
    for row in model.rows:
        rich_table.add_row(*row)
    return rich_table
