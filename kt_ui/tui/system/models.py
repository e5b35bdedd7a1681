from dataclasses import dataclass


@dataclass
class TableModel:
    title: str
    columns: list[str]
    rows: list[list[str]]
    # Columns past this index are rendered narrow and centered.
    fixed_column_count: int | None = None
