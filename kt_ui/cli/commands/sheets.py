from __future__ import annotations

from pathlib import Path

import typer

from kt_app.api import current_revision_number, export_key, load_snapshot
from kt_common.errors import KTError
from kt_ui.tui.system.models import TableModel
from kt_ui.wiring.dependencies import UIContext


def register_sheets_command(app: typer.Typer, ctx: UIContext) -> None:
    """Register the sheets listing command on the given Typer app."""

    @app.command("sheets")
    def sheets(
        snapshot_path: Path = typer.Argument(
            ...,
            help="Project snapshot (YAML or JSON) listing sheets and revisions.",
        ),
        include_placeholders: bool = typer.Option(
            False,
            "--placeholders",
            help="Also list placeholder sheets.",
        ),
    ) -> None:
        """List sheets with their current revision and export file key."""
        try:
            snapshot = load_snapshot(snapshot_path)
        except KTError as exc:
            ctx.ui.present.failure(exc)
            raise typer.Exit(1)
        rows = [
            [sheet.number, sheet.name, current_revision_number(sheet), export_key(sheet)]
            for sheet in snapshot.sorted_sheets(include_placeholders=include_placeholders)
        ]
        if not rows:
            ctx.ui.present.warning(f"No sheets found in {snapshot_path}")
            return
        ctx.ui.tables.show(
            TableModel(
                title=snapshot.name or "Sheets",
                columns=["Number", "Name", "Current", "Export key"],
                rows=rows,
            )
        )
