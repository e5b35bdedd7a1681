from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from kt_app.api import load_snapshot
from kt_common.errors import KTError
from kt_ui.flows.errors import FlowCancelled, UIFlowError
from kt_ui.flows.transmittal import run_document_transmittal
from kt_ui.wiring.dependencies import UIContext


def register_transmittal_command(app: typer.Typer, ctx: UIContext) -> None:
    """Register the transmittal command on the given Typer app."""

    @app.command("transmittal")
    def transmittal(
        snapshot_path: Path = typer.Argument(
            ...,
            help="Project snapshot (YAML or JSON) listing sheets and revisions.",
        ),
        output: Path = typer.Option(
            Path("."),
            "--output",
            "-o",
            help="Directory that receives the transmittal file.",
        ),
        as_csv: bool = typer.Option(
            False,
            "--csv",
            help="Write a CSV file instead of an Excel workbook.",
        ),
        all_sheets: bool = typer.Option(
            False,
            "--all-sheets",
            help="Include every sheet without asking.",
        ),
        all_revisions: bool = typer.Option(
            False,
            "--all-revisions",
            help="Include every revision without asking.",
        ),
        preview: Optional[bool] = typer.Option(
            None,
            "--preview/--no-preview",
            help="Show the table before writing it (default: on).",
        ),
    ) -> None:
        """Cross-tabulate sheets against revisions and export the grid."""
        try:
            snapshot = load_snapshot(snapshot_path)
            result = run_document_transmittal(
                ctx.ui,
                snapshot,
                output,
                settings=ctx.settings,
                as_csv=as_csv,
                all_sheets=all_sheets,
                all_revisions=all_revisions,
                preview=True if preview is None else preview,
            )
        except KTError as exc:
            ctx.ui.present.failure(exc)
            raise typer.Exit(1)
        except FlowCancelled as exc:
            raise typer.Exit(exc.exit_code)
        except UIFlowError as exc:
            ctx.ui.present.error(str(exc))
            raise typer.Exit(exc.exit_code)
        ctx.ui.present.info(
            f"{len(result.table.rows)} sheets x {result.table.secondary_count} revisions"
        )
