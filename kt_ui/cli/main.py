"""
Command-line interface for keyed-transmittal.

Exposes commands to pick items from keyed lists and to export document
transmittals (sheets against revisions) from a project snapshot.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from kt_ui.cli.commands.pick import register_pick_command
from kt_ui.cli.commands.sheets import register_sheets_command
from kt_ui.cli.commands.transmittal import register_transmittal_command
from kt_ui.wiring.dependencies import UIContext, configure_logging

# Initialize global context (lazy)
ctx_store = UIContext()

app = typer.Typer(help="Select keyed items and export document transmittals.", no_args_is_help=True)


@app.callback(invoke_without_command=True)
def entry(
    ctx: typer.Context,
    headless: bool = typer.Option(
        False,
        "--headless",
        help="Force headless output (useful in CI).",
    ),
    settings: Optional[Path] = typer.Option(
        None,
        "--settings",
        "-s",
        help="YAML settings file for transmittal export.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging.",
    ),
) -> None:
    """Global entry point handling interactive vs headless modes."""
    configure_logging(debug=debug, force=True)
    ctx_store.headless = headless
    if settings is not None:
        ctx_store.use_settings_file(settings)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


register_transmittal_command(app, ctx_store)
register_pick_command(app, ctx_store)
register_sheets_command(app, ctx_store)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
