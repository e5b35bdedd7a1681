from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from kt_core.selection import fuzzy_match
from kt_ui.flows.selection import outcome_values, select_from_list
from kt_ui.wiring.dependencies import UIContext


def register_pick_command(app: typer.Typer, ctx: UIContext) -> None:
    """Register the generic pick command on the given Typer app."""

    @app.command("pick")
    def pick(
        source: Path = typer.Argument(
            ...,
            help="Text file with one item per line.",
        ),
        single: bool = typer.Option(
            False,
            "--single",
            help="Pick exactly one line instead of a checklist.",
        ),
        fuzzy: bool = typer.Option(
            False,
            "--fuzzy",
            help="Use fuzzy matching for the filter.",
        ),
        title: Optional[str] = typer.Option(
            None,
            "--title",
            "-t",
            help="Dialog title.",
        ),
    ) -> None:
        """Select lines from a file and print them."""
        try:
            lines = [line for line in source.read_text(encoding="utf-8").splitlines() if line.strip()]
        except OSError as exc:
            ctx.ui.present.error(f"Cannot read {source}: {exc}")
            raise typer.Exit(1)
        if not lines:
            ctx.ui.present.warning(f"No items found in {source}")
            raise typer.Exit(1)

        use_fuzzy = fuzzy or ctx.settings.fuzzy_filter
        outcome = select_from_list(
            ctx.ui,
            lines,
            lines,
            title=title,
            multi_select=not single,
            match_fn=fuzzy_match if use_fuzzy else None,
        )
        if outcome.cancelled:
            ctx.ui.present.cancelled()
            raise typer.Exit(1)
        for value in outcome_values(outcome):
            typer.echo(value)
