"""Terminal front end for keyed selection and document transmittals.

Provides the ``kt`` Typer application, prompt_toolkit/rich renderers and a
headless UI for scripted runs.
"""

from kt_ui.cli import app, main

__all__ = ["app", "main"]
