"""
UI adapter package providing Rich-based and headless renderers.
"""

from kt_ui.tui.system.protocols import UI, ListSelector, TablePresenter, Presenter, Form, Progress
from kt_ui.tui.system.facade import TUI
from kt_ui.tui.system.headless import HeadlessUI, ScriptedSelection

__all__ = [
    "UI",
    "TUI",
    "HeadlessUI",
    "ScriptedSelection",
    "ListSelector",
    "TablePresenter",
    "Presenter",
    "Form",
    "Progress",
]
