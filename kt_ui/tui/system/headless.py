from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Any, ContextManager, Sequence

from kt_core.selection import CANCELLED, SelectionOutcome, SelectionSession
from kt_ui.tui.system.components.presenter_base import PresenterBase, PresenterSink
from kt_ui.tui.system.models import TableModel
from kt_ui.tui.system.protocols import UI, Form, ListSelector, Progress, TablePresenter


@dataclass
class RecordedTable:
    model: TableModel


@dataclass
class ScriptedSelection:
    """What a user would do in one dialog: filter, tick rows, move, confirm.

    Steps run in field order. ``filter`` is typed first; ``check_all`` and
    ``check`` then act on the rows that filter shows; ``highlight`` places the
    cursor on the row with that key before confirming.
    """

    filter: str = ""
    check: Sequence[str] = ()
    check_all: bool = False
    highlight: str | None = None
    refilter: str | None = None


@dataclass
class RecordedSelection:
    title: str
    keys: tuple[str, ...]
    outcome: SelectionOutcome[Any]


@dataclass
class HeadlessUI(UI):
    recorded_tables: list[RecordedTable] = field(default_factory=list)
    recorded_messages: list[str] = field(default_factory=list)
    recorded_selections: list[RecordedSelection] = field(default_factory=list)

    # Configuration for automated responses; ``None`` entries cancel.
    scripted_selections: list[ScriptedSelection | None] = field(default_factory=list)
    next_confirm_response: bool = True

    def __post_init__(self):
        self.selector = _HeadlessSelector(self)
        self.tables = _HeadlessTablePresenter(self)
        self.present = _HeadlessPresenter(self)
        self.form = _HeadlessForm(self)
        self.progress = _HeadlessProgress(self)


class _HeadlessSelector(ListSelector):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def select(self, session: SelectionSession[Any], *, title: str) -> SelectionOutcome[Any]:
        script = self._ui.scripted_selections.pop(0) if self._ui.scripted_selections else None
        outcome = CANCELLED if script is None else self._play(session, script)
        self._ui.recorded_selections.append(
            RecordedSelection(
                title=title,
                keys=tuple(entry.key for entry in session.entries),
                outcome=outcome,
            )
        )
        return outcome

    @staticmethod
    def _play(session: SelectionSession[Any], script: ScriptedSelection) -> SelectionOutcome[Any]:
        session.on_filter_changed(script.filter)
        if script.check_all:
            session.check_all()
        wanted = set(script.check)
        for position, row in enumerate(session.displayed_rows):
            if row.key in wanted:
                session.set_row_checked(position, True)
        if script.refilter is not None:
            session.on_filter_changed(script.refilter)
        if script.highlight is not None:
            keys = [row.key for row in session.displayed_rows]
            if script.highlight not in keys:
                return session.cancel()
            session.highlighted_row = keys.index(script.highlight)
        return session.commit()


class _HeadlessTablePresenter(TablePresenter):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def show(self, table: TableModel) -> None:
        self._ui.recorded_tables.append(RecordedTable(table))


class _HeadlessPresenterSink(PresenterSink):
    def __init__(self, ui: HeadlessUI) -> None:
        self._ui = ui

    def emit(self, level: str, message: str) -> None:
        self._ui.recorded_messages.append(f"{level.upper()}: {message}")


class _HeadlessPresenter(PresenterBase):
    def __init__(self, ui: HeadlessUI) -> None:
        super().__init__(_HeadlessPresenterSink(ui))


class _HeadlessForm(Form):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def confirm(self, prompt: str, default: bool = True) -> bool:
        self._ui.recorded_messages.append(f"CONFIRM: {prompt}")
        return self._ui.next_confirm_response


class _HeadlessProgress(Progress):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def status(self, message: str) -> ContextManager[None]:
        self._ui.recorded_messages.append(f"STATUS: {message}")
        return nullcontext()
