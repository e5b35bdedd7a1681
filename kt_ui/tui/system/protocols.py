from typing import Any, ContextManager, Protocol

from kt_common.errors import KTError
from kt_core.selection import SelectionOutcome, SelectionSession
from kt_ui.tui.system.models import TableModel


class TablePresenter(Protocol):
    def show(self, table: TableModel) -> None: ...


class ListSelector(Protocol):
    def select(
        self,
        session: SelectionSession[Any],
        *,
        title: str,
    ) -> SelectionOutcome[Any]: ...


class Presenter(Protocol):
    def info(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def success(self, message: str) -> None: ...
    def failure(self, error: KTError) -> None: ...
    def cancelled(self) -> None: ...


class Form(Protocol):
    def confirm(self, prompt: str, default: bool = True) -> bool: ...


class Progress(Protocol):
    def status(self, message: str) -> ContextManager[None]: ...


class UI(Protocol):
    selector: ListSelector
    tables: TablePresenter
    present: Presenter
    form: Form
    progress: Progress
