from rich.console import Console

from kt_ui.tui.system.components.form import RichForm
from kt_ui.tui.system.components.list_picker import PromptListSelector
from kt_ui.tui.system.components.presenter import RichPresenter
from kt_ui.tui.system.components.progress import RichProgress
from kt_ui.tui.system.components.table import RichTablePresenter
from kt_ui.tui.system.protocols import (
    UI,
    Form,
    ListSelector,
    Presenter,
    Progress,
    TablePresenter,
)


class TUI(UI):
    def __init__(self, console: Console | None = None):
        self._console = console or Console()
        self.selector: ListSelector = PromptListSelector()
        self.tables: TablePresenter = RichTablePresenter(self._console)
        self.present: Presenter = RichPresenter(self._console)
        self.form: Form = RichForm(self._console)
        self.progress: Progress = RichProgress(self._console)
