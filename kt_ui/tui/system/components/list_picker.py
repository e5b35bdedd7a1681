from __future__ import annotations

import sys
from typing import Any

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame, TextArea

from kt_core.selection import CANCELLED, SelectionOutcome, SelectionSession
from kt_ui.tui.core.theme import prompt_toolkit_picker_style
from kt_ui.tui.system.protocols import ListSelector

RowFragment = tuple[str, str]


class _ListPickerApp:
    """Full-screen checklist with a live filter, driven by a SelectionSession."""

    def __init__(self, session: SelectionSession[Any], title: str) -> None:
        self.session = session
        self.title = title

        self.search = TextArea(height=1, prompt="Filter: ", multiline=False, style="class:search")
        self.list_control = FormattedTextControl(self._render_rows, focusable=False)
        self.kb = self._keybindings()

        inner_layout = HSplit(
            [
                self.search,
                Window(height=1, char="-", style="class:separator"),
                Window(self.list_control),
                Window(height=1, content=FormattedTextControl(self._render_hint)),
            ]
        )

        self.app: Application = Application(
            layout=Layout(Frame(inner_layout, title=title), focused_element=self.search),
            key_bindings=self.kb,
            style=Style.from_dict(dict(prompt_toolkit_picker_style())),
            full_screen=True,
        )

        self.search.buffer.on_text_changed += lambda _: self._apply_filter()

    def _exit(self, result: Any) -> None:
        """Exit the prompt safely, ignoring duplicate-exit errors."""
        try:
            self.app.exit(result=result)
        except Exception as exc:  # pragma: no cover - defensive
            if "Return value already set" in str(exc):
                return
            raise

    def _apply_filter(self) -> None:
        self.session.on_filter_changed(self.search.text)
        self.app.invalidate()

    def _render_rows(self) -> list[RowFragment]:
        rows = self.session.displayed_rows
        if not rows:
            return [("class:empty", "  No matching items\n")]
        fragments: list[RowFragment] = []
        for position, row in enumerate(rows):
            if self.session.multi_select:
                prefix = "[x]" if row.checked else "[ ]"
            else:
                prefix = " > " if position == self.session.highlighted_row else "   "
            style = ""
            if position == self.session.highlighted_row:
                style = "class:selected"
            elif row.checked:
                style = "class:checked"
            fragments.append((style, f" {prefix} {row.key}\n"))
        return fragments

    def _render_hint(self) -> list[RowFragment]:
        if self.session.multi_select:
            hint = "Up/Down=move  Tab=toggle  Ctrl+A=check all  Ctrl+U=uncheck all  Enter=confirm  Esc=cancel"
        else:
            hint = "Up/Down=move  Enter=confirm  Esc=cancel"
        return [("class:hint", hint)]

    def _keybindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("down")
        def _(e: Any) -> None:
            self.session.move_highlight(1)
            self.app.invalidate()

        @kb.add("up")
        def _(e: Any) -> None:
            self.session.move_highlight(-1)
            self.app.invalidate()

        # Space belongs to the filter text; keys contain spaces.
        @kb.add("tab")
        def _(e: Any) -> None:
            if not self.session.multi_select:
                return
            row = self.session.highlighted_row
            if row is not None:
                self.session.toggle_row(row)
            self.app.invalidate()

        @kb.add("c-a")
        def _(e: Any) -> None:
            if self.session.multi_select:
                self.session.check_all()
                self.app.invalidate()

        @kb.add("c-u")
        def _(e: Any) -> None:
            if self.session.multi_select:
                self.session.uncheck_all()
                self.app.invalidate()

        @kb.add("enter")
        def _(e: Any) -> None:
            self._exit(self.session.commit())

        @kb.add("escape")
        @kb.add("c-c")
        def _(e: Any) -> None:
            self._exit(self.session.cancel())

        return kb

    def run(self) -> SelectionOutcome[Any]:
        result = self.app.run()
        return CANCELLED if result is None else result


class PromptListSelector(ListSelector):
    def select(
        self,
        session: SelectionSession[Any],
        *,
        title: str,
    ) -> SelectionOutcome[Any]:
        if not session.entries:
            return CANCELLED
        if not sys.stdin.isatty() or not sys.stdout.isatty():
            return CANCELLED
        return _ListPickerApp(session, title).run()
