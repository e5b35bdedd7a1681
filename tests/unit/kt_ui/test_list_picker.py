"""Tests for the prompt_toolkit checklist driving a selection session."""

from typing import Any

import pytest
from prompt_toolkit.keys import Keys

from kt_core.selection import CANCELLED, Multiple, SelectionSession, Single
from kt_ui.tui.system.components import list_picker as list_picker_module
from kt_ui.tui.system.components.list_picker import PromptListSelector, _ListPickerApp

pytestmark = pytest.mark.unit_ui

SHEETS = ["A-101: Ground Floor Plan", "A-102: Second Floor Plan", "A-201: Sections"]


def _press(app: _ListPickerApp, key: Any) -> None:
    bindings = app.kb.get_bindings_for_keys((key,))
    assert bindings, f"no binding for {key!r}"
    bindings[-1].handler(None)


def _app(multi_select: bool = True) -> tuple[_ListPickerApp, list[Any]]:
    session = SelectionSession(SHEETS, ["101", "102", "201"], multi_select=multi_select)
    app = _ListPickerApp(session, "Select Sheet(s):")
    exits: list[Any] = []
    app.app.exit = lambda result=None, **_: exits.append(result)  # type: ignore[method-assign]
    return app, exits


def test_typing_filters_rows() -> None:
    app, _ = _app()
    app.search.text = "floor"
    assert [row.key for row in app.session.displayed_rows] == SHEETS[:2]
    fragments = app._render_rows()
    assert fragments[0] == ("", " [ ] A-101: Ground Floor Plan\n")


def test_tab_toggles_highlighted_row_and_enter_commits() -> None:
    app, exits = _app()
    _press(app, Keys.Down)
    _press(app, Keys.Down)
    _press(app, Keys.Tab)
    assert app._render_rows()[1][1].startswith(" [x]")
    app.search.text = "sections"
    _press(app, Keys.Enter)
    assert exits == [Multiple(("102",))]


def test_space_reaches_filter_for_multi_word_keys() -> None:
    app, _ = _app()
    assert not app.kb.get_bindings_for_keys((" ",))
    app.search.buffer.insert_text("ground")
    app.search.buffer.insert_text(" ")
    app.search.buffer.insert_text("floor")
    assert app.search.text == "ground floor"
    assert [row.key for row in app.session.displayed_rows] == SHEETS[:1]


def test_filtering_drops_single_select_highlight() -> None:
    app, exits = _app(multi_select=False)
    _press(app, Keys.Down)
    app.search.text = "floor"
    assert all(not text.startswith("  > ") for _, text in app._render_rows())
    _press(app, Keys.Enter)
    assert exits == [CANCELLED]


def test_check_all_acts_on_filtered_rows() -> None:
    app, exits = _app()
    app.search.text = "floor"
    _press(app, Keys.ControlA)
    app.search.text = ""
    assert [row.checked for row in app.session.displayed_rows] == [True, True, False]
    _press(app, Keys.ControlU)
    _press(app, Keys.Enter)
    assert exits == [CANCELLED]


def test_single_select_commits_highlight() -> None:
    app, exits = _app(multi_select=False)
    _press(app, Keys.Down)
    _press(app, Keys.Down)
    _press(app, Keys.Down)
    assert app._render_rows()[2][1].startswith("  >  A-201")
    _press(app, Keys.Enter)
    assert exits == [Single("201")]


def test_escape_cancels() -> None:
    app, exits = _app()
    _press(app, Keys.Down)
    _press(app, Keys.Tab)
    assert app.session.displayed_rows[0].checked
    _press(app, Keys.Escape)
    assert exits == [CANCELLED]
    assert not app.session.entries[0].checked


def test_empty_filter_result_renders_hint() -> None:
    app, _ = _app()
    app.search.text = "zzz"
    assert app._render_rows() == [("class:empty", "  No matching items\n")]


def test_selector_without_tty_cancels(monkeypatch: pytest.MonkeyPatch) -> None:
    class _NoTTY:
        def isatty(self) -> bool:
            return False

    monkeypatch.setattr(list_picker_module.sys, "stdin", _NoTTY())
    session = SelectionSession(SHEETS, SHEETS)
    assert PromptListSelector().select(session, title="t") is CANCELLED
    assert PromptListSelector().select(SelectionSession([], []), title="t") is CANCELLED
