"""Display and export keys for sheets and revisions."""

from __future__ import annotations

from kt_app.project import Revision, Sheet

INVALID_CHARS = frozenset('/?<>\\:*|"^')
MISSING_KEY = "???"
NO_REVISION = "-"


def make_string_valid(text: str, replace_char: str | None = None) -> str:
    """Drop (or replace) characters that are not allowed in file names."""
    replacement = replace_char or ""
    return "".join(replacement if char in INVALID_CHARS else char for char in text)


def sheet_key(sheet: Sheet | None, include_id: bool = False) -> str:
    if sheet is None:
        return MISSING_KEY
    key = f"{sheet.number}: {sheet.name}"
    if include_id:
        return f"{key} [{sheet.id}]"
    return key


def revision_key(revision: Revision | None, include_id: bool = False) -> str:
    if revision is None:
        return MISSING_KEY
    key = f"{revision.sequence}: {revision.date} - {revision.description}"
    if include_id:
        return f"{key} [{revision.id}]"
    return key


def current_revision_number(sheet: Sheet) -> str:
    if sheet.current_revision is None:
        return NO_REVISION
    return sheet.revision_number(sheet.current_revision) or NO_REVISION


def export_key(sheet: Sheet | None) -> str:
    """File-safe key ``"<number> (<current revision>) - <name>"``."""
    if sheet is None:
        return "ERROR (-) - ERROR"
    key = f"{sheet.number} ({current_revision_number(sheet)}) - {sheet.name}"
    return make_string_valid(key)
