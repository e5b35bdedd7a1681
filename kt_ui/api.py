"""Public API surface for kt_ui."""

from kt_ui.flows.errors import FlowCancelled, UIFlowError
from kt_ui.flows.selection import (
    outcome_values,
    select_from_list,
    select_revisions,
    select_sheets,
)
from kt_ui.flows.transmittal import (
    TransmittalResult,
    export_with_retry,
    run_document_transmittal,
)
from kt_ui.tui.system.facade import TUI
from kt_ui.tui.system.headless import HeadlessUI, ScriptedSelection
from kt_ui.tui.system.models import TableModel
from kt_ui.tui.system.protocols import UI
from kt_ui.wiring.dependencies import UIContext

__all__ = [
    "FlowCancelled",
    "HeadlessUI",
    "ScriptedSelection",
    "TUI",
    "TableModel",
    "TransmittalResult",
    "UI",
    "UIContext",
    "UIFlowError",
    "export_with_retry",
    "outcome_values",
    "run_document_transmittal",
    "select_from_list",
    "select_revisions",
    "select_sheets",
]
