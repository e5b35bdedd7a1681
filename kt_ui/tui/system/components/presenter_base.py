from __future__ import annotations

from typing import Protocol

from kt_common.errors import KTError
from kt_ui.tui.system.protocols import Presenter

CANCELLED_MESSAGE = "Task cancelled."


class PresenterSink(Protocol):
    def emit(self, level: str, message: str) -> None: ...


def describe_failure(error: KTError) -> str:
    """Message for a typed failure, naming the file it concerns when known."""
    message = str(error)
    path = error.context.get("path")
    if path and str(path) not in message:
        return f"{message} ({path})"
    return message


class PresenterBase(Presenter):
    """Level-based presenter writing through a sink."""

    def __init__(self, sink: PresenterSink) -> None:
        self._sink = sink

    def info(self, message: str) -> None:
        self._sink.emit("info", message)

    def warning(self, message: str) -> None:
        self._sink.emit("warning", message)

    def error(self, message: str) -> None:
        self._sink.emit("error", message)

    def success(self, message: str) -> None:
        self._sink.emit("success", message)

    def failure(self, error: KTError) -> None:
        self._sink.emit("error", describe_failure(error))

    def cancelled(self) -> None:
        self._sink.emit("warning", CANCELLED_MESSAGE)
