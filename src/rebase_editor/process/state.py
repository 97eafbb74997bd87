"""Identifiers of the editor's process modules."""

from __future__ import annotations

from enum import Enum


class State(Enum):
    CONFIRM_ABORT = "confirm_abort"
    CONFIRM_REBASE = "confirm_rebase"
    ERROR = "error"
    EXTERNAL_EDITOR = "external_editor"
    INSERT = "insert"
    LIST = "list"
    SHOW_COMMIT = "show_commit"
    WINDOW_SIZE_ERROR = "window_size_error"


__all__ = ["State"]
