"""The editor's screens and the factory wiring them into a registry."""

from __future__ import annotations

from typing import Optional

from rebase_editor.git import CommitLoader
from rebase_editor.plan import ListEditingEngine
from rebase_editor.process import Modules, ModuleContext, State

from .confirm import ConfirmAbortModule, ConfirmModule, ConfirmRebaseModule
from .error import ErrorModule, WindowSizeErrorModule
from .external_editor import EditorRunner, ExternalEditorModule, run_editor
from .insert import InsertModule
from .line_edit import EditOutcome, LineEdit
from .list_module import ListModule
from .show_commit import ShowCommitModule


def build_modules(
    context: ModuleContext,
    *,
    commit_loader: Optional[CommitLoader] = None,
    editor_runner: Optional[EditorRunner] = None,
) -> Modules:
    """Create one module per state; list and insert share the editing engine."""

    engine = ListEditingEngine()
    return Modules(
        {
            State.LIST: ListModule(context, engine=engine),
            State.SHOW_COMMIT: ShowCommitModule(context, loader=commit_loader),
            State.CONFIRM_ABORT: ConfirmAbortModule(context),
            State.CONFIRM_REBASE: ConfirmRebaseModule(context),
            State.INSERT: InsertModule(context, engine=engine),
            State.EXTERNAL_EDITOR: ExternalEditorModule(context, runner=editor_runner),
            State.ERROR: ErrorModule(context),
            State.WINDOW_SIZE_ERROR: WindowSizeErrorModule(context),
        }
    )


__all__ = [
    "ConfirmAbortModule",
    "ConfirmModule",
    "ConfirmRebaseModule",
    "EditOutcome",
    "EditorRunner",
    "ErrorModule",
    "ExternalEditorModule",
    "InsertModule",
    "LineEdit",
    "ListModule",
    "ShowCommitModule",
    "WindowSizeErrorModule",
    "build_modules",
    "run_editor",
]
