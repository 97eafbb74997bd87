"""Hands the plan to the user's editor and reads the result back."""

from __future__ import annotations

import os
import shlex
import subprocess
import tempfile
from pathlib import Path
from typing import Callable, Optional

from rebase_editor.errors import ExternalEditorError, TodoFileError
from rebase_editor.input import Character, Input, InputMode, RawEvent
from rebase_editor.plan import PlanLine, RebasePlan, TodoFile
from rebase_editor.process import (
    ExitStatus,
    ModuleContext,
    ProcessModule,
    ProcessResult,
    State,
)
from rebase_editor.runtime import telemetry
from rebase_editor.view import DisplayColor, LineSegment, ViewData, ViewLine

EditorRunner = Callable[[str, str], int]

EMPTY_PLAN_CHOICES: tuple[tuple[str, str], ...] = (
    ("a", "Abort rebase"),
    ("e", "Edit rebase file"),
    ("r", "Keep the original plan"),
)


def run_editor(command: str, path: str) -> int:
    """Run ``command`` on ``path`` and block until it exits."""

    arguments = shlex.split(command)
    if not arguments:
        raise ExternalEditorError("No editor configured", command=command)
    try:
        completed = subprocess.run([*arguments, path], check=False)
    except OSError as exc:
        raise ExternalEditorError(
            f"Unable to run editor '{command}': {exc}", command=command
        ) from exc
    return completed.returncode


class ExternalEditorModule(ProcessModule):
    state = State.EXTERNAL_EDITOR
    input_mode = InputMode.RAW

    def __init__(
        self,
        context: ModuleContext,
        *,
        runner: Optional[EditorRunner] = None,
    ) -> None:
        super().__init__(context)
        self.runner = runner or run_editor
        self.path: Optional[Path] = None
        self.empty = False
        self._original: tuple[PlanLine, ...] = ()

    def activate(
        self, plan: RebasePlan, previous_state: Optional[State]
    ) -> ProcessResult:
        del previous_state
        self.empty = False
        self._original = plan.lines
        if self.path is None:
            handle, name = tempfile.mkstemp(prefix="rebase-editor-", suffix=".todo")
            os.close(handle)
            self.path = Path(name)
        TodoFile(self.path).save(plan.lines)
        return self._edit(plan)

    def deactivate(self) -> None:
        if self.path is not None:
            self.path.unlink(missing_ok=True)
            self.path = None
        self._original = ()
        self.empty = False

    def handle_input(self, plan: RebasePlan, event: RawEvent) -> ProcessResult:
        value = self.resolve(event)
        if value is Input.EXIT:
            return ProcessResult.exit(ExitStatus.ABORT)
        if value is Input.KILL:
            return ProcessResult.exit(ExitStatus.KILL)
        if not self.empty or not isinstance(value, Character):
            return ProcessResult.none()
        if value.char == "a":
            plan.replace_lines((), label="abort")
            return ProcessResult.exit(ExitStatus.ABORT)
        if value.char == "e":
            return self._edit(plan)
        if value.char == "r":
            return ProcessResult.transition(State.LIST)
        return ProcessResult.none()

    def build_view_data(self, plan: RebasePlan) -> ViewData:
        del plan
        if not self.empty:
            return ViewData.build(
                "External editor",
                [ViewLine.of(f"Editing with '{self.context.config.editor}'...")],
            )
        return ViewData.build(
            "External editor",
            [
                ViewLine.of(LineSegment(f" {key} ", DisplayColor.INDICATOR), text)
                for key, text in EMPTY_PLAN_CHOICES
            ],
            leading=(
                ViewLine.of(
                    LineSegment("The rebase file is empty.", DisplayColor.ERROR)
                ),
            ),
        )

    def _edit(self, plan: RebasePlan) -> ProcessResult:
        command = self.context.config.editor
        with telemetry.span(
            "external_editor::run",
            logger_name="rebase_editor.modules.external_editor",
            component="external_editor",
            metadata={"editor": command},
        ) as handle:
            try:
                exit_code = self.runner(command, str(self.path))
            except ExternalEditorError as exc:
                return ProcessResult.failure(str(exc), resume=State.LIST)
            handle.add_metadata("exit_code", exit_code)
            if exit_code != 0:
                return ProcessResult.failure(
                    f"Editor '{command}' exited with status {exit_code}",
                    resume=State.LIST,
                )
            try:
                lines = TodoFile(self.path).load()
            except TodoFileError as exc:
                return ProcessResult.failure(str(exc), resume=State.LIST)

        if not lines:
            self.empty = True
            return ProcessResult.none()
        self.empty = False
        if tuple(lines) != self._original:
            plan.replace_lines(lines, label="external_editor")
        return ProcessResult.transition(State.LIST)


__all__ = ["EMPTY_PLAN_CHOICES", "EditorRunner", "ExternalEditorModule", "run_editor"]
