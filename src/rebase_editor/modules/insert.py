"""Two-step prompt for adding a line: pick an action, then type its content."""

from __future__ import annotations

from typing import Mapping, Optional

from rebase_editor.input import Character, Input, InputMode, RawEvent
from rebase_editor.plan import Action, ListEditingEngine, PlanLine, RebasePlan
from rebase_editor.process import (
    ExitStatus,
    ModuleContext,
    ProcessModule,
    ProcessResult,
    State,
)
from rebase_editor.view import DisplayColor, LineSegment, ViewData, ViewLine

from .line_edit import EditOutcome, LineEdit

INSERT_ACTIONS: Mapping[str, Action] = {
    "e": Action.EXEC,
    "p": Action.PICK,
    "l": Action.LABEL,
    "r": Action.RESET,
    "m": Action.MERGE,
}

ACTION_HINTS: tuple[tuple[str, str], ...] = (
    ("e", "exec <command>"),
    ("p", "pick <hash>"),
    ("l", "label <label>"),
    ("r", "reset <label>"),
    ("m", "merge [-C <commit> | -c <commit>] <label> [# <oneline>]"),
    ("q", "Cancel add line"),
)


def build_line(action: Action, content: str) -> PlanLine:
    """Turn typed content into a plan line; ``pick`` takes the hash first."""

    if action.is_commit_action:
        commit, _, rest = content.partition(" ")
        return PlanLine(action, commit, rest.strip())
    return PlanLine(action, "", content)


class InsertModule(ProcessModule):
    state = State.INSERT
    input_mode = InputMode.RAW

    def __init__(
        self,
        context: ModuleContext,
        *,
        engine: Optional[ListEditingEngine] = None,
    ) -> None:
        super().__init__(context)
        self.engine = engine or ListEditingEngine()
        self.action: Optional[Action] = None
        self.line_edit = LineEdit()

    def activate(
        self, plan: RebasePlan, previous_state: Optional[State]
    ) -> ProcessResult:
        del plan, previous_state
        self.action = None
        self.line_edit.reset()
        return ProcessResult.none()

    def handle_input(self, plan: RebasePlan, event: RawEvent) -> ProcessResult:
        value = self.resolve(event)
        if value is Input.EXIT:
            return ProcessResult.exit(ExitStatus.ABORT)
        if value is Input.KILL:
            return ProcessResult.exit(ExitStatus.KILL)
        if self.action is None:
            return self._select_action(value)

        outcome = self.line_edit.handle(value)
        if outcome is EditOutcome.CANCEL:
            return ProcessResult.transition(State.LIST)
        if outcome is EditOutcome.COMMIT:
            content = self.line_edit.content.strip()
            if content:
                self.engine.insert_line(plan, build_line(self.action, content))
            return ProcessResult.transition(State.LIST)
        return ProcessResult.none()

    def _select_action(self, value: object) -> ProcessResult:
        if value is Input.ESCAPE:
            return ProcessResult.transition(State.LIST)
        if isinstance(value, Character):
            if value.char == "q":
                return ProcessResult.transition(State.LIST)
            action = INSERT_ACTIONS.get(value.char)
            if action is not None:
                self.action = action
                self.line_edit.reset()
        return ProcessResult.none()

    def build_view_data(self, plan: RebasePlan) -> ViewData:
        del plan
        if self.action is None:
            return ViewData.build(
                "Add line",
                [
                    ViewLine.of(LineSegment(f" {key} ", DisplayColor.INDICATOR), hint)
                    for key, hint in ACTION_HINTS
                ],
                leading=(ViewLine.of("Select the type of line to insert:"),),
            )
        return ViewData.build(
            "Add line",
            [
                ViewLine.of(
                    LineSegment(f"{self.action.full_name} ", DisplayColor.INDICATOR),
                    *self.line_edit.segments(),
                )
            ],
            leading=(
                ViewLine.of(
                    "Enter contents of the new line. "
                    "Empty content cancels creation of a new line."
                ),
            ),
        )


__all__ = ["ACTION_HINTS", "INSERT_ACTIONS", "InsertModule", "build_line"]
