"""The main screen: the plan as a list, edited through key bindings."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from rebase_editor.input import Input, InputMode, RawEvent
from rebase_editor.keymaps import LIST_NORMAL_HELP, LIST_VISUAL_HELP, help_lines
from rebase_editor.plan import ListEditingEngine, RebasePlan
from rebase_editor.process import (
    ExitStatus,
    ModuleContext,
    ProcessModule,
    ProcessResult,
    State,
)
from rebase_editor.runtime import telemetry
from rebase_editor.view import (
    LineSegment,
    ViewData,
    ViewLine,
    help_view_lines,
    plan_line_segments,
    plan_view_lines,
)

from .line_edit import EditOutcome, LineEdit

TITLE = "Git Interactive Rebase Tool"


class ListModule(ProcessModule):
    state = State.LIST
    input_mode = InputMode.LIST

    def __init__(
        self,
        context: ModuleContext,
        *,
        engine: Optional[ListEditingEngine] = None,
    ) -> None:
        super().__init__(context)
        self.engine = engine or ListEditingEngine()
        self.help_visible = False
        self.editing = False
        self.line_edit = LineEdit()
        self._reactions: Dict[Input, Callable[[RebasePlan], ProcessResult]] = {
            Input.ABORT: lambda plan: ProcessResult.transition(State.CONFIRM_ABORT),
            Input.REBASE: lambda plan: ProcessResult.transition(State.CONFIRM_REBASE),
            Input.FORCE_REBASE: lambda plan: ProcessResult.exit(ExitStatus.GOOD),
            Input.FORCE_ABORT: self._force_abort,
            Input.SHOW_COMMIT: self._show_commit,
            Input.OPEN_IN_EDITOR: self._open_in_editor,
            Input.INSERT_LINE: lambda plan: ProcessResult.transition(State.INSERT),
            Input.EDIT: self._start_edit,
            Input.HELP: self._toggle_help,
            Input.EXIT: lambda plan: ProcessResult.exit(ExitStatus.ABORT),
            Input.KILL: lambda plan: ProcessResult.exit(ExitStatus.KILL),
        }

    def activate(
        self, plan: RebasePlan, previous_state: Optional[State]
    ) -> ProcessResult:
        del plan, previous_state
        self.help_visible = False
        self._stop_edit()
        return ProcessResult.none()

    def handle_input(self, plan: RebasePlan, event: RawEvent) -> ProcessResult:
        if self.editing:
            return self._handle_edit(plan, event)

        value = self.resolve(event)
        if value in (Input.IGNORE, Input.RESIZE):
            return ProcessResult.none()
        if self.help_visible and value not in (Input.EXIT, Input.KILL):
            self.help_visible = False
            return ProcessResult.none()

        reaction = self._reactions.get(value) if isinstance(value, Input) else None
        if reaction is not None:
            return reaction(plan)
        self.engine.apply(plan, value)
        return ProcessResult.none()

    def build_view_data(self, plan: RebasePlan) -> ViewData:
        if self.help_visible:
            return self._help_view(plan)

        width = self.context.width
        full_width = self.context.config.full_width
        lines = plan_view_lines(plan, width, full_width=full_width)
        if self.editing:
            marker, action, *_ = plan_line_segments(
                plan.cursor_line,
                is_cursor=True,
                selected=False,
                width=width,
                full_width=full_width,
            )
            lines[plan.cursor] = ViewLine(
                (marker, action) + self.line_edit.segments(), selected=True
            )
        title = f"{TITLE} (VISUAL)" if plan.state.visual else TITLE
        return ViewData.build(
            title,
            lines,
            cursor_row=plan.cursor,
            horizontal_offset=plan.state.horizontal_offset,
            visual=plan.state.visual,
            editing=self.editing,
        )

    # --- reactions -----------------------------------------------------------
    def _force_abort(self, plan: RebasePlan) -> ProcessResult:
        plan.replace_lines((), label="force_abort")
        return ProcessResult.exit(ExitStatus.ABORT)

    def _show_commit(self, plan: RebasePlan) -> ProcessResult:
        if not plan.cursor_line.has_commit:
            return ProcessResult.none()
        return ProcessResult.transition(State.SHOW_COMMIT)

    def _open_in_editor(self, plan: RebasePlan) -> ProcessResult:
        del plan
        return ProcessResult.transition(State.EXTERNAL_EDITOR)

    def _toggle_help(self, plan: RebasePlan) -> ProcessResult:
        del plan
        self.help_visible = not self.help_visible
        return ProcessResult.none()

    def _start_edit(self, plan: RebasePlan) -> ProcessResult:
        line = plan.cursor_line
        if plan.state.visual or not line.action.is_editable:
            return ProcessResult.none()
        self.editing = True
        self.line_edit.reset(line.content)
        return ProcessResult.none()

    def _stop_edit(self) -> None:
        self.editing = False
        self.line_edit.reset()

    def _handle_edit(self, plan: RebasePlan, event: RawEvent) -> ProcessResult:
        value = self.context.translator.resolve(InputMode.RAW, event)
        if value is Input.KILL:
            return ProcessResult.exit(ExitStatus.KILL)
        if value is Input.EXIT:
            return ProcessResult.exit(ExitStatus.ABORT)
        outcome = self.line_edit.handle(value)
        if outcome is EditOutcome.COMMIT:
            changed = self.engine.edit_content(plan, self.line_edit.content)
            telemetry.record_event(
                "list.edit",
                level="debug",
                data={"line": plan.cursor, "changed": changed},
            )
            self._stop_edit()
        elif outcome is EditOutcome.CANCEL:
            self._stop_edit()
        return ProcessResult.none()

    def _help_view(self, plan: RebasePlan) -> ViewData:
        catalogue = LIST_VISUAL_HELP if plan.state.visual else LIST_NORMAL_HELP
        lines = help_view_lines(help_lines(self.context.key_bindings, catalogue))
        return ViewData.build(
            "Help",
            lines,
            leading=(ViewLine.of(LineSegment(" Key Action", underline=True)),),
            trailing=(ViewLine.of("Press any key to close"),),
        )


__all__ = ["ListModule", "TITLE"]
