"""Yes/no prompts shown before aborting or writing the rebase."""

from __future__ import annotations

from rebase_editor.input import Input, InputMode, RawEvent
from rebase_editor.plan import RebasePlan
from rebase_editor.process import ExitStatus, ProcessModule, ProcessResult, State
from rebase_editor.view import DisplayColor, LineSegment, ViewData, ViewLine

_PASSIVE_INPUTS = frozenset(
    {
        Input.IGNORE,
        Input.RESIZE,
        Input.SCROLL_BOTTOM,
        Input.SCROLL_DOWN,
        Input.SCROLL_JUMP_DOWN,
        Input.SCROLL_JUMP_UP,
        Input.SCROLL_LEFT,
        Input.SCROLL_RIGHT,
        Input.SCROLL_TOP,
        Input.SCROLL_UP,
    }
)


class ConfirmModule(ProcessModule):
    input_mode = InputMode.CONFIRM
    prompt: str = ""

    def confirmed(self, plan: RebasePlan) -> ProcessResult:
        raise NotImplementedError

    def handle_input(self, plan: RebasePlan, event: RawEvent) -> ProcessResult:
        value = self.resolve(event)
        if value is Input.EXIT:
            return ProcessResult.exit(ExitStatus.ABORT)
        if value is Input.KILL:
            return ProcessResult.exit(ExitStatus.KILL)
        if value in _PASSIVE_INPUTS:
            return ProcessResult.none()
        if value is Input.YES:
            return self.confirmed(plan)
        return ProcessResult.transition(State.LIST)

    def build_view_data(self, plan: RebasePlan) -> ViewData:
        del plan
        bindings = self.context.key_bindings
        yes = "/".join(sorted(bindings.get("confirm_yes")))
        no = "/".join(sorted(bindings.get("confirm_no")))
        return ViewData.build(
            "Confirm",
            [
                ViewLine.of(
                    LineSegment(f"{self.prompt} ", DisplayColor.INDICATOR),
                    f"({yes}/{no})? ",
                )
            ],
        )


class ConfirmAbortModule(ConfirmModule):
    state = State.CONFIRM_ABORT
    prompt = "Are you sure you want to abort"

    def confirmed(self, plan: RebasePlan) -> ProcessResult:
        plan.replace_lines((), label="abort")
        return ProcessResult.exit(ExitStatus.ABORT)


class ConfirmRebaseModule(ConfirmModule):
    state = State.CONFIRM_REBASE
    prompt = "Are you sure you want to rebase"

    def confirmed(self, plan: RebasePlan) -> ProcessResult:
        del plan
        return ProcessResult.exit(ExitStatus.GOOD)


__all__ = ["ConfirmAbortModule", "ConfirmModule", "ConfirmRebaseModule"]
