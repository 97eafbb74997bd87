"""Screens that report a problem and wait for the user to move on."""

from __future__ import annotations

from typing import Optional

from rebase_editor.input import Input, InputMode, RawEvent
from rebase_editor.plan import RebasePlan
from rebase_editor.process import (
    ErrorReport,
    ExitStatus,
    ModuleContext,
    ProcessModule,
    ProcessResult,
    State,
)
from rebase_editor.view import DisplayColor, LineSegment, ViewData, ViewLine


class ErrorModule(ProcessModule):
    """Shows ``context.error``; any key returns to the recorded resume state."""

    state = State.ERROR
    input_mode = InputMode.DEFAULT

    def __init__(self, context: ModuleContext) -> None:
        super().__init__(context)
        self.report: Optional[ErrorReport] = None

    def activate(
        self, plan: RebasePlan, previous_state: Optional[State]
    ) -> ProcessResult:
        del plan
        # A report survives re-entry after a window size interruption.
        if self.context.error is not None:
            self.report = self.context.error
            self.context.error = None
        elif self.report is None:
            self.report = ErrorReport(
                "Unknown error", resume=previous_state or State.LIST
            )
        return ProcessResult.none()

    def handle_input(self, plan: RebasePlan, event: RawEvent) -> ProcessResult:
        del plan
        value = self.resolve(event)
        if value is Input.KILL:
            return ProcessResult.exit(ExitStatus.KILL)
        if value in (Input.RESIZE, Input.IGNORE):
            return ProcessResult.none()
        resume = self.report.resume if self.report else State.LIST
        return ProcessResult.transition(resume)

    def build_view_data(self, plan: RebasePlan) -> ViewData:
        del plan
        message = self.report.message if self.report else ""
        return ViewData.build(
            "Error",
            [
                ViewLine.of(LineSegment(text, DisplayColor.ERROR))
                for text in message.splitlines() or [""]
            ],
            trailing=(ViewLine.of("Press any key to continue"),),
        )


class WindowSizeErrorModule(ProcessModule):
    """Blocks the editor while the view is smaller than the configured minimum."""

    state = State.WINDOW_SIZE_ERROR
    input_mode = InputMode.DEFAULT

    def __init__(self, context: ModuleContext) -> None:
        super().__init__(context)
        self.resume = State.LIST

    def activate(
        self, plan: RebasePlan, previous_state: Optional[State]
    ) -> ProcessResult:
        del plan
        self.resume = previous_state or State.LIST
        return ProcessResult.none()

    def handle_input(self, plan: RebasePlan, event: RawEvent) -> ProcessResult:
        del plan
        value = self.resolve(event)
        if value is Input.EXIT:
            return ProcessResult.exit(ExitStatus.ABORT)
        if value is Input.KILL:
            return ProcessResult.exit(ExitStatus.KILL)
        if value is Input.RESIZE and self.context.config.fits(
            self.context.width, self.context.height
        ):
            return ProcessResult.transition(self.resume)
        return ProcessResult.none()

    def build_view_data(self, plan: RebasePlan) -> ViewData:
        del plan
        config = self.context.config
        if self.context.width >= len("Window too small, increase size"):
            text = "Window too small, increase size"
        else:
            text = "Size!"
        return ViewData.build(
            "",
            [ViewLine.of(LineSegment(text, DisplayColor.ERROR))],
            minimum_width=config.minimum_width,
            minimum_height=config.minimum_height,
        )


__all__ = ["ErrorModule", "WindowSizeErrorModule"]
