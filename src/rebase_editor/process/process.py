"""Dispatcher routing events to the active module and applying transitions."""

from __future__ import annotations

from typing import Optional, Protocol

from rebase_editor.input import RawEvent, ResizeEvent
from rebase_editor.plan import RebasePlan
from rebase_editor.runtime import telemetry
from rebase_editor.view import ViewData

from .module import ErrorReport, ModuleContext, ProcessModule
from .modules import Modules
from .result import ExitStatus, ProcessResult
from .state import State

MAX_TRANSITIONS = 16


class EventSource(Protocol):
    """Host side of the loop: blocks for the next event and paints frames.

    ``read_event`` may return ``None`` when it timed out without input.
    """

    def read_event(self) -> Optional[RawEvent]: ...

    def render(self, view_data: ViewData) -> None: ...


class Process:
    """Owns the current ``State`` and mediates every module transition."""

    def __init__(
        self, plan: RebasePlan, modules: Modules, context: ModuleContext
    ) -> None:
        self.plan = plan
        self.modules = modules
        self.context = context
        self._state: Optional[State] = None
        self._exit_status: Optional[ExitStatus] = None

    @property
    def state(self) -> Optional[State]:
        return self._state

    @property
    def exit_status(self) -> Optional[ExitStatus]:
        return self._exit_status

    @property
    def active_module(self) -> ProcessModule:
        if self._state is None:
            raise RuntimeError("Process has not been started")
        return self.modules.get(self._state)

    def start(self) -> ProcessResult:
        if self._state is not None:
            return ProcessResult.none()
        self._state = State.LIST
        with telemetry.span(
            name="process::start",
            component="process",
            metadata={"lines": self.plan.line_count},
        ):
            result = self.active_module.activate(self.plan, None)
            if not self.context.config.fits(self.context.width, self.context.height):
                result = ProcessResult.transition(State.WINDOW_SIZE_ERROR)
            return self._follow(result)

    def handle_event(self, event: RawEvent) -> ProcessResult:
        if self._exit_status is not None:
            return ProcessResult.exit(self._exit_status)
        module = self.active_module
        with telemetry.span(
            name=f"process::{module.state.value}",
            component=True,
            metadata={"state": module.state.value, "event": type(event).__name__},
        ):
            if isinstance(event, ResizeEvent):
                result = self._resize(event)
                if result is not None:
                    return self._follow(result)
            return self._follow(module.handle_input(self.plan, event))

    def build_view_data(self) -> ViewData:
        return self.active_module.build_view_data(self.plan)

    def run(self, source: EventSource) -> ExitStatus:
        """Drive the loop until a module exits; returns the exit status."""

        self.start()
        while self._exit_status is None:
            source.render(self.build_view_data())
            event = source.read_event()
            if event is None:
                continue
            self.handle_event(event)
        return self._exit_status

    # --- internals -----------------------------------------------------------
    def _resize(self, event: ResizeEvent) -> Optional[ProcessResult]:
        self.context.width = event.width
        self.context.height = event.height
        if self._state is State.WINDOW_SIZE_ERROR:
            return None
        if not self.context.config.fits(event.width, event.height):
            return ProcessResult.transition(State.WINDOW_SIZE_ERROR)
        return None

    def _follow(self, result: ProcessResult) -> ProcessResult:
        for _ in range(MAX_TRANSITIONS):
            if result.exit_status is not None:
                self._exit(result.exit_status)
                return result
            if result.error is not None:
                self._report(result.error, result.resume)
                next_state = State.ERROR
            elif result.state is not None and result.state is not self._state:
                next_state = result.state
            else:
                return result
            result = self._transition(next_state)
        message = f"Too many chained transitions (limit {MAX_TRANSITIONS})"
        self._report(message, State.LIST)
        self._transition(State.ERROR)
        return ProcessResult.failure(message)

    def _transition(self, next_state: State) -> ProcessResult:
        previous = self._state
        if previous is not None:
            self.modules.get(previous).deactivate()
        self._state = next_state
        payload = {
            "from": previous.value if previous else None,
            "to": next_state.value,
        }
        telemetry.record_event("process.transition", level="debug", data=payload)
        self.context.bus.emit("process.transition", payload)
        with telemetry.span(
            name=f"module::activate::{next_state.value}",
            component=True,
            metadata={"state": next_state.value},
        ):
            return self.modules.get(next_state).activate(self.plan, previous)

    def _report(self, message: str, resume: Optional[State]) -> None:
        if resume is None:
            resume = self._state
        if resume in (None, State.ERROR, State.WINDOW_SIZE_ERROR):
            resume = State.LIST
        report = ErrorReport(message=message, resume=resume)
        self.context.error = report
        payload = {"message": message, "resume": report.resume.value}
        telemetry.record_event("process.error", level="warning", data=payload)
        self.context.bus.emit("process.error", payload)

    def _exit(self, status: ExitStatus) -> None:
        if self._state is not None:
            self.modules.get(self._state).deactivate()
        self._exit_status = status
        telemetry.record_event("process.exit", data={"status": status.value})
        self.context.bus.emit("process.exit", status)


__all__ = ["EventSource", "MAX_TRANSITIONS", "Process"]
