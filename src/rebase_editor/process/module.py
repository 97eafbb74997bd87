"""Base class and shared services for process modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from rebase_editor.config import EditorConfig
from rebase_editor.input import InputMode, InputTranslator, InputValue, RawEvent
from rebase_editor.keymaps import KeyBindings
from rebase_editor.plan import RebasePlan
from rebase_editor.view import ViewData

from .result import ProcessResult
from .state import State


class ProcessBus:
    """Minimal event bus letting modules and hosts exchange signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


@dataclass(frozen=True, slots=True)
class ErrorReport:
    message: str
    resume: State = State.LIST


@dataclass(slots=True)
class ModuleContext:
    """Shared services every module can access.

    ``width``/``height`` track the latest view size; ``error`` holds the
    report the error screen shows next.
    """

    config: EditorConfig
    translator: InputTranslator
    bus: ProcessBus = field(default_factory=ProcessBus)
    width: int = 80
    height: int = 24
    error: Optional[ErrorReport] = None

    @classmethod
    def create(
        cls,
        config: Optional[EditorConfig] = None,
        *,
        width: int = 80,
        height: int = 24,
        bus: Optional[ProcessBus] = None,
    ) -> "ModuleContext":
        config = config or EditorConfig()
        return cls(
            config=config,
            translator=InputTranslator(config.key_bindings),
            bus=bus or ProcessBus(),
            width=width,
            height=height,
        )

    @property
    def key_bindings(self) -> KeyBindings:
        return self.config.key_bindings

    @property
    def view_height(self) -> int:
        """Rows left for scrolling content below the title bar."""

        return max(1, self.height - 1)


class ProcessModule:
    """Base class every screen of the editor inherits from.

    A module is created once and reused across activations; it must drop
    any reference to the plan in ``deactivate``.
    """

    state: State
    input_mode: InputMode = InputMode.DEFAULT

    def __init__(self, context: ModuleContext) -> None:
        self.context = context

    def activate(
        self, plan: RebasePlan, previous_state: Optional[State]
    ) -> ProcessResult:  # pragma: no cover - default no-op
        del plan, previous_state
        return ProcessResult.none()

    def deactivate(self) -> None:  # pragma: no cover - default no-op
        return None

    def resolve(self, event: RawEvent) -> InputValue:
        return self.context.translator.resolve(self.input_mode, event)

    def handle_input(
        self, plan: RebasePlan, event: RawEvent
    ) -> ProcessResult:  # pragma: no cover - abstract override
        raise NotImplementedError

    def build_view_data(
        self, plan: RebasePlan
    ) -> ViewData:  # pragma: no cover - abstract override
        raise NotImplementedError


__all__ = ["ErrorReport", "ModuleContext", "ProcessBus", "ProcessModule"]
