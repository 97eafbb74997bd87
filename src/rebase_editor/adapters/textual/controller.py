"""Textual-free bridge between host events and the editor process."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from rebase_editor.config import EditorConfig
from rebase_editor.git import CommitLoader
from rebase_editor.input import (
    FunctionKey,
    KeyCode,
    KeyCodeValue,
    KeyEvent,
    KeyModifiers,
    MouseEvent,
    MouseEventKind,
    RawEvent,
    ResizeEvent,
)
from rebase_editor.modules import EditorRunner, build_modules
from rebase_editor.plan import RebasePlan, TodoFile
from rebase_editor.process import (
    ExitStatus,
    ModuleContext,
    Process,
    ProcessResult,
)
from rebase_editor.runtime import telemetry
from rebase_editor.view import ViewData

TEXTUAL_KEYS: Mapping[str, KeyCode] = {
    "backspace": KeyCode.BACKSPACE,
    "delete": KeyCode.DELETE,
    "down": KeyCode.DOWN,
    "end": KeyCode.END,
    "enter": KeyCode.ENTER,
    "escape": KeyCode.ESC,
    "home": KeyCode.HOME,
    "insert": KeyCode.INSERT,
    "left": KeyCode.LEFT,
    "pagedown": KeyCode.PAGE_DOWN,
    "pageup": KeyCode.PAGE_UP,
    "right": KeyCode.RIGHT,
    "tab": KeyCode.TAB,
    "up": KeyCode.UP,
}

_FUNCTION_KEY = re.compile(r"^f(\d{1,2})$")


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def textual_key_to_event(
    key: str, character: Optional[str] = None
) -> Optional[KeyEvent]:
    """Convert a Textual key name such as ``ctrl+shift+down`` to a key event.

    Returns ``None`` for keys with no raw counterpart.
    """

    *modifier_names, base = key.split("+")
    modifiers = KeyModifiers.NONE
    for name in modifier_names:
        if name == "shift":
            modifiers |= KeyModifiers.SHIFT
        elif name == "ctrl":
            modifiers |= KeyModifiers.CONTROL
        elif name in ("alt", "meta"):
            modifiers |= KeyModifiers.ALT

    code: KeyCodeValue
    if base == "tab" and modifiers & KeyModifiers.SHIFT:
        code = KeyCode.BACK_TAB
    elif base in TEXTUAL_KEYS:
        code = TEXTUAL_KEYS[base]
    elif _FUNCTION_KEY.match(base):
        code = FunctionKey(int(base[1:]))
    elif character is not None and len(character) == 1 and character.isprintable():
        code = character
    elif len(base) == 1:
        code = base
    else:
        return None
    return KeyEvent(code, modifiers)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update the host."""

    render: Callable[[ViewData], None]
    exit: Callable[[ExitStatus], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


def create_process(
    plan: RebasePlan,
    config: Optional[EditorConfig] = None,
    *,
    width: int = 80,
    height: int = 24,
    commit_loader: Optional[CommitLoader] = None,
    editor_runner: Optional[EditorRunner] = None,
) -> Process:
    """Build a ``Process`` with the standard module set."""

    context = ModuleContext.create(config, width=width, height=height)
    modules = build_modules(
        context, commit_loader=commit_loader, editor_runner=editor_runner
    )
    return Process(plan, modules, context)


def write_result(todo: TodoFile, plan: RebasePlan, status: ExitStatus) -> int:
    """Persist the outcome: write on success, truncate on abort, keep on kill."""

    if status is ExitStatus.GOOD:
        todo.save(plan.lines)
    elif status is ExitStatus.ABORT:
        todo.write_abort()
    telemetry.record_event(
        "editor.finished",
        data={"status": status.value, "lines": plan.line_count},
    )
    return status.exit_code


class TextualEditorAdapter:
    """Feeds host events into the process and pushes frames back out."""

    def __init__(self, process: Process, hooks: TextualUIHooks) -> None:
        self.process = process
        self.hooks = hooks
        self._subscribe_events()

    def start(self) -> ProcessResult:
        result = self.process.start()
        self._after_result(result)
        return result

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[ProcessResult]:
        event = textual_key_to_event(key, character)
        if event is None:
            self.hooks.log(f"key ignored: {key!r}")
            return None
        return self.dispatch(event)

    def handle_mouse(
        self, kind: MouseEventKind, *, ctrl: bool = False, shift: bool = False
    ) -> ProcessResult:
        modifiers = KeyModifiers.NONE
        if ctrl:
            modifiers |= KeyModifiers.CONTROL
        if shift:
            modifiers |= KeyModifiers.SHIFT
        return self.dispatch(MouseEvent(kind, modifiers=modifiers))

    def handle_resize(self, width: int, height: int) -> ProcessResult:
        return self.dispatch(ResizeEvent(width, height))

    def dispatch(self, event: RawEvent) -> ProcessResult:
        self.hooks.log(f"event -> {event!r}")
        result = self.process.handle_event(event)
        self._after_result(result)
        return result

    def _after_result(self, result: ProcessResult) -> None:
        status = self.process.exit_status
        if status is not None:
            self.hooks.exit(status)
            return
        self.hooks.render(self.process.build_view_data())
        if not result.is_none:
            self.hooks.log(f"result <- {result!r}")

    def _subscribe_events(self) -> None:
        bus = self.process.context.bus
        for event in ("process.transition", "process.error", "process.exit"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self.hooks.log(f"bus -> {name} {payload!r}")
        self.hooks.handle_event(name, payload)


__all__ = [
    "TEXTUAL_KEYS",
    "TextualEditorAdapter",
    "TextualUIHooks",
    "create_process",
    "textual_key_to_event",
    "write_result",
]
