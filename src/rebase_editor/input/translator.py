"""Mode-aware translation of raw events into semantic inputs."""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional

from rebase_editor.keymaps import LIST_BINDING_ORDER, KeyBindings

from .events import (
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
from .inputs import Character, Input, InputValue

IGNORE_TOKEN = "Ignore"

# Characters that arrive as printable codes but behave like named keys.
_CHARACTER_KEYS: Mapping[str, str] = {
    "\t": KeyCode.TAB.value,
    "\n": KeyCode.ENTER.value,
    "\x7f": KeyCode.BACKSPACE.value,
}

_SPECIAL_CODES: Mapping[str, str] = {
    "Controlc": "Kill",
    "Controld": "Exit",
}

STANDARD_INPUTS: Mapping[str, Input] = {
    "Up": Input.SCROLL_UP,
    "Down": Input.SCROLL_DOWN,
    "Left": Input.SCROLL_LEFT,
    "Right": Input.SCROLL_RIGHT,
    "PageUp": Input.SCROLL_JUMP_UP,
    "PageDown": Input.SCROLL_JUMP_DOWN,
    "Home": Input.SCROLL_TOP,
    "End": Input.SCROLL_BOTTOM,
    "Exit": Input.EXIT,
    "Kill": Input.KILL,
    "Resize": Input.RESIZE,
}

# Mode-independent tokens that List mode honours ahead of its bindings.
LIST_STANDARD_INPUTS: Mapping[str, Input] = {
    "Exit": Input.EXIT,
    "Kill": Input.KILL,
    "Resize": Input.RESIZE,
}

RAW_INPUTS: Mapping[str, Input] = {
    "Backspace": Input.BACKSPACE,
    "BackTab": Input.BACK_TAB,
    "Delete": Input.DELETE,
    "Down": Input.DOWN,
    "End": Input.END,
    "Enter": Input.ENTER,
    "Esc": Input.ESCAPE,
    "Exit": Input.EXIT,
    "Home": Input.HOME,
    "Insert": Input.INSERT,
    "Kill": Input.KILL,
    "Left": Input.LEFT,
    "Other": Input.OTHER,
    "PageDown": Input.PAGE_DOWN,
    "PageUp": Input.PAGE_UP,
    "Resize": Input.RESIZE,
    "Right": Input.RIGHT,
    "Tab": Input.TAB,
    "Up": Input.UP,
}

LIST_INPUTS: Mapping[str, Input] = {
    "abort": Input.ABORT,
    "action_break": Input.ACTION_BREAK,
    "action_drop": Input.ACTION_DROP,
    "action_edit": Input.ACTION_EDIT,
    "action_fixup": Input.ACTION_FIXUP,
    "action_pick": Input.ACTION_PICK,
    "action_reword": Input.ACTION_REWORD,
    "action_squash": Input.ACTION_SQUASH,
    "edit": Input.EDIT,
    "force_abort": Input.FORCE_ABORT,
    "force_rebase": Input.FORCE_REBASE,
    "help": Input.HELP,
    "insert_line": Input.INSERT_LINE,
    "move_down": Input.MOVE_CURSOR_DOWN,
    "move_down_step": Input.MOVE_CURSOR_PAGE_DOWN,
    "move_end": Input.MOVE_CURSOR_END,
    "move_home": Input.MOVE_CURSOR_HOME,
    "move_left": Input.MOVE_CURSOR_LEFT,
    "move_right": Input.MOVE_CURSOR_RIGHT,
    "move_selection_down": Input.SWAP_SELECTED_DOWN,
    "move_selection_up": Input.SWAP_SELECTED_UP,
    "move_up": Input.MOVE_CURSOR_UP,
    "move_up_step": Input.MOVE_CURSOR_PAGE_UP,
    "open_in_external_editor": Input.OPEN_IN_EDITOR,
    "rebase": Input.REBASE,
    "redo": Input.REDO,
    "remove_line": Input.DELETE,
    "show_commit": Input.SHOW_COMMIT,
    "toggle_visual_mode": Input.TOGGLE_VISUAL_MODE,
    "undo": Input.UNDO,
}

SHOW_COMMIT_INPUTS: tuple[tuple[str, Input], ...] = (
    ("help", Input.HELP),
    ("show_diff", Input.SHOW_DIFF),
)


class InputMode(Enum):
    CONFIRM = "confirm"
    DEFAULT = "default"
    LIST = "list"
    RAW = "raw"
    SHOW_COMMIT = "show_commit"


def modifiers_to_string(
    modifiers: KeyModifiers, code: Optional[KeyCodeValue] = None
) -> str:
    """Render modifiers as ``Shift``/``Control``/``Alt`` prefixes, in that order.

    ``Shift`` is dropped for printable characters since it is already part of
    the character itself; tab, newline and delete keep it.
    """

    parts: list[str] = []
    if modifiers & KeyModifiers.SHIFT:
        if not _is_printable_code(code):
            parts.append("Shift")
    if modifiers & KeyModifiers.CONTROL:
        parts.append("Control")
    if modifiers & KeyModifiers.ALT:
        parts.append("Alt")
    return "".join(parts)


def _is_printable_code(code: Optional[KeyCodeValue]) -> bool:
    if code is None or isinstance(code, (KeyCode, FunctionKey)):
        return False
    return code not in _CHARACTER_KEYS


def _code_token(code: KeyCodeValue) -> str:
    if isinstance(code, KeyCode):
        return code.value
    if isinstance(code, FunctionKey):
        return code.token
    return _CHARACTER_KEYS.get(code, code)


def event_to_token(event: RawEvent) -> str:
    """Canonicalize ``event`` into the string form bindings are written in."""

    if isinstance(event, KeyEvent):
        token = modifiers_to_string(event.modifiers, event.code) + _code_token(
            event.code
        )
        return _SPECIAL_CODES.get(token, token)
    if isinstance(event, MouseEvent):
        if event.kind is MouseEventKind.SCROLL_DOWN:
            return modifiers_to_string(event.modifiers) + "Down"
        if event.kind is MouseEventKind.SCROLL_UP:
            return modifiers_to_string(event.modifiers) + "Up"
        return IGNORE_TOKEN
    if isinstance(event, ResizeEvent):
        return "Resize"
    return IGNORE_TOKEN


class InputTranslator:
    """Resolves raw events to ``Input`` values under the active key bindings.

    Resolution is total: unknown events come back as ``Input.OTHER`` (or
    ``Input.NO`` in confirm mode), never as an error.
    """

    def __init__(self, key_bindings: KeyBindings) -> None:
        self.key_bindings = key_bindings

    def resolve(self, mode: InputMode, event: RawEvent) -> InputValue:
        token = event_to_token(event)
        if token == IGNORE_TOKEN:
            return Input.IGNORE

        if mode is InputMode.CONFIRM:
            return self._confirm_input(token)
        if mode is InputMode.DEFAULT:
            return self._default_input(token)
        if mode is InputMode.LIST:
            return self._list_input(token)
        if mode is InputMode.RAW:
            return self._raw_input(token)
        if mode is InputMode.SHOW_COMMIT:
            return self._show_commit_input(token)
        return Input.OTHER

    def _confirm_input(self, token: str) -> InputValue:
        standard = STANDARD_INPUTS.get(token)
        if standard is not None:
            return standard
        if self.key_bindings.contains("confirm_yes", token):
            return Input.YES
        return Input.NO

    def _default_input(self, token: str) -> InputValue:
        standard = STANDARD_INPUTS.get(token)
        if standard is not None:
            return standard
        return self._raw_input(token)

    def _list_input(self, token: str) -> InputValue:
        standard = LIST_STANDARD_INPUTS.get(token)
        if standard is not None:
            return standard
        for name in LIST_BINDING_ORDER:
            if self.key_bindings.contains(name, token):
                return LIST_INPUTS[name]
        return Input.OTHER

    @staticmethod
    def _raw_input(token: str) -> InputValue:
        named = RAW_INPUTS.get(token)
        if named is not None:
            return named
        if len(token) == 1:
            return Character(token)
        return Input.OTHER

    def _show_commit_input(self, token: str) -> InputValue:
        standard = STANDARD_INPUTS.get(token)
        if standard is not None:
            return standard
        for name, value in SHOW_COMMIT_INPUTS:
            if self.key_bindings.contains(name, token):
                return value
        return Input.OTHER


__all__ = [
    "IGNORE_TOKEN",
    "InputMode",
    "InputTranslator",
    "LIST_INPUTS",
    "RAW_INPUTS",
    "STANDARD_INPUTS",
    "event_to_token",
    "modifiers_to_string",
]
