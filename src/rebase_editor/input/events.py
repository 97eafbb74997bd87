"""Raw events produced by the display backend."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Union


class KeyModifiers(IntFlag):
    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4


class KeyCode(str, Enum):
    """Named (non-printable) keys and the token each one canonicalizes to."""

    BACKSPACE = "Backspace"
    BACK_TAB = "BackTab"
    DELETE = "Delete"
    DOWN = "Down"
    END = "End"
    ENTER = "Enter"
    ESC = "Esc"
    HOME = "Home"
    INSERT = "Insert"
    LEFT = "Left"
    NULL = "Other"
    PAGE_DOWN = "PageDown"
    PAGE_UP = "PageUp"
    RIGHT = "Right"
    TAB = "Tab"
    UP = "Up"


@dataclass(frozen=True, slots=True)
class FunctionKey:
    index: int

    @property
    def token(self) -> str:
        return f"F{self.index}"


KeyCodeValue = Union[KeyCode, FunctionKey, str]


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """A key press; ``code`` is a named key, a function key, or one character."""

    code: KeyCodeValue
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if isinstance(self.code, str) and not isinstance(self.code, KeyCode):
            if len(self.code) != 1:
                raise ValueError(
                    f"character key codes must be one character: {self.code!r}"
                )

    @classmethod
    def char(
        cls, character: str, modifiers: KeyModifiers = KeyModifiers.NONE
    ) -> "KeyEvent":
        return cls(code=character, modifiers=modifiers)


class MouseEventKind(str, Enum):
    DOWN = "down"
    UP = "up"
    DRAG = "drag"
    MOVED = "moved"
    SCROLL_DOWN = "scroll_down"
    SCROLL_UP = "scroll_up"


@dataclass(frozen=True, slots=True)
class MouseEvent:
    kind: MouseEventKind
    column: int = 0
    row: int = 0
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True, slots=True)
class ResizeEvent:
    width: int
    height: int


RawEvent = Union[KeyEvent, MouseEvent, ResizeEvent]

__all__ = [
    "FunctionKey",
    "KeyCode",
    "KeyCodeValue",
    "KeyEvent",
    "KeyModifiers",
    "MouseEvent",
    "MouseEventKind",
    "RawEvent",
    "ResizeEvent",
]
