"""Raw event model and the mode-aware input translator."""

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
from .translator import (
    InputMode,
    InputTranslator,
    event_to_token,
    modifiers_to_string,
)

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
    "Character",
    "Input",
    "InputValue",
    "InputMode",
    "InputTranslator",
    "event_to_token",
    "modifiers_to_string",
]
