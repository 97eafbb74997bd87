from __future__ import annotations

import pytest

from rebase_editor.input import (
    Character,
    FunctionKey,
    Input,
    InputMode,
    InputTranslator,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    MouseEvent,
    MouseEventKind,
    ResizeEvent,
    event_to_token,
    modifiers_to_string,
)
from rebase_editor.keymaps import load_key_bindings


def make_translator(**overrides: object) -> InputTranslator:
    return InputTranslator(load_key_bindings(overrides))  # type: ignore[arg-type]


def key(code, modifiers: KeyModifiers = KeyModifiers.NONE) -> KeyEvent:
    return KeyEvent(code, modifiers)


@pytest.mark.parametrize(
    ("event", "token"),
    [
        (key("a"), "a"),
        (key("A", KeyModifiers.SHIFT), "A"),
        (key("z", KeyModifiers.CONTROL), "Controlz"),
        (key(KeyCode.TAB, KeyModifiers.SHIFT), "ShiftTab"),
        (key("\t", KeyModifiers.SHIFT), "ShiftTab"),
        (key("\n"), "Enter"),
        (key("\x7f"), "Backspace"),
        (
            key(
                KeyCode.DOWN,
                KeyModifiers.SHIFT | KeyModifiers.CONTROL | KeyModifiers.ALT,
            ),
            "ShiftControlAltDown",
        ),
        (key(FunctionKey(5)), "F5"),
        (key(FunctionKey(12), KeyModifiers.ALT), "AltF12"),
        (key(KeyCode.NULL), "Other"),
        (key("c", KeyModifiers.CONTROL), "Kill"),
        (key("d", KeyModifiers.CONTROL), "Exit"),
        (MouseEvent(MouseEventKind.SCROLL_DOWN), "Down"),
        (
            MouseEvent(MouseEventKind.SCROLL_UP, modifiers=KeyModifiers.CONTROL),
            "ControlUp",
        ),
        (ResizeEvent(100, 40), "Resize"),
    ],
)
def test_event_to_token(event, token: str) -> None:
    assert event_to_token(event) == token


def test_modifier_order_is_fixed() -> None:
    everything = KeyModifiers.ALT | KeyModifiers.SHIFT | KeyModifiers.CONTROL
    assert modifiers_to_string(everything) == "ShiftControlAlt"
    assert modifiers_to_string(everything, "x") == "ControlAlt"


def test_kill_binding_in_default_mode() -> None:
    translator = make_translator()
    event = key("c", KeyModifiers.CONTROL)
    assert translator.resolve(InputMode.DEFAULT, event) is Input.KILL


@pytest.mark.parametrize("mode", list(InputMode))
def test_special_codes_win_in_every_mode(mode: InputMode) -> None:
    translator = make_translator()
    assert translator.resolve(mode, key("c", KeyModifiers.CONTROL)) is Input.KILL
    assert translator.resolve(mode, key("d", KeyModifiers.CONTROL)) is Input.EXIT
    assert translator.resolve(mode, ResizeEvent(10, 10)) is Input.RESIZE


@pytest.mark.parametrize("mode", list(InputMode))
@pytest.mark.parametrize(
    "kind",
    [
        MouseEventKind.DOWN,
        MouseEventKind.UP,
        MouseEventKind.DRAG,
        MouseEventKind.MOVED,
    ],
)
def test_unmodeled_mouse_events_are_ignored(
    mode: InputMode, kind: MouseEventKind
) -> None:
    translator = make_translator()
    for modifiers in (KeyModifiers.NONE, KeyModifiers.SHIFT, KeyModifiers.CONTROL):
        event = MouseEvent(kind, modifiers=modifiers)
        assert translator.resolve(mode, event) is Input.IGNORE


def test_confirm_yes_is_case_insensitive() -> None:
    translator = make_translator(confirm_yes=["y"])
    upper = key("Y", KeyModifiers.SHIFT)
    assert translator.resolve(InputMode.CONFIRM, upper) is Input.YES
    assert translator.resolve(InputMode.CONFIRM, key("y")) is Input.YES
    assert translator.resolve(InputMode.CONFIRM, key("x")) is Input.NO
    assert translator.resolve(InputMode.CONFIRM, key(KeyCode.ENTER)) is Input.NO


def test_confirm_standard_inputs_scroll() -> None:
    translator = make_translator()
    assert translator.resolve(InputMode.CONFIRM, key(KeyCode.UP)) is Input.SCROLL_UP
    assert (
        translator.resolve(InputMode.CONFIRM, key(KeyCode.PAGE_DOWN))
        is Input.SCROLL_JUMP_DOWN
    )


def test_default_mode_falls_back_to_raw() -> None:
    translator = make_translator()
    assert translator.resolve(InputMode.DEFAULT, key(KeyCode.HOME)) is Input.SCROLL_TOP
    assert translator.resolve(InputMode.DEFAULT, key(KeyCode.ENTER)) is Input.ENTER
    assert translator.resolve(InputMode.DEFAULT, key("x")) == Character("x")


@pytest.mark.parametrize(
    ("event", "expected"),
    [
        (key(KeyCode.BACKSPACE), Input.BACKSPACE),
        (key(KeyCode.BACK_TAB), Input.BACK_TAB),
        (key(KeyCode.DELETE), Input.DELETE),
        (key(KeyCode.ESC), Input.ESCAPE),
        (key(KeyCode.INSERT), Input.INSERT),
        (key(KeyCode.UP), Input.UP),
        (key(KeyCode.PAGE_UP), Input.PAGE_UP),
        (key(KeyCode.NULL), Input.OTHER),
        (key("q"), Character("q")),
        (key("Q", KeyModifiers.SHIFT), Character("Q")),
        (key("z", KeyModifiers.CONTROL), Input.OTHER),
        (key(FunctionKey(1)), Input.OTHER),
    ],
)
def test_raw_mode(event, expected) -> None:
    translator = make_translator()
    assert translator.resolve(InputMode.RAW, event) == expected


@pytest.mark.parametrize(
    ("event", "expected"),
    [
        (key("q"), Input.ABORT),
        (key("p"), Input.ACTION_PICK),
        (key("b"), Input.ACTION_BREAK),
        (key("E", KeyModifiers.SHIFT), Input.EDIT),
        (key("W", KeyModifiers.SHIFT), Input.FORCE_REBASE),
        (key(KeyCode.DOWN), Input.MOVE_CURSOR_DOWN),
        (key(KeyCode.PAGE_UP), Input.MOVE_CURSOR_PAGE_UP),
        (key("j"), Input.SWAP_SELECTED_DOWN),
        (key(KeyCode.DELETE), Input.DELETE),
        (key("z", KeyModifiers.CONTROL), Input.UNDO),
        (key("y", KeyModifiers.CONTROL), Input.REDO),
        (key("v"), Input.TOGGLE_VISUAL_MODE),
        (key("x"), Input.OTHER),
        (MouseEvent(MouseEventKind.SCROLL_DOWN), Input.MOVE_CURSOR_DOWN),
    ],
)
def test_list_mode_bindings(event, expected: Input) -> None:
    translator = make_translator()
    assert translator.resolve(InputMode.LIST, event) is expected


def test_list_mode_first_binding_in_order_wins() -> None:
    translator = make_translator(undo=["x"], abort=["x"])
    assert translator.resolve(InputMode.LIST, key("x")) is Input.ABORT


def test_list_bindings_are_case_sensitive() -> None:
    translator = make_translator()
    assert translator.resolve(InputMode.LIST, key("Q", KeyModifiers.SHIFT)) is (
        Input.FORCE_ABORT
    )
    assert translator.resolve(InputMode.LIST, key("q")) is Input.ABORT


def test_show_commit_mode() -> None:
    translator = make_translator()
    assert translator.resolve(InputMode.SHOW_COMMIT, key("d")) is Input.SHOW_DIFF
    assert translator.resolve(InputMode.SHOW_COMMIT, key("?")) is Input.HELP
    assert translator.resolve(InputMode.SHOW_COMMIT, key(KeyCode.END)) is (
        Input.SCROLL_BOTTOM
    )
    assert translator.resolve(InputMode.SHOW_COMMIT, key("p")) is Input.OTHER


def test_resolution_is_total_over_a_grid() -> None:
    translator = make_translator()
    codes = [*KeyCode, FunctionKey(3), "a", "Z", "\t", "\n", "\x7f", " "]
    modifier_sets = [
        KeyModifiers.NONE,
        KeyModifiers.SHIFT,
        KeyModifiers.CONTROL | KeyModifiers.ALT,
    ]
    for mode in InputMode:
        for code in codes:
            for modifiers in modifier_sets:
                value = translator.resolve(mode, key(code, modifiers))
                assert isinstance(value, (Input, Character))


def test_key_event_rejects_multi_character_codes() -> None:
    with pytest.raises(ValueError):
        KeyEvent("ab")
