"""Semantic inputs handed to process modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Input(Enum):
    # meta actions
    ABORT = "abort"
    ACTION_BREAK = "action_break"
    ACTION_DROP = "action_drop"
    ACTION_EDIT = "action_edit"
    ACTION_FIXUP = "action_fixup"
    ACTION_PICK = "action_pick"
    ACTION_REWORD = "action_reword"
    ACTION_SQUASH = "action_squash"
    EDIT = "edit"
    EXIT = "exit"
    FORCE_ABORT = "force_abort"
    FORCE_REBASE = "force_rebase"
    HELP = "help"
    INSERT_LINE = "insert_line"
    KILL = "kill"
    MOVE_CURSOR_DOWN = "move_cursor_down"
    MOVE_CURSOR_END = "move_cursor_end"
    MOVE_CURSOR_HOME = "move_cursor_home"
    MOVE_CURSOR_LEFT = "move_cursor_left"
    MOVE_CURSOR_PAGE_DOWN = "move_cursor_page_down"
    MOVE_CURSOR_PAGE_UP = "move_cursor_page_up"
    MOVE_CURSOR_RIGHT = "move_cursor_right"
    MOVE_CURSOR_UP = "move_cursor_up"
    NO = "no"
    OPEN_IN_EDITOR = "open_in_editor"
    OTHER = "other"
    REBASE = "rebase"
    REDO = "redo"
    RESIZE = "resize"
    SCROLL_BOTTOM = "scroll_bottom"
    SCROLL_DOWN = "scroll_down"
    SCROLL_JUMP_DOWN = "scroll_jump_down"
    SCROLL_JUMP_UP = "scroll_jump_up"
    SCROLL_LEFT = "scroll_left"
    SCROLL_RIGHT = "scroll_right"
    SCROLL_TOP = "scroll_top"
    SCROLL_UP = "scroll_up"
    SHOW_COMMIT = "show_commit"
    SHOW_DIFF = "show_diff"
    SWAP_SELECTED_DOWN = "swap_selected_down"
    SWAP_SELECTED_UP = "swap_selected_up"
    TOGGLE_VISUAL_MODE = "toggle_visual_mode"
    UNDO = "undo"
    YES = "yes"

    # raw values
    BACKSPACE = "backspace"
    BACK_TAB = "back_tab"
    DELETE = "delete"
    DOWN = "down"
    END = "end"
    ENTER = "enter"
    ESCAPE = "escape"
    HOME = "home"
    INSERT = "insert"
    LEFT = "left"
    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    RIGHT = "right"
    TAB = "tab"
    UP = "up"

    # swallowed events
    IGNORE = "ignore"


@dataclass(frozen=True, slots=True)
class Character:
    """A printable character typed while a module reads raw input."""

    char: str


InputValue = Union[Input, Character]

__all__ = ["Character", "Input", "InputValue"]
