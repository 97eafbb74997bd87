"""Rebase plan model, undo history, and the list editing engine."""

from .action import COMMIT_ACTIONS, EDITABLE_ACTIONS, Action
from .line import NARROW_HASH_LENGTH, WIDE_HASH_LENGTH, PlanLine
from .state import LineRange, PlanState
from .history import DEFAULT_HISTORY_LIMIT, PlanSnapshot, UndoHistory
from .plan import RebasePlan, Transaction
from .engine import ACTION_INPUTS, PAGE_STEP, ListEditingEngine
from .todo_file import TodoFile, format_line, format_lines, parse_line, parse_lines

__all__ = [
    "Action",
    "COMMIT_ACTIONS",
    "EDITABLE_ACTIONS",
    "NARROW_HASH_LENGTH",
    "WIDE_HASH_LENGTH",
    "PlanLine",
    "LineRange",
    "PlanState",
    "DEFAULT_HISTORY_LIMIT",
    "PlanSnapshot",
    "UndoHistory",
    "RebasePlan",
    "Transaction",
    "ACTION_INPUTS",
    "PAGE_STEP",
    "ListEditingEngine",
    "TodoFile",
    "format_line",
    "format_lines",
    "parse_line",
    "parse_lines",
]
