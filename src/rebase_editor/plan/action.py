"""Rebase actions and their textual forms."""

from __future__ import annotations

from enum import Enum


class Action(Enum):
    """What a plan line does; ``NOOP`` only marks an otherwise empty plan."""

    PICK = "pick"
    REWORD = "reword"
    EDIT = "edit"
    SQUASH = "squash"
    FIXUP = "fixup"
    DROP = "drop"
    EXEC = "exec"
    LABEL = "label"
    RESET = "reset"
    MERGE = "merge"
    BREAK = "break"
    NOOP = "noop"

    @property
    def full_name(self) -> str:
        return self.value

    @property
    def abbreviation(self) -> str:
        return _ABBREVIATIONS[self]

    @property
    def is_commit_action(self) -> bool:
        """True for actions that must reference a commit hash."""

        return self in COMMIT_ACTIONS

    @property
    def is_editable(self) -> bool:
        """True for actions whose content is free text the user may edit."""

        return self in EDITABLE_ACTIONS

    @classmethod
    def parse(cls, text: str) -> "Action":
        key = text.strip().lower()
        action = _BY_NAME.get(key)
        if action is None:
            raise ValueError(f"Invalid action: {text!r}")
        return action


_ABBREVIATIONS = {
    Action.PICK: "p",
    Action.REWORD: "r",
    Action.EDIT: "e",
    Action.SQUASH: "s",
    Action.FIXUP: "f",
    Action.DROP: "d",
    Action.EXEC: "x",
    Action.LABEL: "l",
    Action.RESET: "t",
    Action.MERGE: "m",
    Action.BREAK: "b",
    Action.NOOP: "n",
}

_BY_NAME = {action.value: action for action in Action}
_BY_NAME.update({abbr: action for action, abbr in _ABBREVIATIONS.items()})

COMMIT_ACTIONS = frozenset(
    {
        Action.PICK,
        Action.REWORD,
        Action.EDIT,
        Action.SQUASH,
        Action.FIXUP,
        Action.DROP,
    }
)

EDITABLE_ACTIONS = frozenset({Action.EXEC, Action.LABEL, Action.RESET, Action.MERGE})

__all__ = ["Action", "COMMIT_ACTIONS", "EDITABLE_ACTIONS"]
