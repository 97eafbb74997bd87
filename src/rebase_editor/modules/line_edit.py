"""Single-line text entry used for inline edits and the insert screen."""

from __future__ import annotations

from enum import Enum

from rebase_editor.input import Character, Input, InputValue
from rebase_editor.view import DisplayColor, LineSegment


class EditOutcome(Enum):
    CONTINUE = "continue"
    COMMIT = "commit"
    CANCEL = "cancel"


class LineEdit:
    """Editable string plus a cursor measured in characters."""

    def __init__(self, content: str = "") -> None:
        self.content = content
        self.cursor = len(content)

    def reset(self, content: str = "") -> None:
        self.content = content
        self.cursor = len(content)

    def handle(self, value: InputValue) -> EditOutcome:
        if isinstance(value, Character):
            self.content = (
                self.content[: self.cursor] + value.char + self.content[self.cursor :]
            )
            self.cursor += 1
        elif value is Input.BACKSPACE:
            if self.cursor > 0:
                self.content = (
                    self.content[: self.cursor - 1] + self.content[self.cursor :]
                )
                self.cursor -= 1
        elif value is Input.DELETE:
            self.content = self.content[: self.cursor] + self.content[self.cursor + 1 :]
        elif value is Input.LEFT:
            self.cursor = max(0, self.cursor - 1)
        elif value is Input.RIGHT:
            self.cursor = min(len(self.content), self.cursor + 1)
        elif value is Input.HOME:
            self.cursor = 0
        elif value is Input.END:
            self.cursor = len(self.content)
        elif value is Input.ENTER:
            return EditOutcome.COMMIT
        elif value is Input.ESCAPE:
            return EditOutcome.CANCEL
        return EditOutcome.CONTINUE

    def segments(self) -> tuple[LineSegment, ...]:
        """Content with the character under the cursor underlined."""

        before = self.content[: self.cursor]
        under = self.content[self.cursor : self.cursor + 1] or " "
        after = self.content[self.cursor + 1 :]
        return (
            LineSegment(before),
            LineSegment(under, DisplayColor.INDICATOR, underline=True),
            LineSegment(after),
        )


__all__ = ["EditOutcome", "LineEdit"]
