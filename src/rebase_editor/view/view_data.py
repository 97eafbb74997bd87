"""Renderable model produced by process modules.

Modules never draw anything themselves; they describe a screen as styled
segments and leave the host to paint it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional


class DisplayColor(Enum):
    NORMAL = "normal"
    INDICATOR = "indicator"
    ACTION_BREAK = "action_break"
    ACTION_DROP = "action_drop"
    ACTION_EDIT = "action_edit"
    ACTION_EXEC = "action_exec"
    ACTION_FIXUP = "action_fixup"
    ACTION_LABEL = "action_label"
    ACTION_MERGE = "action_merge"
    ACTION_PICK = "action_pick"
    ACTION_RESET = "action_reset"
    ACTION_REWORD = "action_reword"
    ACTION_SQUASH = "action_squash"
    DIFF_ADD = "diff_add"
    DIFF_CHANGE = "diff_change"
    DIFF_CONTEXT = "diff_context"
    DIFF_REMOVE = "diff_remove"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class LineSegment:
    text: str
    color: DisplayColor = DisplayColor.NORMAL
    dim: bool = False
    reverse: bool = False
    underline: bool = False


@dataclass(frozen=True, slots=True)
class ViewLine:
    """One display row; ``selected`` rows are highlighted by the host."""

    segments: tuple[LineSegment, ...]
    selected: bool = False

    @classmethod
    def of(
        cls, *segments: LineSegment | str, selected: bool = False
    ) -> "ViewLine":
        return cls(
            tuple(
                LineSegment(part) if isinstance(part, str) else part
                for part in segments
            ),
            selected=selected,
        )

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)


@dataclass(frozen=True, slots=True)
class ViewData:
    """Everything the host needs to paint one frame.

    ``leading`` and ``trailing`` rows are pinned; ``lines`` scroll, starting
    at ``vertical_offset`` and shifted left by ``horizontal_offset`` columns.
    ``cursor_row`` (an index into ``lines``) must stay visible.
    """

    title: str = ""
    leading: tuple[ViewLine, ...] = ()
    lines: tuple[ViewLine, ...] = ()
    trailing: tuple[ViewLine, ...] = ()
    cursor_row: Optional[int] = None
    vertical_offset: int = 0
    horizontal_offset: int = 0
    metadata: dict[str, object] = field(default_factory=dict, compare=False)

    @classmethod
    def build(
        cls,
        title: str,
        lines: Iterable[ViewLine],
        *,
        leading: Iterable[ViewLine] = (),
        trailing: Iterable[ViewLine] = (),
        cursor_row: Optional[int] = None,
        vertical_offset: int = 0,
        horizontal_offset: int = 0,
        **metadata: object,
    ) -> "ViewData":
        return cls(
            title=title,
            leading=tuple(leading),
            lines=tuple(lines),
            trailing=tuple(trailing),
            cursor_row=cursor_row,
            vertical_offset=vertical_offset,
            horizontal_offset=horizontal_offset,
            metadata=dict(metadata),
        )

    def all_lines(self) -> tuple[ViewLine, ...]:
        return self.leading + self.lines + self.trailing

    def text_lines(self) -> list[str]:
        return [line.text for line in self.all_lines()]


__all__ = ["DisplayColor", "LineSegment", "ViewData", "ViewLine"]
