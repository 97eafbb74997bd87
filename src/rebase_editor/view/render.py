"""Projection of plan lines and help tables into view lines."""

from __future__ import annotations

from typing import Iterable, Mapping

from rebase_editor.keymaps import HelpLine
from rebase_editor.plan import (
    NARROW_HASH_LENGTH,
    WIDE_HASH_LENGTH,
    Action,
    PlanLine,
    RebasePlan,
)

from .view_data import DisplayColor, LineSegment, ViewLine

MINIMUM_FULL_WINDOW_WIDTH = 34

ACTION_COLORS: Mapping[Action, DisplayColor] = {
    Action.BREAK: DisplayColor.ACTION_BREAK,
    Action.DROP: DisplayColor.ACTION_DROP,
    Action.EDIT: DisplayColor.ACTION_EDIT,
    Action.EXEC: DisplayColor.ACTION_EXEC,
    Action.FIXUP: DisplayColor.ACTION_FIXUP,
    Action.LABEL: DisplayColor.ACTION_LABEL,
    Action.MERGE: DisplayColor.ACTION_MERGE,
    Action.PICK: DisplayColor.ACTION_PICK,
    Action.RESET: DisplayColor.ACTION_RESET,
    Action.REWORD: DisplayColor.ACTION_REWORD,
    Action.SQUASH: DisplayColor.ACTION_SQUASH,
    Action.NOOP: DisplayColor.NORMAL,
}


def plan_line_segments(
    line: PlanLine,
    *,
    is_cursor: bool,
    selected: bool,
    width: int,
    full_width: int = MINIMUM_FULL_WINDOW_WIDTH,
) -> tuple[LineSegment, ...]:
    """Segments for one plan row: marker, action, short hash, content.

    Narrow views use the action abbreviation and a three character hash.
    The stored hash is never modified.
    """

    wide = width >= full_width
    marked = is_cursor or selected
    if wide:
        marker = " > " if marked else "   "
        action = f"{line.action.full_name:6} "
        hash_length = WIDE_HASH_LENGTH
    else:
        marker = ">" if marked else " "
        action = f"{line.action.abbreviation:1} "
        hash_length = NARROW_HASH_LENGTH

    segments = [
        LineSegment(marker, DisplayColor.INDICATOR, dim=selected and not is_cursor),
        LineSegment(action, ACTION_COLORS[line.action]),
    ]
    if line.action.is_commit_action:
        segments.append(LineSegment(f"{line.short_hash(hash_length):{hash_length}} "))
    segments.append(LineSegment(line.content))
    return tuple(segments)


def plan_view_lines(
    plan: RebasePlan, width: int, *, full_width: int = MINIMUM_FULL_WINDOW_WIDTH
) -> list[ViewLine]:
    cursor = plan.cursor
    visual = plan.state.visual
    lines = []
    for index, line in enumerate(plan):
        selected = visual and plan.is_selected(index)
        lines.append(
            ViewLine(
                plan_line_segments(
                    line,
                    is_cursor=index == cursor,
                    selected=selected,
                    width=width,
                    full_width=full_width,
                ),
                selected=index == cursor or selected,
            )
        )
    return lines


def help_view_lines(entries: Iterable[HelpLine]) -> list[ViewLine]:
    """Two-column help table: bound keys, then their description."""

    rows = [(", ".join(keys), description) for keys, description in entries]
    key_width = max((len(keys) for keys, _ in rows), default=0)
    return [
        ViewLine.of(
            LineSegment(f" {keys:{key_width}}", DisplayColor.INDICATOR),
            f" | {description}",
        )
        for keys, description in rows
    ]


__all__ = [
    "ACTION_COLORS",
    "MINIMUM_FULL_WINDOW_WIDTH",
    "help_view_lines",
    "plan_line_segments",
    "plan_view_lines",
]
