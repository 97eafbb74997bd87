"""Cursor, selection anchor, and scroll state for a rebase plan."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

LineRange = Tuple[int, int]  # inclusive (start, end)


@dataclass(frozen=True, slots=True)
class PlanState:
    """Where the user is in the plan.

    ``anchor`` is set only while visual mode is active; together with
    ``cursor`` it spans the selected range.
    """

    cursor: int = 0
    anchor: Optional[int] = None
    horizontal_offset: int = 0

    @property
    def visual(self) -> bool:
        return self.anchor is not None

    @property
    def selection(self) -> LineRange:
        if self.anchor is None:
            return (self.cursor, self.cursor)
        return (min(self.cursor, self.anchor), max(self.cursor, self.anchor))

    def clamped(self, line_count: int) -> "PlanState":
        last = max(0, line_count - 1)
        anchor = None if self.anchor is None else max(0, min(self.anchor, last))
        return replace(
            self,
            cursor=max(0, min(self.cursor, last)),
            anchor=anchor,
            horizontal_offset=max(0, self.horizontal_offset),
        )


__all__ = ["LineRange", "PlanState"]
