"""Undo/redo history of whole-plan snapshots."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

from .line import PlanLine
from .state import PlanState

DEFAULT_HISTORY_LIMIT = 5000


@dataclass(frozen=True, slots=True)
class PlanSnapshot:
    label: str
    lines: tuple[PlanLine, ...]
    state: PlanState


class UndoHistory:
    """Two-stack history; pushing a new edit discards everything redoable."""

    def __init__(self, *, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        self._undo: List[PlanSnapshot] = []
        self._redo: List[PlanSnapshot] = []
        self._limit = limit

    def push(self, snapshot: PlanSnapshot) -> None:
        self._undo.append(snapshot)
        if len(self._undo) > self._limit:
            del self._undo[0]
        self._redo.clear()

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo(self, current: PlanSnapshot) -> Optional[PlanSnapshot]:
        """Pop the latest pre-image; ``current`` becomes redoable."""

        if not self._undo:
            return None
        previous = self._undo.pop()
        self._redo.append(replace(current, label=previous.label))
        return previous

    def redo(self, current: PlanSnapshot) -> Optional[PlanSnapshot]:
        if not self._redo:
            return None
        following = self._redo.pop()
        self._undo.append(replace(current, label=following.label))
        return following

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def __len__(self) -> int:
        return len(self._undo)

    def redo_len(self) -> int:
        return len(self._redo)


__all__ = ["DEFAULT_HISTORY_LIMIT", "PlanSnapshot", "UndoHistory"]
