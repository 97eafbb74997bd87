"""The rebase plan: ordered lines, cursor state, and recorded transactions."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import replace
from typing import ContextManager, Iterable, Iterator, List, Optional, Sequence

from rebase_editor.runtime import telemetry

from .action import Action
from .history import PlanSnapshot, UndoHistory
from .line import PlanLine
from .state import LineRange, PlanState


def _normalize_lines(lines: Iterable[PlanLine]) -> List[PlanLine]:
    result = [line for line in lines if line.action is not Action.NOOP]
    return result or [PlanLine.noop()]


class RebasePlan:
    """Mutable plan of lines plus the undo history backing it.

    The plan is never empty: removing the last real line leaves a single
    ``NOOP`` sentinel. Cursor and anchor are clamped after every change.
    """

    def __init__(
        self,
        lines: Iterable[PlanLine] = (),
        *,
        state: Optional[PlanState] = None,
        history: Optional[UndoHistory] = None,
        name: str = "git-rebase-todo",
    ) -> None:
        self.name = name
        self._lines: List[PlanLine] = _normalize_lines(lines)
        self._state = (state or PlanState()).clamped(len(self._lines))
        self.history = history if history is not None else UndoHistory()

    # --- reading ------------------------------------------------------------
    @property
    def lines(self) -> tuple[PlanLine, ...]:
        return tuple(self._lines)

    @property
    def state(self) -> PlanState:
        return self._state

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def is_noop(self) -> bool:
        return len(self._lines) == 1 and self._lines[0].action is Action.NOOP

    @property
    def cursor(self) -> int:
        return self._state.cursor

    @property
    def cursor_line(self) -> PlanLine:
        return self._lines[self._state.cursor]

    @property
    def selection(self) -> LineRange:
        return self._state.selection

    def get_line(self, index: int) -> PlanLine:
        return self._lines[index]

    def is_selected(self, index: int) -> bool:
        start, end = self.selection
        return start <= index <= end

    def __iter__(self) -> Iterator[PlanLine]:
        return iter(tuple(self._lines))

    def __len__(self) -> int:
        return len(self._lines)

    def snapshot(self, label: str = "snapshot") -> PlanSnapshot:
        return PlanSnapshot(label=label, lines=tuple(self._lines), state=self._state)

    # --- unrecorded state changes ------------------------------------------
    def set_state(self, state: PlanState) -> None:
        self._state = state.clamped(len(self._lines))

    def set_cursor(self, index: int) -> None:
        self.set_state(replace(self._state, cursor=index))

    # --- recorded changes ---------------------------------------------------
    def transaction(self, label: str) -> "Transaction":
        return Transaction(self, label)

    def replace_lines(
        self, lines: Sequence[PlanLine], *, label: str = "replace_lines"
    ) -> None:
        with self.transaction(label) as tx:
            tx.apply(lines, PlanState(cursor=0))

    def undo(self) -> bool:
        previous = self.history.undo(self.snapshot())
        if previous is None:
            return False
        self._restore(previous)
        telemetry.record_event(
            "plan.undo", level="debug", data={"label": previous.label}
        )
        return True

    def redo(self) -> bool:
        following = self.history.redo(self.snapshot())
        if following is None:
            return False
        self._restore(following)
        telemetry.record_event(
            "plan.redo", level="debug", data={"label": following.label}
        )
        return True

    def _restore(self, snapshot: PlanSnapshot) -> None:
        self._lines = list(snapshot.lines)
        self._state = snapshot.state.clamped(len(self._lines))

    def _write(self, lines: Iterable[PlanLine], state: PlanState) -> None:
        self._lines = _normalize_lines(lines)
        self._state = state.clamped(len(self._lines))


class Transaction(AbstractContextManager["Transaction"]):
    """Groups plan writes into one undoable edit.

    The pre-image is pushed onto the history on exit only if something was
    applied; an exception rolls the plan back to the pre-image.
    """

    def __init__(self, plan: RebasePlan, label: str) -> None:
        self.plan = plan
        self.label = label
        self._before: Optional[PlanSnapshot] = None
        self._span_cm: Optional[ContextManager[object]] = None
        self._applied = False

    def __enter__(self) -> "Transaction":
        self._before = self.plan.snapshot(self.label)
        self._span_cm = telemetry.span(
            name=f"plan::{self.label}",
            component=True,
            metadata={"plan": self.plan.name},
        )
        self._span_cm.__enter__()
        return self

    @property
    def lines(self) -> List[PlanLine]:
        return list(self.plan.lines)

    def apply(self, lines: Iterable[PlanLine], state: PlanState) -> None:
        self.plan._write(lines, state)
        self._applied = True

    def __exit__(self, exc_type, exc, tb) -> bool:
        before = self._before
        if before is not None:
            if exc_type is not None:
                self.plan._restore(before)
            elif self._applied and (
                before.lines != self.plan.lines or before.state != self.plan.state
            ):
                self.plan.history.push(before)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["RebasePlan", "Transaction"]
