"""Editing operations the list screen applies to a rebase plan.

Every operation is total: requests that make no sense at the current
position (swapping past an edge, assigning a commit action to a line with
no commit, deleting from an empty plan) are absorbed as no-ops and reported
with a ``False`` return value instead of raising.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, Mapping

from rebase_editor.input import Input, InputValue
from rebase_editor.runtime import telemetry

from .action import Action
from .line import PlanLine
from .plan import RebasePlan
from .state import PlanState

PAGE_STEP = 5

ACTION_INPUTS: Mapping[Input, Action] = {
    Input.ACTION_PICK: Action.PICK,
    Input.ACTION_REWORD: Action.REWORD,
    Input.ACTION_EDIT: Action.EDIT,
    Input.ACTION_SQUASH: Action.SQUASH,
    Input.ACTION_FIXUP: Action.FIXUP,
    Input.ACTION_DROP: Action.DROP,
}


def _rejected(operation: str, plan: RebasePlan) -> bool:
    telemetry.record_event(
        "plan.rejected",
        level="debug",
        data={"operation": operation, "cursor": plan.cursor},
    )
    return False


class ListEditingEngine:
    """Applies list-mode inputs to a ``RebasePlan``.

    Structural edits go through ``RebasePlan.transaction`` so each one is a
    single undo step; cursor motion and visual-mode toggling are not recorded.
    """

    def __init__(self, *, page_step: int = PAGE_STEP) -> None:
        self.page_step = page_step
        self._handlers: Dict[Input, Callable[[RebasePlan], bool]] = {
            Input.MOVE_CURSOR_UP: lambda plan: self.move_cursor(plan, -1),
            Input.MOVE_CURSOR_DOWN: lambda plan: self.move_cursor(plan, 1),
            Input.MOVE_CURSOR_PAGE_UP: self.move_cursor_page_up,
            Input.MOVE_CURSOR_PAGE_DOWN: self.move_cursor_page_down,
            Input.MOVE_CURSOR_HOME: self.move_cursor_home,
            Input.MOVE_CURSOR_END: self.move_cursor_end,
            Input.MOVE_CURSOR_LEFT: lambda plan: self.scroll(plan, -1),
            Input.MOVE_CURSOR_RIGHT: lambda plan: self.scroll(plan, 1),
            Input.TOGGLE_VISUAL_MODE: self.toggle_visual_mode,
            Input.ACTION_BREAK: self.toggle_break,
            Input.SWAP_SELECTED_UP: self.swap_selected_up,
            Input.SWAP_SELECTED_DOWN: self.swap_selected_down,
            Input.DELETE: self.delete_selected,
            Input.UNDO: self.undo,
            Input.REDO: self.redo,
        }
        for value, action in ACTION_INPUTS.items():
            self._handlers[value] = lambda plan, action=action: self.set_action(
                plan, action
            )

    def handles(self, value: InputValue) -> bool:
        return isinstance(value, Input) and value in self._handlers

    def apply(self, plan: RebasePlan, value: InputValue) -> bool:
        """Run the operation bound to ``value``; unknown inputs are no-ops."""

        if not isinstance(value, Input):
            return False
        handler = self._handlers.get(value)
        if handler is None:
            return False
        return handler(plan)

    # --- cursor & selection --------------------------------------------------
    def move_cursor(self, plan: RebasePlan, delta: int) -> bool:
        before = plan.cursor
        plan.set_cursor(before + delta)
        return plan.cursor != before

    def move_cursor_page_up(self, plan: RebasePlan) -> bool:
        return self.move_cursor(plan, -self.page_step)

    def move_cursor_page_down(self, plan: RebasePlan) -> bool:
        return self.move_cursor(plan, self.page_step)

    def move_cursor_home(self, plan: RebasePlan) -> bool:
        return self.move_cursor(plan, -plan.cursor)

    def move_cursor_end(self, plan: RebasePlan) -> bool:
        return self.move_cursor(plan, plan.line_count - 1 - plan.cursor)

    def scroll(self, plan: RebasePlan, delta: int) -> bool:
        limit = max(len(line.hash) + len(line.content) + 1 for line in plan)
        before = plan.state.horizontal_offset
        offset = max(0, min(before + delta, limit))
        plan.set_state(replace(plan.state, horizontal_offset=offset))
        return offset != before

    def toggle_visual_mode(self, plan: RebasePlan) -> bool:
        anchor = None if plan.state.visual else plan.cursor
        plan.set_state(replace(plan.state, anchor=anchor))
        return True

    # --- structural edits ----------------------------------------------------
    def set_action(self, plan: RebasePlan, action: Action) -> bool:
        start, end = plan.selection
        with plan.transaction(f"set_action:{action.value}") as tx:
            lines = tx.lines
            changed = False
            for index in range(start, end + 1):
                line = lines[index]
                if action.is_commit_action and not line.has_commit:
                    continue
                if line.action is action:
                    continue
                lines[index] = line.with_action(action)
                changed = True
            if not changed:
                return _rejected("set_action", plan)
            tx.apply(lines, plan.state)
        return True

    def toggle_break(self, plan: RebasePlan) -> bool:
        if plan.state.visual:
            return _rejected("toggle_break", plan)
        cursor = plan.cursor
        with plan.transaction("toggle_break") as tx:
            lines = tx.lines
            if lines[cursor].action is Action.BREAK:
                del lines[cursor]
            elif plan.is_noop:
                lines = [PlanLine.break_line()]
            else:
                lines.insert(cursor + 1, PlanLine.break_line())
            tx.apply(lines, plan.state)
        return True

    def swap_selected_up(self, plan: RebasePlan) -> bool:
        start, end = plan.selection
        if start == 0:
            return _rejected("swap_selected_up", plan)
        with plan.transaction("swap_selected_up") as tx:
            lines = tx.lines
            moved = lines[start : end + 1]
            lines[start - 1 : end + 1] = moved + [lines[start - 1]]
            tx.apply(lines, _shift(plan, -1))
        return True

    def swap_selected_down(self, plan: RebasePlan) -> bool:
        start, end = plan.selection
        if end >= plan.line_count - 1:
            return _rejected("swap_selected_down", plan)
        with plan.transaction("swap_selected_down") as tx:
            lines = tx.lines
            moved = lines[start : end + 1]
            lines[start : end + 2] = [lines[end + 1]] + moved
            tx.apply(lines, _shift(plan, 1))
        return True

    def insert_line(self, plan: RebasePlan, line: PlanLine) -> bool:
        """Insert ``line`` after the cursor and move the cursor onto it."""

        with plan.transaction("insert_line") as tx:
            if plan.is_noop:
                tx.apply([line], replace(plan.state, cursor=0, anchor=None))
            else:
                lines = tx.lines
                position = plan.cursor + 1
                lines.insert(position, line)
                tx.apply(lines, replace(plan.state, cursor=position, anchor=None))
        return True

    def delete_selected(self, plan: RebasePlan) -> bool:
        if plan.is_noop:
            return _rejected("delete_selected", plan)
        start, end = plan.selection
        with plan.transaction("delete_selected") as tx:
            lines = tx.lines
            del lines[start : end + 1]
            tx.apply(lines, replace(plan.state, cursor=start, anchor=None))
        return True

    def edit_content(self, plan: RebasePlan, content: str) -> bool:
        """Replace the cursor line's content; blank content is rejected."""

        line = plan.cursor_line
        content = content.strip()
        if not line.action.is_editable or not content or line.content == content:
            return _rejected("edit_content", plan)
        with plan.transaction("edit_content") as tx:
            lines = tx.lines
            lines[plan.cursor] = line.with_content(content)
            tx.apply(lines, plan.state)
        return True

    # --- history -----------------------------------------------------------
    def undo(self, plan: RebasePlan) -> bool:
        return plan.undo() or _rejected("undo", plan)

    def redo(self, plan: RebasePlan) -> bool:
        return plan.redo() or _rejected("redo", plan)


def _shift(plan: RebasePlan, delta: int) -> PlanState:
    state = plan.state
    anchor = None if state.anchor is None else state.anchor + delta
    return replace(state, cursor=state.cursor + delta, anchor=anchor)


__all__ = ["ACTION_INPUTS", "ListEditingEngine", "PAGE_STEP"]
