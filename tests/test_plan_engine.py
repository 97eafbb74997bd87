from __future__ import annotations

from typing import List

import pytest

from rebase_editor.input import Input, InputMode, InputTranslator, KeyCode, KeyEvent
from rebase_editor.keymaps import load_key_bindings
from rebase_editor.plan import Action, ListEditingEngine, PlanLine, RebasePlan


def make_lines(count: int) -> List[PlanLine]:
    return [
        PlanLine(Action.PICK, f"aaaaaaa{index}", f"commit {index}")
        for index in range(count)
    ]


def make_plan(count: int = 5) -> RebasePlan:
    return RebasePlan(make_lines(count))


def make_engine() -> ListEditingEngine:
    return ListEditingEngine()


def contents(plan: RebasePlan) -> List[str]:
    return [line.content for line in plan]


def test_swap_first_line_up_is_noop() -> None:
    plan = make_plan()
    engine = make_engine()
    before = plan.lines

    assert engine.swap_selected_up(plan) is False
    assert plan.lines == before
    assert plan.cursor == 0
    assert len(plan.history) == 0


def test_swap_last_line_down_is_noop() -> None:
    plan = make_plan()
    engine = make_engine()
    engine.move_cursor_end(plan)
    before = plan.lines

    assert engine.swap_selected_down(plan) is False
    assert plan.lines == before
    assert plan.cursor == 4


def test_swap_moves_line_and_cursor() -> None:
    plan = make_plan()
    engine = make_engine()
    engine.move_cursor(plan, 2)

    assert engine.swap_selected_up(plan)
    assert contents(plan)[:3] == ["commit 0", "commit 2", "commit 1"]
    assert plan.cursor == 1


def test_swap_visual_range_moves_as_unit() -> None:
    plan = make_plan()
    engine = make_engine()
    engine.move_cursor(plan, 1)
    engine.toggle_visual_mode(plan)
    engine.move_cursor(plan, 1)

    assert engine.swap_selected_down(plan)
    assert contents(plan) == [
        "commit 0",
        "commit 3",
        "commit 1",
        "commit 2",
        "commit 4",
    ]
    assert plan.state.anchor == 2
    assert plan.cursor == 3
    assert plan.selection == (2, 3)


def test_visual_range_symmetry() -> None:
    plan = make_plan(8)
    engine = make_engine()
    engine.move_cursor(plan, 2)
    engine.toggle_visual_mode(plan)
    engine.move_cursor(plan, 3)
    assert plan.selection == (2, 5)

    engine.move_cursor(plan, -5)
    assert plan.cursor == 0
    assert plan.selection == (0, 2)


def test_leaving_visual_mode_clears_anchor() -> None:
    plan = make_plan()
    engine = make_engine()
    engine.toggle_visual_mode(plan)
    engine.toggle_visual_mode(plan)
    assert plan.state.anchor is None
    assert plan.selection == (0, 0)


def test_cursor_motion_clamps() -> None:
    plan = make_plan(12)
    engine = make_engine()

    assert engine.move_cursor(plan, -1) is False
    engine.move_cursor_page_down(plan)
    assert plan.cursor == 5
    engine.move_cursor_page_down(plan)
    engine.move_cursor_page_down(plan)
    assert plan.cursor == 11
    engine.move_cursor_home(plan)
    assert plan.cursor == 0
    engine.move_cursor_end(plan)
    assert plan.cursor == 11


def test_horizontal_scroll_is_bounded() -> None:
    plan = make_plan(1)
    engine = make_engine()
    assert engine.scroll(plan, -1) is False
    for _ in range(40):
        engine.scroll(plan, 1)
    assert plan.state.horizontal_offset == len("aaaaaaa0") + len("commit 0") + 1


def test_commit_action_guard() -> None:
    plan = RebasePlan([PlanLine(Action.EXEC, "", "make test")])
    engine = make_engine()

    assert engine.set_action(plan, Action.PICK) is False
    assert plan.cursor_line.action is Action.EXEC
    assert len(plan.history) == 0


def test_set_action_over_visual_range_skips_hashless_lines() -> None:
    lines = make_lines(3)
    lines.insert(1, PlanLine(Action.EXEC, "", "make test"))
    plan = RebasePlan(lines)
    engine = make_engine()
    engine.toggle_visual_mode(plan)
    engine.move_cursor_end(plan)

    assert engine.set_action(plan, Action.FIXUP)
    assert [line.action for line in plan] == [
        Action.FIXUP,
        Action.EXEC,
        Action.FIXUP,
        Action.FIXUP,
    ]
    assert len(plan.history) == 1


def test_toggle_break_inserts_and_removes() -> None:
    plan = make_plan(3)
    engine = make_engine()

    assert engine.toggle_break(plan)
    assert plan.get_line(1).action is Action.BREAK
    assert plan.cursor == 0

    engine.move_cursor(plan, 1)
    assert engine.toggle_break(plan)
    assert [line.action for line in plan] == [Action.PICK] * 3


def test_toggle_break_ignored_in_visual_mode() -> None:
    plan = make_plan(3)
    engine = make_engine()
    engine.toggle_visual_mode(plan)
    assert engine.toggle_break(plan) is False
    assert plan.line_count == 3


def test_insert_line_after_cursor() -> None:
    plan = make_plan(3)
    engine = make_engine()
    engine.move_cursor(plan, 1)

    assert engine.insert_line(plan, PlanLine(Action.EXEC, "", "make"))
    assert plan.get_line(2) == PlanLine(Action.EXEC, "", "make")
    assert plan.cursor == 2


def test_insert_line_replaces_noop_sentinel() -> None:
    plan = RebasePlan()
    engine = make_engine()
    assert plan.is_noop

    engine.insert_line(plan, PlanLine(Action.LABEL, "", "base"))
    assert plan.lines == (PlanLine(Action.LABEL, "", "base"),)
    assert plan.cursor == 0


def test_delete_only_line_leaves_noop() -> None:
    plan = make_plan(1)
    engine = make_engine()

    assert engine.delete_selected(plan)
    assert plan.line_count == 1
    assert plan.cursor_line.action is Action.NOOP
    assert engine.delete_selected(plan) is False


def test_delete_visual_range_clamps_cursor() -> None:
    plan = make_plan(5)
    engine = make_engine()
    engine.move_cursor_end(plan)
    engine.toggle_visual_mode(plan)
    engine.move_cursor(plan, -1)

    assert engine.delete_selected(plan)
    assert contents(plan) == ["commit 0", "commit 1", "commit 2"]
    assert plan.cursor == 2
    assert plan.state.anchor is None


def test_edit_content_only_for_editable_lines() -> None:
    plan = RebasePlan(
        [PlanLine(Action.PICK, "abc", "x"), PlanLine(Action.EXEC, "", "ls")]
    )
    engine = make_engine()
    assert engine.edit_content(plan, "changed") is False

    engine.move_cursor(plan, 1)
    assert engine.edit_content(plan, "make test")
    assert plan.cursor_line.content == "make test"


@pytest.mark.parametrize("content", ["", "   "])
def test_edit_content_rejects_blank_content(content: str) -> None:
    plan = RebasePlan([PlanLine(Action.EXEC, "", "make test")])
    engine = make_engine()

    assert engine.edit_content(plan, content) is False
    assert plan.cursor_line.content == "make test"
    assert len(plan.history) == 0


def test_undo_redo_inverse_law() -> None:
    plan = make_plan(6)
    engine = make_engine()
    original = plan.snapshot()

    engine.set_action(plan, Action.SQUASH)
    engine.move_cursor(plan, 2)
    engine.swap_selected_up(plan)
    engine.toggle_visual_mode(plan)
    engine.move_cursor(plan, 2)
    engine.delete_selected(plan)
    engine.toggle_break(plan)
    edited = plan.snapshot()
    assert len(plan.history) == 4

    for _ in range(4):
        assert engine.undo(plan)
    assert plan.lines == original.lines
    assert plan.state == original.state
    assert engine.undo(plan) is False

    for _ in range(4):
        assert engine.redo(plan)
    assert plan.lines == edited.lines
    assert plan.state == edited.state
    assert engine.redo(plan) is False


def test_undo_restores_selection() -> None:
    plan = make_plan(5)
    engine = make_engine()
    engine.move_cursor(plan, 1)
    engine.toggle_visual_mode(plan)
    engine.move_cursor(plan, 2)
    engine.delete_selected(plan)

    engine.undo(plan)
    assert plan.line_count == 5
    assert plan.state.anchor == 1
    assert plan.cursor == 3


def test_new_edit_clears_redo() -> None:
    plan = make_plan(3)
    engine = make_engine()
    engine.set_action(plan, Action.DROP)
    engine.undo(plan)
    assert plan.history.can_redo()

    engine.set_action(plan, Action.EDIT)
    assert not plan.history.can_redo()
    assert engine.redo(plan) is False


def test_apply_routes_resolved_inputs() -> None:
    plan = make_plan(3)
    engine = make_engine()
    translator = InputTranslator(load_key_bindings())

    for event in (KeyEvent(KeyCode.DOWN), KeyEvent("k"), KeyEvent("d")):
        engine.apply(plan, translator.resolve(InputMode.LIST, event))

    assert plan.cursor == 0
    assert plan.get_line(0).action is Action.DROP
    assert contents(plan)[:2] == ["commit 1", "commit 0"]
    assert engine.handles(Input.UNDO)
    assert not engine.handles(Input.ABORT)
    assert engine.apply(plan, Input.OTHER) is False
