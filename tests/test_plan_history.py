from __future__ import annotations

import pytest

from rebase_editor.plan import (
    Action,
    PlanLine,
    PlanSnapshot,
    PlanState,
    RebasePlan,
    UndoHistory,
)


def make_snapshot(label: str, count: int = 1) -> PlanSnapshot:
    lines = tuple(PlanLine(Action.PICK, f"h{index}", label) for index in range(count))
    return PlanSnapshot(label=label, lines=lines, state=PlanState())


def test_history_push_undo_redo() -> None:
    history = UndoHistory()
    history.push(make_snapshot("one"))
    history.push(make_snapshot("two"))

    previous = history.undo(make_snapshot("current"))
    assert previous is not None and previous.label == "two"
    assert history.redo_len() == 1

    following = history.redo(make_snapshot("restored"))
    assert following is not None
    assert following.lines == make_snapshot("current").lines
    assert len(history) == 2


def test_history_push_clears_redo() -> None:
    history = UndoHistory()
    history.push(make_snapshot("one"))
    history.undo(make_snapshot("current"))
    history.push(make_snapshot("other"))
    assert not history.can_redo()


def test_history_limit_drops_oldest() -> None:
    history = UndoHistory(limit=2)
    for label in ("a", "b", "c"):
        history.push(make_snapshot(label))
    assert len(history) == 2
    assert history.undo(make_snapshot("now")).label == "c"
    assert history.undo(make_snapshot("now")).label == "b"
    assert history.undo(make_snapshot("now")) is None


def test_history_rejects_non_positive_limit() -> None:
    with pytest.raises(ValueError):
        UndoHistory(limit=0)


def test_plan_drops_noop_lines_and_keeps_sentinel() -> None:
    plan = RebasePlan([PlanLine.noop(), PlanLine(Action.BREAK)])
    assert plan.lines == (PlanLine(Action.BREAK),)
    assert RebasePlan().is_noop
    assert RebasePlan().line_count == 1


def test_plan_clamps_initial_state() -> None:
    plan = RebasePlan(
        [PlanLine(Action.PICK, "a"), PlanLine(Action.PICK, "b")],
        state=PlanState(cursor=9, anchor=-3, horizontal_offset=-1),
    )
    assert plan.cursor == 1
    assert plan.state.anchor == 0
    assert plan.state.horizontal_offset == 0


def test_transaction_records_one_step() -> None:
    plan = RebasePlan([PlanLine(Action.PICK, "a"), PlanLine(Action.PICK, "b")])
    with plan.transaction("reverse") as tx:
        tx.apply(list(reversed(tx.lines)), plan.state)
    assert [line.hash for line in plan] == ["b", "a"]
    assert len(plan.history) == 1

    assert plan.undo()
    assert [line.hash for line in plan] == ["a", "b"]


def test_transaction_without_changes_is_not_recorded() -> None:
    plan = RebasePlan([PlanLine(Action.PICK, "a")])
    with plan.transaction("nothing") as tx:
        tx.apply(tx.lines, plan.state)
    assert len(plan.history) == 0


def test_transaction_rolls_back_on_error() -> None:
    plan = RebasePlan([PlanLine(Action.PICK, "a"), PlanLine(Action.PICK, "b")])
    with pytest.raises(RuntimeError):
        with plan.transaction("broken") as tx:
            tx.apply([], PlanState())
            raise RuntimeError("boom")
    assert [line.hash for line in plan] == ["a", "b"]
    assert len(plan.history) == 0


def test_replace_lines_is_undoable() -> None:
    plan = RebasePlan([PlanLine(Action.PICK, "a")])
    plan.set_cursor(0)
    plan.replace_lines([PlanLine(Action.EXEC, "", "ls"), PlanLine(Action.BREAK)])
    assert plan.line_count == 2
    plan.replace_lines(())
    assert plan.is_noop

    plan.undo()
    plan.undo()
    assert plan.lines == (PlanLine(Action.PICK, "a"),)


def test_action_parse_and_abbreviations() -> None:
    assert Action.parse("p") is Action.PICK
    assert Action.parse("FIXUP") is Action.FIXUP
    assert Action.parse("t") is Action.RESET
    assert Action.MERGE.abbreviation == "m"
    assert Action.EXEC.is_editable and not Action.EXEC.is_commit_action
    with pytest.raises(ValueError):
        Action.parse("squish")


def test_short_hash_never_mutates() -> None:
    line = PlanLine(Action.PICK, "0123456789abcdef", "x")
    assert line.short_hash() == "01234567"
    assert line.short_hash(3) == "012"
    assert line.hash == "0123456789abcdef"
