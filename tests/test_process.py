from __future__ import annotations

from typing import List, Optional

from rebase_editor.config import EditorConfig
from rebase_editor.errors import CommitLoadError
from rebase_editor.input import KeyEvent, KeyModifiers, MouseEvent, MouseEventKind
from rebase_editor.input import RawEvent, ResizeEvent
from rebase_editor.modules import build_modules
from rebase_editor.plan import Action, PlanLine, RebasePlan
from rebase_editor.process import (
    MAX_TRANSITIONS,
    ExitStatus,
    ModuleContext,
    Modules,
    Process,
    ProcessModule,
    ProcessResult,
    State,
)
from rebase_editor.view import ViewData


class FailingLoader:
    def load(self, hash: str):
        raise CommitLoadError(f"Unable to load commit {hash}", hash=hash)


def make_plan() -> RebasePlan:
    return RebasePlan(
        [
            PlanLine(Action.PICK, "aaaaaaa0", "first"),
            PlanLine(Action.EXEC, "", "make test"),
            PlanLine(Action.PICK, "aaaaaaa1", "second"),
        ]
    )


def make_process(plan: Optional[RebasePlan] = None, **module_kwargs) -> Process:
    context = ModuleContext.create(EditorConfig(), width=80, height=24)
    modules = build_modules(context, **module_kwargs)
    process = Process(plan or make_plan(), modules, context)
    process.start()
    return process


def press(process: Process, *characters: str) -> ProcessResult:
    result = ProcessResult.none()
    for character in characters:
        result = process.handle_event(KeyEvent.char(character))
    return result


def test_start_activates_list() -> None:
    process = make_process()
    assert process.state is State.LIST
    assert process.start().is_none
    assert isinstance(process.build_view_data(), ViewData)


def test_confirm_abort_flow() -> None:
    process = make_process()
    press(process, "q")
    assert process.state is State.CONFIRM_ABORT

    result = press(process, "Y")
    assert result.exit_status is ExitStatus.ABORT
    assert process.exit_status is ExitStatus.ABORT
    assert process.plan.is_noop
    assert press(process, "p").exit_status is ExitStatus.ABORT


def test_confirm_rebase_declined_returns_to_list() -> None:
    process = make_process()
    press(process, "w")
    assert process.state is State.CONFIRM_REBASE
    press(process, "x")
    assert process.state is State.LIST
    assert process.exit_status is None


def test_force_rebase_exits_good() -> None:
    process = make_process()
    press(process, "W")
    assert process.exit_status is ExitStatus.GOOD


def test_kill_exits_from_any_state() -> None:
    process = make_process()
    press(process, "q")
    process.handle_event(KeyEvent("c", KeyModifiers.CONTROL))
    assert process.exit_status is ExitStatus.KILL


def test_list_edits_flow_through_dispatcher() -> None:
    process = make_process()
    press(process, "j", "d")
    assert [line.action for line in process.plan] == [
        Action.EXEC,
        Action.DROP,
        Action.PICK,
    ]
    process.handle_event(MouseEvent(MouseEventKind.MOVED))
    assert process.plan.cursor == 1


def test_small_resize_interrupts_and_resumes() -> None:
    process = make_process()
    press(process, "q")
    process.handle_event(ResizeEvent(10, 3))
    assert process.state is State.WINDOW_SIZE_ERROR

    press(process, "y")
    assert process.state is State.WINDOW_SIZE_ERROR

    process.handle_event(ResizeEvent(80, 24))
    assert process.state is State.CONFIRM_ABORT


def test_start_with_small_window_shows_size_error() -> None:
    context = ModuleContext.create(EditorConfig(), width=10, height=24)
    process = Process(make_plan(), build_modules(context), context)
    process.start()
    assert process.state is State.WINDOW_SIZE_ERROR
    process.handle_event(ResizeEvent(40, 24))
    assert process.state is State.LIST


def test_module_failure_routes_to_error_and_resumes() -> None:
    process = make_process(commit_loader=FailingLoader())
    errors: List[object] = []
    process.context.bus.subscribe("process.error", errors.append)

    press(process, "c")
    assert process.state is State.ERROR
    view = process.build_view_data()
    assert "Unable to load commit aaaaaaa0" in view.text_lines()[0]
    assert errors == [{"message": "Unable to load commit aaaaaaa0", "resume": "list"}]

    process.handle_event(ResizeEvent(80, 24))
    assert process.state is State.ERROR
    press(process, "x")
    assert process.state is State.LIST


class FailingRebaseConfirm(ProcessModule):
    state = State.CONFIRM_REBASE

    def handle_input(self, plan, event) -> ProcessResult:
        return ProcessResult.failure("Rebase check failed")

    def build_view_data(self, plan) -> ViewData:
        return ViewData()


def test_failure_without_resume_returns_to_active_state() -> None:
    context = ModuleContext.create(EditorConfig())
    registry = {module.state: module for module in build_modules(context)}
    registry[State.CONFIRM_REBASE] = FailingRebaseConfirm(context)
    process = Process(make_plan(), Modules(registry), context)
    process.start()

    press(process, "w", "y")
    assert process.state is State.ERROR
    assert context.error is None

    press(process, "x")
    assert process.state is State.CONFIRM_REBASE


def test_transitions_are_published() -> None:
    process = make_process()
    seen: List[object] = []
    process.context.bus.subscribe("process.transition", seen.append)
    press(process, "w", "n")
    assert seen == [
        {"from": "list", "to": "confirm_rebase"},
        {"from": "confirm_rebase", "to": "list"},
    ]


class BouncingModule(ProcessModule):
    def __init__(self, context: ModuleContext, state: State, target: State) -> None:
        super().__init__(context)
        self.state = state
        self.target = target
        self.activations = 0

    def activate(self, plan, previous_state) -> ProcessResult:
        self.activations += 1
        return ProcessResult.transition(self.target)

    def handle_input(self, plan, event) -> ProcessResult:
        return ProcessResult.none()

    def build_view_data(self, plan) -> ViewData:
        return ViewData()


def test_transition_chain_is_bounded() -> None:
    context = ModuleContext.create(EditorConfig())
    registry = {module.state: module for module in build_modules(context)}
    registry[State.LIST] = BouncingModule(context, State.LIST, State.INSERT)
    registry[State.INSERT] = BouncingModule(context, State.INSERT, State.LIST)
    process = Process(make_plan(), Modules(registry), context)

    result = process.start()
    assert result.error is not None
    assert process.state is State.ERROR
    assert "limit" in process.build_view_data().text_lines()[0]
    activations = (
        registry[State.LIST].activations + registry[State.INSERT].activations
    )
    assert activations == MAX_TRANSITIONS + 1


def test_modules_registry_requires_every_state() -> None:
    context = ModuleContext.create(EditorConfig())
    registry = {module.state: module for module in build_modules(context)}
    del registry[State.INSERT]
    try:
        Modules(registry)
    except ValueError as exc:
        assert "insert" in str(exc)
    else:  # pragma: no cover - failure path
        raise AssertionError("missing module accepted")


class ScriptedSource:
    def __init__(self, events: List[Optional[RawEvent]]) -> None:
        self.events = list(events)
        self.frames: List[ViewData] = []

    def read_event(self) -> Optional[RawEvent]:
        return self.events.pop(0)

    def render(self, view_data: ViewData) -> None:
        self.frames.append(view_data)


def test_run_loop_until_exit() -> None:
    context = ModuleContext.create(EditorConfig())
    process = Process(make_plan(), build_modules(context), context)
    source = ScriptedSource([None, KeyEvent.char("v"), KeyEvent.char("W")])

    assert process.run(source) is ExitStatus.GOOD
    assert len(source.frames) == 3
    assert source.frames[-1].title.endswith("(VISUAL)")
