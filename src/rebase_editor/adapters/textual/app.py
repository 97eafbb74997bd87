"""Executable Textual app that hosts the rebase editor."""

from __future__ import annotations

import argparse
import sys
from typing import Mapping, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.style import Style
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use rebase_editor.adapters.textual.app"
    ) from exc

from rebase_editor.config import EditorConfig
from rebase_editor.errors import RebaseEditorError
from rebase_editor.git import CommitLoader
from rebase_editor.input import MouseEventKind
from rebase_editor.modules import run_editor
from rebase_editor.plan import RebasePlan, TodoFile
from rebase_editor.process import ExitStatus
from rebase_editor.runtime import telemetry
from rebase_editor.view import DisplayColor, ViewData, ViewLine

from .controller import (
    TextualEditorAdapter,
    TextualUIHooks,
    create_process,
    write_result,
)

COLOR_STYLES: Mapping[DisplayColor, str] = {
    DisplayColor.NORMAL: "",
    DisplayColor.INDICATOR: "cyan",
    DisplayColor.ACTION_BREAK: "white",
    DisplayColor.ACTION_DROP: "red",
    DisplayColor.ACTION_EDIT: "blue",
    DisplayColor.ACTION_EXEC: "white",
    DisplayColor.ACTION_FIXUP: "magenta",
    DisplayColor.ACTION_LABEL: "dark_orange",
    DisplayColor.ACTION_MERGE: "dark_orange",
    DisplayColor.ACTION_PICK: "green",
    DisplayColor.ACTION_RESET: "dark_orange",
    DisplayColor.ACTION_REWORD: "yellow",
    DisplayColor.ACTION_SQUASH: "cyan",
    DisplayColor.DIFF_ADD: "green",
    DisplayColor.DIFF_CHANGE: "yellow",
    DisplayColor.DIFF_CONTEXT: "",
    DisplayColor.DIFF_REMOVE: "red",
    DisplayColor.ERROR: "bold red",
}

SELECTED_STYLE = "on grey23"


def line_to_text(line: ViewLine, horizontal_offset: int = 0) -> Text:
    text = Text()
    for segment in line.segments:
        style = Style.parse(COLOR_STYLES[segment.color] or "none") + Style(
            dim=segment.dim or None,
            reverse=segment.reverse or None,
            underline=segment.underline or None,
        )
        text.append(segment.text, style=style)
    if horizontal_offset:
        text = text[horizontal_offset:]
    if line.selected:
        text.stylize(SELECTED_STYLE)
    return text


def visible_top(view: ViewData, rows: int, top: int) -> int:
    """First scrolling row to show so that the cursor row stays on screen."""

    if view.cursor_row is None:
        top = view.vertical_offset
    elif view.cursor_row < top:
        top = view.cursor_row
    elif view.cursor_row >= top + rows:
        top = view.cursor_row - rows + 1
    return max(0, min(top, max(0, len(view.lines) - rows)))


def render_view_data(view: ViewData, height: int, top: int = 0) -> Text:
    rows = max(0, height - len(view.leading) - len(view.trailing))
    body = [line_to_text(line) for line in view.leading]
    body.extend(
        line_to_text(line, view.horizontal_offset)
        for line in view.lines[top : top + rows]
    )
    body.extend(line_to_text(line) for line in view.trailing)
    return Text("\n").join(body)


class RebaseEditorApp(App[ExitStatus]):
    """Textual UI painting ``ViewData`` frames produced by the editor."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#title-bar {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#view {
		height: 1fr;
		content-align: left top;
	}
	"""

    BINDINGS: list = []

    def __init__(
        self,
        plan: RebasePlan,
        config: EditorConfig,
        *,
        commit_loader: Optional[CommitLoader] = None,
    ) -> None:
        super().__init__()
        self.plan = plan
        self.config = config
        self.commit_loader = commit_loader
        self.adapter: TextualEditorAdapter | None = None
        self.logger = telemetry.get_logger("rebase_editor.adapters.textual")
        self._title_widget: Static | None = None
        self._view_widget: Static | None = None
        self._top = 0

    def compose(self) -> ComposeResult:
        self._title_widget = Static("", id="title-bar")
        self._view_widget = Static("", id="view")
        yield self._title_widget
        yield self._view_widget

    def on_mount(self) -> None:
        process = create_process(
            self.plan,
            self.config,
            width=self.size.width,
            height=self.size.height,
            commit_loader=self.commit_loader,
            editor_runner=self._run_editor,
        )
        hooks = TextualUIHooks(
            render=self._render, exit=self._finish, log=self._log_line
        )
        self.adapter = TextualEditorAdapter(process, hooks)
        self.adapter.start()

    def on_key(self, event: events.Key) -> None:
        if self.adapter is None:
            return
        self.adapter.handle_textual_key(event.key, character=event.character)
        event.stop()
        event.prevent_default()

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        if self.adapter:
            self.adapter.handle_mouse(
                MouseEventKind.SCROLL_DOWN, ctrl=event.ctrl, shift=event.shift
            )

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        if self.adapter:
            self.adapter.handle_mouse(
                MouseEventKind.SCROLL_UP, ctrl=event.ctrl, shift=event.shift
            )

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if self.adapter:
            self.adapter.handle_mouse(
                MouseEventKind.DOWN, ctrl=event.ctrl, shift=event.shift
            )

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.handle_resize(event.size.width, event.size.height)

    def _run_editor(self, command: str, path: str) -> int:
        with self.suspend():
            return run_editor(command, path)

    def _render(self, view: ViewData) -> None:
        height = max(0, self.size.height - 1)
        rows = max(0, height - len(view.leading) - len(view.trailing))
        self._top = visible_top(view, rows, self._top)
        if self._title_widget:
            self._title_widget.update(view.title)
        if self._view_widget:
            self._view_widget.update(render_view_data(view, height, self._top))

    def _finish(self, status: ExitStatus) -> None:
        self.exit(status)

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rebase-editor",
        description="Interactively edit a git rebase todo file.",
    )
    parser.add_argument("todo_file", help="Path to the git-rebase-todo file")
    parser.add_argument(
        "--editor",
        default=None,
        help="Command used to open the todo file in an external editor",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="telelog preset to configure logging with",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    try:
        config = EditorConfig.from_env(editor=args.editor)
        todo = TodoFile(args.todo_file)
        lines = todo.load()
    except (RebaseEditorError, OSError) as exc:
        print(f"rebase-editor: {exc}", file=sys.stderr)
        return 1

    plan = RebasePlan(lines, name=todo.path.name)
    app = RebaseEditorApp(plan, config)
    status = app.run() or ExitStatus.KILL
    return write_result(todo, plan, status)


if __name__ == "__main__":  # pragma: no cover - manual run
    sys.exit(main())
