"""Read-only commit screen: overview of the commit or its full diff."""

from __future__ import annotations

from typing import Optional

from rebase_editor.errors import CommitLoadError
from rebase_editor.git import CommitDetails, CommitLoader, GitCommitLoader
from rebase_editor.input import Input, InputMode, RawEvent
from rebase_editor.keymaps import (
    SHOW_COMMIT_HELP,
    SHOW_COMMIT_SCROLL_HELP,
    help_lines,
)
from rebase_editor.plan import WIDE_HASH_LENGTH, RebasePlan
from rebase_editor.process import (
    ExitStatus,
    ModuleContext,
    ProcessModule,
    ProcessResult,
    State,
)
from rebase_editor.view import (
    DisplayColor,
    LineSegment,
    ViewData,
    ViewLine,
    help_view_lines,
)

FILE_STATUS_COLORS = {
    "A": DisplayColor.DIFF_ADD,
    "C": DisplayColor.DIFF_CHANGE,
    "D": DisplayColor.DIFF_REMOVE,
    "M": DisplayColor.DIFF_CHANGE,
    "R": DisplayColor.DIFF_CHANGE,
}


def _diff_color(line: str) -> DisplayColor:
    if line.startswith(("+++", "---")):
        return DisplayColor.INDICATOR
    if line.startswith("+"):
        return DisplayColor.DIFF_ADD
    if line.startswith("-"):
        return DisplayColor.DIFF_REMOVE
    if line.startswith("@@"):
        return DisplayColor.INDICATOR
    return DisplayColor.DIFF_CONTEXT


def overview_lines(details: CommitDetails) -> list[ViewLine]:
    lines = [
        ViewLine.of(LineSegment("Commit: ", DisplayColor.INDICATOR), details.hash),
        ViewLine.of(
            LineSegment("Date: ", DisplayColor.INDICATOR),
            details.date.strftime("%a %b %d %H:%M:%S %Y %z"),
        ),
        ViewLine.of(LineSegment("Author: ", DisplayColor.INDICATOR), details.author),
    ]
    if details.committer:
        lines.append(
            ViewLine.of(
                LineSegment("Committer: ", DisplayColor.INDICATOR), details.committer
            )
        )
    lines.append(ViewLine.of(""))
    lines.extend(ViewLine.of(f"    {text}") for text in details.message.splitlines())
    lines.append(ViewLine.of(""))
    for change in details.files:
        color = FILE_STATUS_COLORS.get(change.status, DisplayColor.NORMAL)
        path = change.path
        if change.old_path:
            path = f"{change.old_path} -> {change.path}"
        lines.append(ViewLine.of(LineSegment(f"{change.status} ", color), path))
    return lines


def diff_lines(details: CommitDetails) -> list[ViewLine]:
    return [
        ViewLine.of(LineSegment(text, _diff_color(text)))
        for text in details.diff.splitlines()
    ]


class ShowCommitModule(ProcessModule):
    state = State.SHOW_COMMIT
    input_mode = InputMode.SHOW_COMMIT

    def __init__(
        self, context: ModuleContext, *, loader: Optional[CommitLoader] = None
    ) -> None:
        super().__init__(context)
        self.loader = loader or GitCommitLoader(context.config.git_dir or ".")
        self.details: Optional[CommitDetails] = None
        self.diff_visible = False
        self.help_visible = False
        self.vertical_offset = 0
        self.horizontal_offset = 0

    def activate(
        self, plan: RebasePlan, previous_state: Optional[State]
    ) -> ProcessResult:
        del previous_state
        line = plan.cursor_line
        if not line.has_commit:
            return ProcessResult.failure("No commit selected", resume=State.LIST)
        try:
            self.details = self.loader.load(line.hash)
        except CommitLoadError as exc:
            return ProcessResult.failure(str(exc), resume=State.LIST)
        self.diff_visible = False
        self.help_visible = False
        self.vertical_offset = 0
        self.horizontal_offset = 0
        return ProcessResult.none()

    def deactivate(self) -> None:
        self.details = None

    def handle_input(self, plan: RebasePlan, event: RawEvent) -> ProcessResult:
        del plan
        value = self.resolve(event)
        if value is Input.EXIT:
            return ProcessResult.exit(ExitStatus.ABORT)
        if value is Input.KILL:
            return ProcessResult.exit(ExitStatus.KILL)
        if value is Input.RESIZE:
            self._scroll_to(self.vertical_offset)
            return ProcessResult.none()
        if value is Input.IGNORE:
            return ProcessResult.none()
        if self.help_visible:
            self.help_visible = False
            return ProcessResult.none()

        jump = max(1, self.context.view_height // 2)
        if value is Input.SCROLL_UP:
            self._scroll_to(self.vertical_offset - 1)
        elif value is Input.SCROLL_DOWN:
            self._scroll_to(self.vertical_offset + 1)
        elif value is Input.SCROLL_JUMP_UP:
            self._scroll_to(self.vertical_offset - jump)
        elif value is Input.SCROLL_JUMP_DOWN:
            self._scroll_to(self.vertical_offset + jump)
        elif value is Input.SCROLL_TOP:
            self._scroll_to(0)
        elif value is Input.SCROLL_BOTTOM:
            self._scroll_to(len(self._content_lines()))
        elif value is Input.SCROLL_LEFT:
            self.horizontal_offset = max(0, self.horizontal_offset - 1)
        elif value is Input.SCROLL_RIGHT:
            self.horizontal_offset += 1
        elif value is Input.SHOW_DIFF:
            self.diff_visible = not self.diff_visible
            self.vertical_offset = 0
        elif value is Input.HELP:
            self.help_visible = True
        else:
            return ProcessResult.transition(State.LIST)
        return ProcessResult.none()

    def build_view_data(self, plan: RebasePlan) -> ViewData:
        if self.help_visible:
            entries = help_lines(self.context.key_bindings, SHOW_COMMIT_HELP)
            return ViewData.build(
                "Help",
                help_view_lines([*entries, *SHOW_COMMIT_SCROLL_HELP]),
                trailing=(ViewLine.of("Press any key to close"),),
            )
        short = plan.cursor_line.short_hash(WIDE_HASH_LENGTH)
        title = f"Commit {short} (diff)" if self.diff_visible else f"Commit {short}"
        return ViewData.build(
            title,
            self._content_lines(),
            vertical_offset=self.vertical_offset,
            horizontal_offset=self.horizontal_offset,
        )

    def _content_lines(self) -> list[ViewLine]:
        if self.details is None:
            return []
        if self.diff_visible:
            return diff_lines(self.details)
        return overview_lines(self.details)

    def _scroll_to(self, offset: int) -> None:
        limit = max(0, len(self._content_lines()) - self.context.view_height)
        self.vertical_offset = max(0, min(offset, limit))


__all__ = ["ShowCommitModule", "diff_lines", "overview_lines"]
