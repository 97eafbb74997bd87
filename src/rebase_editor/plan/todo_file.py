"""Reading and writing the ``git-rebase-todo`` file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from rebase_editor.errors import TodoFileError
from rebase_editor.runtime import telemetry

from .action import Action
from .line import PlanLine

COMMENT_CHAR = "#"


def parse_line(text: str, *, line_number: int | None = None) -> PlanLine:
    """Parse one todo line such as ``pick 0123abcd Add feature``."""

    stripped = text.strip()
    action_text, _, rest = stripped.partition(" ")
    try:
        action = Action.parse(action_text)
    except ValueError as exc:
        raise TodoFileError(
            f"Invalid action '{action_text}'", line_number=line_number, line=text
        ) from exc

    rest = rest.strip()
    if action.is_commit_action:
        commit, _, content = rest.partition(" ")
        if not commit:
            raise TodoFileError(
                f"Missing commit for '{action.value}'",
                line_number=line_number,
                line=text,
            )
        return PlanLine(action, commit, content.strip())
    if action is Action.BREAK:
        return PlanLine.break_line()
    if action.is_editable and not rest:
        raise TodoFileError(
            f"Missing content for '{action.value}'",
            line_number=line_number,
            line=text,
        )
    return PlanLine(action, "", rest)


def parse_lines(text: str) -> List[PlanLine]:
    """Parse a whole todo file; blank lines, comments and ``noop`` are dropped."""

    lines: List[PlanLine] = []
    for number, raw in enumerate(text.splitlines(), start=1):
        stripped = raw.strip()
        if not stripped or stripped.startswith(COMMENT_CHAR):
            continue
        line = parse_line(raw, line_number=number)
        if line.action is not Action.NOOP:
            lines.append(line)
    return lines


def format_line(line: PlanLine) -> str:
    parts = [line.action.value]
    if line.hash:
        parts.append(line.hash)
    if line.content:
        parts.append(line.content)
    return " ".join(parts)


def format_lines(lines: Iterable[PlanLine]) -> str:
    body = [format_line(line) for line in lines if line.action is not Action.NOOP]
    return "".join(f"{line}\n" for line in body)


class TodoFile:
    """The todo file git hands to the sequence editor."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> List[PlanLine]:
        with telemetry.span(
            "todo_file::load",
            logger_name="rebase_editor.plan",
            metadata={"path": self.path},
        ) as handle:
            lines = parse_lines(self.path.read_text(encoding="utf-8"))
            handle.add_metadata("lines", len(lines))
            return lines

    def save(self, lines: Iterable[PlanLine]) -> None:
        with telemetry.span(
            "todo_file::save",
            logger_name="rebase_editor.plan",
            metadata={"path": self.path},
        ):
            self.path.write_text(format_lines(lines), encoding="utf-8")

    def write_abort(self) -> None:
        """Truncate the file, which git reads as "nothing to do"."""

        self.path.write_text("", encoding="utf-8")
        telemetry.record_event(
            "todo_file.abort", data={"path": str(self.path)}
        )


__all__ = [
    "COMMENT_CHAR",
    "TodoFile",
    "format_line",
    "format_lines",
    "parse_line",
    "parse_lines",
]
