"""Exception types raised at the editor's collaborator edges."""

from __future__ import annotations

from typing import Iterable, Optional


class RebaseEditorError(RuntimeError):
    """Base class for every error the editor raises on purpose."""


class KeyBindingError(RebaseEditorError, ValueError):
    """Raised when configuration names an unknown or empty key binding."""

    def __init__(self, message: str, *, names: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.names = tuple(names)


class TodoFileError(RebaseEditorError):
    """Raised when a todo line cannot be parsed."""

    def __init__(
        self, message: str, *, line_number: Optional[int] = None, line: str = ""
    ) -> None:
        if line_number is not None:
            message = f"{message} (line {line_number}: {line!r})"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class CommitLoadError(RebaseEditorError):
    """Raised when commit details cannot be read from the repository."""

    def __init__(self, message: str, *, hash: str = "") -> None:
        super().__init__(message)
        self.hash = hash


class ExternalEditorError(RebaseEditorError):
    """Raised when the external editor fails to launch."""

    def __init__(self, message: str, *, command: str = "") -> None:
        super().__init__(message)
        self.command = command


__all__ = [
    "RebaseEditorError",
    "KeyBindingError",
    "TodoFileError",
    "CommitLoadError",
    "ExternalEditorError",
]
