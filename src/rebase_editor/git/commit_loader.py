"""Commit details for the show-commit screen, read with dulwich."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from io import BytesIO
from typing import Optional, Protocol

from dulwich.diff_tree import (
    CHANGE_ADD,
    CHANGE_COPY,
    CHANGE_DELETE,
    CHANGE_MODIFY,
    CHANGE_RENAME,
    TreeChange,
    tree_changes,
)
from dulwich.errors import NotGitRepository
from dulwich.objectspec import parse_commit
from dulwich.patch import write_tree_diff
from dulwich.repo import Repo

from rebase_editor.errors import CommitLoadError
from rebase_editor.runtime import telemetry

STATUS_LETTERS = {
    CHANGE_ADD: "A",
    CHANGE_COPY: "C",
    CHANGE_DELETE: "D",
    CHANGE_MODIFY: "M",
    CHANGE_RENAME: "R",
}


@dataclass(frozen=True, slots=True)
class FileChange:
    status: str
    path: str
    old_path: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CommitDetails:
    hash: str
    author: str
    date: datetime
    message: str
    committer: Optional[str] = None
    files: tuple[FileChange, ...] = ()
    diff: str = ""

    @property
    def summary(self) -> str:
        return self.message.splitlines()[0] if self.message else ""


class CommitLoader(Protocol):
    def load(self, hash: str) -> CommitDetails: ...


def _text(value: bytes | None) -> str:
    return value.decode("utf-8", errors="replace") if value else ""


def _commit_date(seconds: int, offset: int) -> datetime:
    return datetime.fromtimestamp(seconds, timezone(timedelta(seconds=offset)))


class GitCommitLoader:
    """Loads commits from the repository at ``path`` (or the one around it)."""

    def __init__(self, path: str = ".") -> None:
        self.path = path

    def _open(self) -> Repo:
        try:
            return Repo.discover(self.path)
        except NotGitRepository as exc:
            raise CommitLoadError(f"Not a git repository: {self.path}") from exc

    def load(self, hash: str) -> CommitDetails:
        with telemetry.span(
            "git::load_commit",
            logger_name="rebase_editor.git",
            component="git",
            metadata={"hash": hash},
        ):
            with self._open() as repo:
                try:
                    commit = parse_commit(repo, hash)
                except (KeyError, ValueError) as exc:
                    raise CommitLoadError(
                        f"Unable to load commit {hash}", hash=hash
                    ) from exc

                parent_tree = None
                if commit.parents:
                    parent_tree = repo[commit.parents[0]].tree
                files = tuple(
                    self._file_change(change)
                    for change in tree_changes(
                        repo.object_store, parent_tree, commit.tree
                    )
                )
                buffer = BytesIO()
                write_tree_diff(buffer, repo.object_store, parent_tree, commit.tree)

            author = _text(commit.author)
            committer = _text(commit.committer)
            return CommitDetails(
                hash=_text(commit.id),
                author=author,
                date=_commit_date(commit.author_time, commit.author_timezone),
                message=_text(commit.message).rstrip("\n"),
                committer=committer if committer != author else None,
                files=files,
                diff=_text(buffer.getvalue()),
            )

    @staticmethod
    def _file_change(change: TreeChange) -> FileChange:
        status = STATUS_LETTERS.get(change.type, "M")
        old_path = _text(change.old.path) if change.old is not None else None
        new_path = _text(change.new.path) if change.new is not None else None
        if change.type == CHANGE_DELETE:
            return FileChange(status, old_path or "")
        if change.type in (CHANGE_RENAME, CHANGE_COPY):
            return FileChange(status, new_path or "", old_path)
        return FileChange(status, new_path or "")


__all__ = [
    "CommitDetails",
    "CommitLoader",
    "FileChange",
    "GitCommitLoader",
    "STATUS_LETTERS",
]
