"""Single entries of a rebase plan."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .action import Action

WIDE_HASH_LENGTH = 8
NARROW_HASH_LENGTH = 3


@dataclass(frozen=True, slots=True)
class PlanLine:
    """One plan entry; ``hash`` is empty for lines without a commit."""

    action: Action
    hash: str = ""
    content: str = ""

    @classmethod
    def noop(cls) -> "PlanLine":
        return cls(Action.NOOP)

    @classmethod
    def break_line(cls) -> "PlanLine":
        return cls(Action.BREAK)

    @property
    def has_commit(self) -> bool:
        return bool(self.hash)

    def short_hash(self, length: int = WIDE_HASH_LENGTH) -> str:
        return self.hash[:length]

    def with_action(self, action: Action) -> "PlanLine":
        return replace(self, action=action)

    def with_content(self, content: str) -> "PlanLine":
        return replace(self, content=content)


__all__ = ["NARROW_HASH_LENGTH", "PlanLine", "WIDE_HASH_LENGTH"]
