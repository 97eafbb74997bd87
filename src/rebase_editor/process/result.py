"""Outcome of a module's ``activate`` or ``handle_input`` call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .state import State


class ExitStatus(Enum):
    """How the editor finished; the host decides what to do with the plan."""

    GOOD = "good"
    ABORT = "abort"
    KILL = "kill"

    @property
    def exit_code(self) -> int:
        return 1 if self is ExitStatus.KILL else 0


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """At most one of ``state``, ``exit_status`` or ``error`` is set.

    ``resume`` only accompanies ``error`` and names the state the error
    screen returns to once acknowledged.
    """

    state: Optional[State] = None
    exit_status: Optional[ExitStatus] = None
    error: Optional[str] = None
    resume: Optional[State] = None

    @classmethod
    def none(cls) -> "ProcessResult":
        return _NONE

    @classmethod
    def transition(cls, state: State) -> "ProcessResult":
        return cls(state=state)

    @classmethod
    def exit(cls, status: ExitStatus) -> "ProcessResult":
        return cls(exit_status=status)

    @classmethod
    def failure(
        cls, message: str, resume: Optional[State] = None
    ) -> "ProcessResult":
        return cls(error=message, resume=resume)

    @property
    def is_none(self) -> bool:
        return self.state is None and self.exit_status is None and self.error is None


_NONE = ProcessResult()

__all__ = ["ExitStatus", "ProcessResult"]
