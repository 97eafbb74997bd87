"""Process module contract, module registry and the dispatcher."""

from .state import State
from .result import ExitStatus, ProcessResult
from .module import ErrorReport, ModuleContext, ProcessBus, ProcessModule
from .modules import Modules
from .process import MAX_TRANSITIONS, EventSource, Process

__all__ = [
    "State",
    "ExitStatus",
    "ProcessResult",
    "ErrorReport",
    "ModuleContext",
    "ProcessBus",
    "ProcessModule",
    "Modules",
    "MAX_TRANSITIONS",
    "EventSource",
    "Process",
]
