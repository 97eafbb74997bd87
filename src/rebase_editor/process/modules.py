"""Registry mapping every ``State`` to the module that owns it."""

from __future__ import annotations

from typing import Iterator, Mapping

from .module import ProcessModule
from .state import State


class Modules:
    """One module instance per state; construction fails if any is missing."""

    def __init__(self, modules: Mapping[State, ProcessModule]) -> None:
        missing = [state.value for state in State if state not in modules]
        if missing:
            raise ValueError(f"No module registered for: {', '.join(missing)}")
        for state, module in modules.items():
            if module.state is not state:
                raise ValueError(
                    f"Module '{type(module).__name__}' registered for "
                    f"'{state.value}' but owns '{module.state.value}'"
                )
        self._modules = dict(modules)

    def get(self, state: State) -> ProcessModule:
        return self._modules[state]

    def __iter__(self) -> Iterator[ProcessModule]:
        return iter(self._modules.values())

    def __len__(self) -> int:
        return len(self._modules)


__all__ = ["Modules"]
