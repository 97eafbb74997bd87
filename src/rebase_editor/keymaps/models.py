"""The key-binding table: semantic binding names mapped to raw input strings."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Sequence, Union

from rebase_editor.errors import KeyBindingError

BindingValue = Union[str, Iterable[str]]

# Order in which List mode consults bindings; the first match wins.
LIST_BINDING_ORDER: tuple[str, ...] = (
    "abort",
    "action_break",
    "action_drop",
    "action_edit",
    "action_fixup",
    "action_pick",
    "action_reword",
    "action_squash",
    "edit",
    "force_abort",
    "force_rebase",
    "help",
    "insert_line",
    "move_down",
    "move_down_step",
    "move_end",
    "move_home",
    "move_left",
    "move_right",
    "move_selection_down",
    "move_selection_up",
    "move_up",
    "move_up_step",
    "open_in_external_editor",
    "rebase",
    "redo",
    "remove_line",
    "show_commit",
    "toggle_visual_mode",
    "undo",
)

BINDING_NAMES: tuple[str, ...] = tuple(
    sorted(LIST_BINDING_ORDER + ("confirm_no", "confirm_yes", "show_diff"))
)

CASE_INSENSITIVE_BINDINGS = frozenset({"confirm_no", "confirm_yes"})


def _normalize_value(name: str, value: BindingValue) -> frozenset[str]:
    if isinstance(value, str):
        items: Sequence[str] = value.split()
    else:
        items = [str(item).strip() for item in value]
    keys = [item for item in items if item]
    if not keys:
        raise KeyBindingError(f"Binding '{name}' has no keys", names=(name,))
    if name in CASE_INSENSITIVE_BINDINGS:
        keys = [key.lower() for key in keys]
    return frozenset(keys)


@dataclass(frozen=True, slots=True)
class KeyBindings:
    """Immutable table consulted by the input translator.

    Every name in ``BINDING_NAMES`` must be present. Lookups test membership
    because several raw strings may trigger the same binding.
    """

    bindings: Mapping[str, frozenset[str]]

    def __post_init__(self) -> None:
        unknown = sorted(set(self.bindings) - set(BINDING_NAMES))
        if unknown:
            raise KeyBindingError(
                f"Unknown key bindings: {', '.join(unknown)}", names=unknown
            )
        missing = sorted(set(BINDING_NAMES) - set(self.bindings))
        if missing:
            raise KeyBindingError(
                f"Missing key bindings: {', '.join(missing)}", names=missing
            )
        normalized = {
            name: _normalize_value(name, self.bindings[name]) for name in BINDING_NAMES
        }
        object.__setattr__(self, "bindings", MappingProxyType(normalized))

    def get(self, name: str) -> frozenset[str]:
        try:
            return self.bindings[name]
        except KeyError as exc:
            raise KeyBindingError(
                f"Unknown key binding '{name}'", names=(name,)
            ) from exc

    def contains(self, name: str, token: str) -> bool:
        keys = self.get(name)
        if name in CASE_INSENSITIVE_BINDINGS:
            return token.lower() in keys
        return token in keys

    def replace(self, **changes: BindingValue) -> "KeyBindings":
        merged: Dict[str, BindingValue] = dict(self.bindings)
        merged.update(changes)
        return KeyBindings(merged)

    def overlaps(
        self, names: Sequence[str] = LIST_BINDING_ORDER
    ) -> Dict[str, tuple[str, ...]]:
        """Return raw strings claimed by more than one of ``names``."""

        owners: Dict[str, list[str]] = {}
        for name in names:
            for key in self.get(name):
                owners.setdefault(key, []).append(name)
        return {
            key: tuple(claimed)
            for key, claimed in sorted(owners.items())
            if len(claimed) > 1
        }


__all__ = [
    "BINDING_NAMES",
    "CASE_INSENSITIVE_BINDINGS",
    "LIST_BINDING_ORDER",
    "BindingValue",
    "KeyBindings",
]
