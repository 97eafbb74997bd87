"""Built-in key bindings and the loader that layers overrides on top."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from rebase_editor.runtime.telemetry import get_logger, span

from .models import BindingValue, KeyBindings

DEFAULT_KEY_BINDINGS: Mapping[str, tuple[str, ...]] = {
    "abort": ("q",),
    "action_break": ("b",),
    "action_drop": ("d",),
    "action_edit": ("e",),
    "action_fixup": ("f",),
    "action_pick": ("p",),
    "action_reword": ("r",),
    "action_squash": ("s",),
    "confirm_no": ("n",),
    "confirm_yes": ("y",),
    "edit": ("E",),
    "force_abort": ("Q",),
    "force_rebase": ("W",),
    "help": ("?",),
    "insert_line": ("I",),
    "move_down": ("Down",),
    "move_down_step": ("PageDown",),
    "move_end": ("End",),
    "move_home": ("Home",),
    "move_left": ("Left",),
    "move_right": ("Right",),
    "move_selection_down": ("j",),
    "move_selection_up": ("k",),
    "move_up": ("Up",),
    "move_up_step": ("PageUp",),
    "open_in_external_editor": ("!",),
    "rebase": ("w",),
    "redo": ("Controly",),
    "remove_line": ("Delete",),
    "show_commit": ("c",),
    "show_diff": ("d",),
    "toggle_visual_mode": ("v",),
    "undo": ("Controlz",),
}


def load_key_bindings(
    overrides: Optional[Mapping[str, BindingValue]] = None,
) -> KeyBindings:
    """Build the binding table from the defaults plus ``overrides``.

    Override values may be a whitespace-separated string or a sequence of
    raw strings; an override replaces the default set for that name.
    """

    with span(
        "keymaps::load",
        logger_name="rebase_editor.keymaps",
        component="keymaps",
        metadata={"overrides": len(overrides or {})},
    ) as handle:
        merged: Dict[str, BindingValue] = dict(DEFAULT_KEY_BINDINGS)
        merged.update(overrides or {})
        bindings = KeyBindings(merged)
        overlaps = bindings.overlaps()
        if overlaps:
            handle.add_metadata("overlaps", len(overlaps))
            get_logger("rebase_editor.keymaps").warning(
                f"Keys bound to several list actions, earliest wins: {overlaps}"
            )
        return bindings


__all__ = ["DEFAULT_KEY_BINDINGS", "load_key_bindings"]
