"""Help text catalogue for the list and show-commit screens."""

from __future__ import annotations

from typing import Sequence

from .models import KeyBindings

HelpLine = tuple[tuple[str, ...], str]

LIST_NORMAL_HELP: tuple[tuple[str, str], ...] = (
    ("move_up", "Move selection up"),
    ("move_down", "Move selection down"),
    ("move_up_step", "Move selection up 5 lines"),
    ("move_down_step", "Move selection down 5 lines"),
    ("move_home", "Move selection to top of the list"),
    ("move_end", "Move selection to end of the list"),
    ("move_left", "Scroll content to the left"),
    ("move_right", "Scroll content to the right"),
    ("abort", "Abort interactive rebase"),
    ("force_abort", "Immediately abort interactive rebase"),
    ("rebase", "Write interactive rebase file"),
    ("force_rebase", "Immediately write interactive rebase file"),
    ("toggle_visual_mode", "Enter visual mode"),
    ("help", "Show help"),
    ("show_commit", "Show commit information"),
    ("move_selection_down", "Move selected commit down"),
    ("move_selection_up", "Move selected commit up"),
    ("action_break", "Toggle break action"),
    ("action_pick", "Set selected commit to be picked"),
    ("action_reword", "Set selected commit to be reworded"),
    ("action_edit", "Set selected commit to be edited"),
    ("action_squash", "Set selected commit to be squashed"),
    ("action_fixup", "Set selected commit to be fixed-up"),
    ("action_drop", "Set selected commit to be dropped"),
    ("edit", "Edit an exec action's command"),
    ("insert_line", "Insert a new line"),
    ("remove_line", "Completely remove the selected line"),
    ("undo", "Undo the last change"),
    ("redo", "Redo the previous undone change"),
    ("open_in_external_editor", "Open the todo file in the default editor"),
)

LIST_VISUAL_HELP: tuple[tuple[str, str], ...] = (
    ("move_up", "Move selection up"),
    ("move_down", "Move selection down"),
    ("move_up_step", "Move selection up 5 lines"),
    ("move_down_step", "Move selection down 5 lines"),
    ("move_home", "Move selection to top of the list"),
    ("move_end", "Move selection to end of the list"),
    ("move_left", "Scroll content to the left"),
    ("move_right", "Scroll content to the right"),
    ("help", "Show help"),
    ("move_selection_down", "Move selected commits down"),
    ("move_selection_up", "Move selected commits up"),
    ("action_pick", "Set selected commits to be picked"),
    ("action_reword", "Set selected commits to be reworded"),
    ("action_edit", "Set selected commits to be edited"),
    ("action_squash", "Set selected commits to be squashed"),
    ("action_fixup", "Set selected commits to be fixed-up"),
    ("action_drop", "Set selected commits to be dropped"),
    ("remove_line", "Completely remove the selected lines"),
    ("undo", "Undo the last change"),
    ("redo", "Redo the previous undone change"),
    ("toggle_visual_mode", "Exit visual mode"),
)

SHOW_COMMIT_HELP: tuple[tuple[str, str], ...] = (
    ("show_diff", "Toggle between commit overview and diff"),
    ("help", "Show help"),
)

# Scroll keys are fixed tokens rather than bindings on the commit screen.
SHOW_COMMIT_SCROLL_HELP: tuple[HelpLine, ...] = (
    (("Up", "Down"), "Scroll up/down one line"),
    (("PageUp", "PageDown"), "Scroll up/down half a page"),
    (("Home", "End"), "Scroll to the top/bottom"),
    (("Left", "Right"), "Scroll left/right"),
)


def help_lines(
    key_bindings: KeyBindings, catalogue: Sequence[tuple[str, str]]
) -> list[HelpLine]:
    """Pair each catalogue entry with the sorted keys currently bound to it."""

    return [
        (tuple(sorted(key_bindings.get(name))), description)
        for name, description in catalogue
    ]


__all__ = [
    "HelpLine",
    "LIST_NORMAL_HELP",
    "LIST_VISUAL_HELP",
    "SHOW_COMMIT_HELP",
    "SHOW_COMMIT_SCROLL_HELP",
    "help_lines",
]
