"""Key-binding table, defaults, and help catalogue."""

from .models import (
    BINDING_NAMES,
    CASE_INSENSITIVE_BINDINGS,
    LIST_BINDING_ORDER,
    BindingValue,
    KeyBindings,
)
from .defaults import DEFAULT_KEY_BINDINGS, load_key_bindings
from .help import (
    LIST_NORMAL_HELP,
    LIST_VISUAL_HELP,
    SHOW_COMMIT_HELP,
    SHOW_COMMIT_SCROLL_HELP,
    HelpLine,
    help_lines,
)

__all__ = [
    "BINDING_NAMES",
    "CASE_INSENSITIVE_BINDINGS",
    "LIST_BINDING_ORDER",
    "BindingValue",
    "KeyBindings",
    "DEFAULT_KEY_BINDINGS",
    "load_key_bindings",
    "HelpLine",
    "LIST_NORMAL_HELP",
    "LIST_VISUAL_HELP",
    "SHOW_COMMIT_HELP",
    "SHOW_COMMIT_SCROLL_HELP",
    "help_lines",
]
