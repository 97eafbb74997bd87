"""Textual host for the rebase editor.

Only the controller is imported here so tests can use it without starting
a Textual application.
"""

from .controller import (
    TextualEditorAdapter,
    TextualUIHooks,
    create_process,
    textual_key_to_event,
    write_result,
)

__all__ = [
    "TextualEditorAdapter",
    "TextualUIHooks",
    "create_process",
    "textual_key_to_event",
    "write_result",
]
