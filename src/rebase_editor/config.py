"""Editor configuration assembled from defaults, overrides and environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from rebase_editor.keymaps import BindingValue, KeyBindings, load_key_bindings
from rebase_editor.view import MINIMUM_FULL_WINDOW_WIDTH

ENV_PREFIX = "REBASE_EDITOR_"
KEY_ENV_PREFIX = f"{ENV_PREFIX}KEY_"
EDITOR_VARIABLES = (f"{ENV_PREFIX}EDITOR", "GIT_EDITOR", "VISUAL", "EDITOR")
DEFAULT_EDITOR = "vi"

MINIMUM_WINDOW_WIDTH = 20
MINIMUM_WINDOW_HEIGHT = 5


def _int_env(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _binding_overrides(environ: Mapping[str, str]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for variable, value in environ.items():
        if not variable.startswith(KEY_ENV_PREFIX):
            continue
        name = variable[len(KEY_ENV_PREFIX) :].lower()
        # Unknown names are passed through so the loader reports them.
        overrides[name] = value
    return overrides


@dataclass(frozen=True, slots=True)
class EditorConfig:
    key_bindings: KeyBindings = field(default_factory=load_key_bindings)
    editor: str = DEFAULT_EDITOR
    minimum_width: int = MINIMUM_WINDOW_WIDTH
    minimum_height: int = MINIMUM_WINDOW_HEIGHT
    full_width: int = MINIMUM_FULL_WINDOW_WIDTH
    git_dir: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        overrides: Optional[Mapping[str, BindingValue]] = None,
        environ: Optional[Mapping[str, str]] = None,
        *,
        editor: Optional[str] = None,
    ) -> "EditorConfig":
        """Resolve configuration; ``REBASE_EDITOR_KEY_*`` wins over ``overrides``.

        Raises ``KeyBindingError`` for unknown or empty bindings.
        """

        env = os.environ if environ is None else environ
        merged: Dict[str, BindingValue] = dict(overrides or {})
        merged.update(_binding_overrides(env))
        if editor is None:
            editor = next(
                (env[name] for name in EDITOR_VARIABLES if env.get(name, "").strip()),
                DEFAULT_EDITOR,
            )
        return cls(
            key_bindings=load_key_bindings(merged),
            editor=editor,
            minimum_width=_int_env(env, "MINIMUM_WIDTH", MINIMUM_WINDOW_WIDTH),
            minimum_height=_int_env(env, "MINIMUM_HEIGHT", MINIMUM_WINDOW_HEIGHT),
            full_width=_int_env(env, "FULL_WIDTH", MINIMUM_FULL_WINDOW_WIDTH),
            git_dir=env.get("GIT_DIR") or None,
        )

    def fits(self, width: int, height: int) -> bool:
        return width >= self.minimum_width and height >= self.minimum_height


__all__ = [
    "DEFAULT_EDITOR",
    "EDITOR_VARIABLES",
    "ENV_PREFIX",
    "EditorConfig",
    "KEY_ENV_PREFIX",
    "MINIMUM_FULL_WINDOW_WIDTH",
    "MINIMUM_WINDOW_HEIGHT",
    "MINIMUM_WINDOW_WIDTH",
]
