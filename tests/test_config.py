from __future__ import annotations

import pytest

from rebase_editor.config import DEFAULT_EDITOR, EditorConfig
from rebase_editor.errors import KeyBindingError


def test_editor_resolution_order() -> None:
    env = {"EDITOR": "nano", "VISUAL": "vim", "GIT_EDITOR": "code -w"}
    assert EditorConfig.from_env(environ=env).editor == "code -w"
    env["REBASE_EDITOR_EDITOR"] = "emacs"
    assert EditorConfig.from_env(environ=env).editor == "emacs"
    assert EditorConfig.from_env(environ={}).editor == DEFAULT_EDITOR
    assert EditorConfig.from_env(environ=env, editor="ed").editor == "ed"


def test_environment_bindings_override_mapping() -> None:
    config = EditorConfig.from_env(
        {"abort": "x", "rebase": "R"},
        environ={"REBASE_EDITOR_KEY_ABORT": "Q q"},
    )
    assert config.key_bindings.get("abort") == frozenset({"Q", "q"})
    assert config.key_bindings.get("rebase") == frozenset({"R"})


def test_unknown_environment_binding_raises() -> None:
    with pytest.raises(KeyBindingError):
        EditorConfig.from_env(environ={"REBASE_EDITOR_KEY_NOPE": "n"})


def test_window_limits() -> None:
    config = EditorConfig.from_env(
        environ={"REBASE_EDITOR_MINIMUM_WIDTH": "30", "REBASE_EDITOR_FULL_WIDTH": "x"}
    )
    assert config.minimum_width == 30
    assert config.full_width == 34
    assert config.fits(30, 5)
    assert not config.fits(29, 5)
    assert not config.fits(30, 4)
