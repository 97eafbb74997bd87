from __future__ import annotations

import pytest

from rebase_editor.runtime import telemetry
from rebase_editor.runtime.telemetry import LogSettings


def test_log_settings_defaults_keep_console_quiet() -> None:
    settings = LogSettings.from_env({})
    assert settings == LogSettings()
    assert settings.console is False


def test_log_settings_from_env() -> None:
    settings = LogSettings.from_env(
        {
            "REBASE_EDITOR_LOG_LEVEL": "debug",
            "REBASE_EDITOR_LOG_FILE": "/tmp/editor.log",
            "REBASE_EDITOR_LOG_JSON": "yes",
            "REBASE_EDITOR_LOG_CONSOLE": "1",
            "REBASE_EDITOR_NO_COLOR": "true",
            "REBASE_EDITOR_LOG_BUFFERED": "on",
            "REBASE_EDITOR_LOG_BUFFER_SIZE": "64",
        }
    )
    assert settings == LogSettings(
        level="DEBUG",
        file="/tmp/editor.log",
        json=True,
        console=True,
        color=False,
        buffer_size=64,
    )


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError, match="Unknown telemetry preset"):
        telemetry.configure(preset="verbose")


def test_configure_rejects_config_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_span_yields_handle_and_reraises() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with telemetry.span("test::span", component=True, metadata={"n": 1}) as handle:
            handle.add_metadata("lines", 3)
            assert handle.component == "test::span"
            assert handle.metadata == {"n": "1", "lines": "3"}
            raise RuntimeError("boom")


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unsupported log level"):
        telemetry.record_event("test.event", level="loud")
