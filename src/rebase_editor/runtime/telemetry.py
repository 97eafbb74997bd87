"""Telemetry for the rebase editor, built on telelog.

The display owns the terminal while the editor runs, so nothing is written
to the console unless ``REBASE_EDITOR_LOG_CONSOLE`` asks for it. Logs go to
a file when ``REBASE_EDITOR_LOG_FILE`` is set or a preset names one.

``configure(...)`` -- switch to an explicit config, a preset, or the env
``get_logger(name)`` -- cached telelog logger
``record_event(name, ...)`` -- structured ``event::<name>`` line
``span(name, ...)`` -- profiled block, optionally tracked as a component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "REBASE_EDITOR_"
ROOT_LOGGER = "rebase_editor"

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


@dataclass(frozen=True, slots=True)
class LogSettings:
    """Logging knobs read from ``REBASE_EDITOR_*`` variables."""

    level: str = "INFO"
    file: Optional[str] = None
    json: bool = False
    console: bool = False
    color: bool = True
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LogSettings":
        env = os.environ if environ is None else environ

        def flag(name: str) -> bool:
            raw = env.get(f"{ENV_PREFIX}{name}", "")
            return raw.strip().lower() in {"1", "true", "yes", "on"}

        buffer_size = None
        if flag("LOG_BUFFERED"):
            buffer_size = int(env.get(f"{ENV_PREFIX}LOG_BUFFER_SIZE") or 2048)
        return cls(
            level=(env.get(f"{ENV_PREFIX}LOG_LEVEL") or "INFO").upper(),
            file=env.get(f"{ENV_PREFIX}LOG_FILE") or None,
            json=flag("LOG_JSON"),
            console=flag("LOG_CONSOLE"),
            color=not flag("NO_COLOR"),
            buffer_size=buffer_size,
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.color)
        if self.json:
            config.with_json_format(True)
        if self.file:
            config.with_file_output(self.file)
        if self.buffer_size:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config


def _development(settings: LogSettings) -> LogSettings:
    return LogSettings(level="DEBUG", file=settings.file or "rebase_editor-debug.log")


def _production(settings: LogSettings) -> LogSettings:
    return LogSettings(level="WARNING", file=settings.file)


def _performance(settings: LogSettings) -> LogSettings:
    return LogSettings(
        level="DEBUG",
        file=settings.file or "rebase_editor-performance.log",
        json=True,
        buffer_size=settings.buffer_size or 2048,
    )


_PRESETS: Mapping[str, Callable[[LogSettings], LogSettings]] = {
    "development": _development,
    "production": _production,
    "performance": _performance,
}

PRESETS = tuple(_PRESETS)


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    ``config`` and ``preset`` are mutually exclusive; with neither, settings
    are re-read from the environment. Cached loggers are dropped.
    """

    global _config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    settings = LogSettings.from_env()
    if preset:
        builder = _PRESETS.get(preset.lower())
        if builder is None:
            raise ValueError(f"Unknown telemetry preset '{preset}'.")
        config = builder(settings).to_config()
    elif config is None:
        config = settings.to_config()

    _config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` for ``name``."""

    global _config
    if _config is None:
        _config = LogSettings.from_env().to_config()
    logger_name = name or ROOT_LOGGER
    if logger_name not in _loggers:
        _loggers[logger_name] = tl.Logger.with_config(logger_name, _config)
    return _loggers[logger_name]


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return repr(value)
    return str(value)


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(key), _text(val)) for key, val in payload.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span``; collects metadata reported if the block fails."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata}
        if self.component:
            payload["component"] = self.component
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracking it as a component.

    ``component=True`` uses ``name`` as the component; a string names it.
    ``metadata`` is set as logger context for the duration of the block.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _text(value) for key, value in (metadata or {}).items()}

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(log, name, component_name, dict(context))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "LogSettings",
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
