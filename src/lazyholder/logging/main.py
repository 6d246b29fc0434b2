from __future__ import annotations

"""Factory helpers for configuring lazyholder logging.

The package logs through its own Loguru core so configuring it never touches
the handlers an application has attached to ``loguru.logger``.
"""

import atexit as _atexit
import os
import sys
import threading
import typing as t

from loguru._logger import Core as _Core
from loguru._logger import Logger as _Logger

from .formatters import LoggerFormatter
from .static import REVERSE_LOGLEVEL_MAPPING

if t.TYPE_CHECKING:
    from loguru import Record

_lock = threading.Lock()
_logger_contexts: t.Dict[str, "Logger"] = {}
_handler_ids: t.Dict[str, int] = {}

__all__ = [
    "Logger",
    "create_global_logger",
    "create_default_logger",
    "change_logger_level",
    "get_env_log_level",
    "get_logger",
    "logger",
    "default_logger",
]


class Logger(_Logger):

    name: str = None
    is_global: bool = False

    def for_holder(self, holder: str, event: str | None = None) -> _Logger:
        """
        Returns a logger bound to ``holder`` (and ``event``) for the holder layout
        """
        return self.bind(holder = holder, event = event or '')


def _new_logger(core: _Core, extra: t.Dict[str, t.Any]) -> Logger:
    return Logger(
        core=core,
        exception=None,
        depth=0,
        record=False,
        lazy=False,
        colors=False,
        raw=False,
        capture=True,
        patchers=[],
        extra=extra,
    )


def create_global_logger(
    name: str = "lazyholder",
    level: str | int = "INFO",
    format: t.Callable[["Record"], str] | None = None,
    sink: t.Any = None,
    **kwargs: t.Any,
) -> Logger:
    """Instantiate the shared package logger.

    Args:
        name: Registry key for the logger instance.
        level: Minimum level of the stderr handler.
        format: Optional callable used to format log records.
        sink: Where records are written.  Defaults to ``sys.stderr`` so that
            command output on stdout stays clean.
        **kwargs: Additional keyword arguments forwarded to
            :meth:`loguru.Logger.add`.
    """
    _logger = _new_logger(_Core(), {})
    _logger.name = name
    _logger.is_global = True
    _atexit.register(_logger.remove)

    if isinstance(level, str): level = level.upper()
    _handler_ids[name] = _logger.add(
        sink if sink is not None else sys.stderr,
        backtrace = True,
        colorize = True,
        level = level,
        format = format if format is not None else LoggerFormatter.default_formatter,
        **kwargs,
    )
    _logger_contexts[name] = _logger
    return _logger


def create_default_logger(
    name: str | None = None,
    level: str | int = "INFO",
    **kwargs: t.Any,
) -> Logger:
    """Return a named logger sharing the core of the package logger.

    Args:
        name: Optional logger namespace.  If omitted (or given as a level name)
            the package logger is returned.
        level: Minimum level used when the package logger is first created.
        **kwargs: Extra keyword arguments forwarded to ``create_global_logger``.
    """
    if name and name.upper() in REVERSE_LOGLEVEL_MAPPING:
        level = name
        name = None
    if name is None: name = 'lazyholder'
    if name in _logger_contexts:
        return _logger_contexts[name]

    with _lock:
        if name in _logger_contexts:
            return _logger_contexts[name]
        if name == 'lazyholder':
            return create_global_logger(name = name, level = level, **kwargs)

        _logger = _logger_contexts.get('lazyholder') or create_global_logger(level = level)
        *options, extra = _logger._options
        new_logger = Logger(_logger._core, *options, {**extra})
        new_logger.name = name
        _logger_contexts[name] = new_logger
        return new_logger


def change_logger_level(level: str | int = "INFO") -> None:
    """Replace the handler of the package logger with one at ``level``.

    Named loggers share the package core, so the change applies to them too.
    """
    global logger_level
    name = "lazyholder"
    if isinstance(level, str):
        level = level.upper()
        if level not in REVERSE_LOGLEVEL_MAPPING:
            raise ValueError(f"Unknown log level: {level}")
    if level == logger_level: return
    with _lock:
        _logger = _logger_contexts[name]
        handler_id = _handler_ids.pop(name, None)
        if handler_id is not None: _logger.remove(handler_id)
        _handler_ids[name] = _logger.add(
            sys.stderr,
            backtrace = True,
            colorize = True,
            level = level,
            format = LoggerFormatter.default_formatter,
        )
        logger_level = level


def get_env_log_level(default: str = 'INFO') -> str:
    """Level named by ``LAZYHOLDER_LOG_LEVEL``, or ``default`` when unset or unknown."""
    level = os.getenv('LAZYHOLDER_LOG_LEVEL', default).strip().upper()
    return level if level in REVERSE_LOGLEVEL_MAPPING else default


logger_level: str | int = get_env_log_level()

get_logger = create_default_logger
logger = create_default_logger('lazyholder', level = logger_level)
default_logger = logger
