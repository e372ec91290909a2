from __future__ import annotations

"""Process-wide default logger and the free functions that forward to it.

The default logger is built once at import time from ``LoggerSettings`` and
writes to ``sys.stderr``. Applications and tests that need a different one can
swap it with :func:`set_default_logger`; the free functions always resolve the
current default at call time.
"""

import sys
import threading
import typing as t

from .base import Logger, LevelT, Sink, coerce_level, exit_process
from .errors import LogPanic
from .formatters import Formatter
from .settings import LoggerSettings
from .static import DEBUG, ERROR, FATAL, INFO, TRACE, WARN
from .utils import sprint, sprintf, sprintln

_lock = threading.Lock()

__all__ = [
    "create_default_logger",
    "get_default_logger",
    "set_default_logger",
    "default_logger",
]


def create_default_logger(
    out: t.Optional[Sink] = None,
    settings: t.Optional[LoggerSettings] = None,
    **kwargs: t.Any,
) -> Logger:
    """Build a Logger configured from the environment.

    Args:
        out: Sink to write to. Defaults to ``sys.stderr``.
        settings: Explicit settings. When omitted they are read from the
            ``NICELOG_*`` environment variables, with ``kwargs`` taking
            precedence over the environment.
        **kwargs: Field overrides forwarded to :class:`LoggerSettings`.

    Returns:
        Logger: A new, independent logger.
    """
    if settings is None:
        settings = LoggerSettings(**kwargs)
    _logger = Logger(
        out if out is not None else sys.stderr,
        prefix = settings.prefix,
        flag = settings.resolved_flags(),
    )
    _logger.set_level_filter(settings.resolved_level())
    _logger.set_default_level(settings.default_level)
    return _logger


def get_default_logger() -> Logger:
    """Return the logger the free functions currently forward to."""
    return _default_logger


def set_default_logger(logger: Logger) -> Logger:
    """Replace the process-wide logger and return the previous one."""
    global _default_logger
    if not isinstance(logger, Logger):
        raise TypeError(f'Expected a Logger, got {type(logger).__name__}')
    with _lock:
        previous = _default_logger
        _default_logger = logger
    return previous


_default_logger: Logger = create_default_logger()


def __getattr__(name: str) -> t.Any:
    # ``default_logger`` always reflects the current default
    if name == 'default_logger': return _default_logger
    raise AttributeError(f'module {__name__!r} has no attribute {name!r}')


"""
Accessors
"""

def flags() -> int:
    return _default_logger.flags()

def set_flags(flag: int) -> None:
    _default_logger.set_flags(flag)

def prefix() -> str:
    return _default_logger.prefix()

def set_prefix(prefix: str) -> None:
    _default_logger.set_prefix(prefix)

def writer() -> Sink:
    return _default_logger.writer()

def set_output(out: Sink) -> None:
    _default_logger.set_output(out)

def formatter() -> Formatter:
    return _default_logger.formatter()

def set_formatter(formatter: t.Optional[Formatter]) -> None:
    _default_logger.set_formatter(formatter)

def default_level() -> int:
    return _default_logger.default_level()

def set_default_level(level: LevelT) -> None:
    _default_logger.set_default_level(level)

def level_filter() -> int:
    return _default_logger.level_filter()

def set_level_filter(level: LevelT) -> None:
    _default_logger.set_level_filter(level)

def would_log(level: LevelT) -> bool:
    return _default_logger.would_log(level)


"""
Entry Points

Each one calls ``output`` directly so that a depth of 2 resolves to the
caller of the free function.
"""

def output(calldepth: int, level: int, s: str) -> None:
    _default_logger.output(calldepth + 1, level, s)

def log(level: LevelT, *args: t.Any) -> None:
    _default_logger.output(2, coerce_level(level), sprint(*args))

def print(*args: t.Any) -> None:
    _default_logger.output(2, _default_logger.default_level(), sprint(*args))

def printf(format: str, *args: t.Any) -> None:
    _default_logger.output(2, _default_logger.default_level(), sprintf(format, *args))

def println(*args: t.Any) -> None:
    _default_logger.output(2, _default_logger.default_level(), sprintln(*args))

def trace(*args: t.Any) -> None:
    _default_logger.output(2, TRACE, sprint(*args))

def tracef(format: str, *args: t.Any) -> None:
    _default_logger.output(2, TRACE, sprintf(format, *args))

def traceln(*args: t.Any) -> None:
    _default_logger.output(2, TRACE, sprintln(*args))

def debug(*args: t.Any) -> None:
    _default_logger.output(2, DEBUG, sprint(*args))

def debugf(format: str, *args: t.Any) -> None:
    _default_logger.output(2, DEBUG, sprintf(format, *args))

def debugln(*args: t.Any) -> None:
    _default_logger.output(2, DEBUG, sprintln(*args))

def info(*args: t.Any) -> None:
    _default_logger.output(2, INFO, sprint(*args))

def infof(format: str, *args: t.Any) -> None:
    _default_logger.output(2, INFO, sprintf(format, *args))

def infoln(*args: t.Any) -> None:
    _default_logger.output(2, INFO, sprintln(*args))

def warn(*args: t.Any) -> None:
    _default_logger.output(2, WARN, sprint(*args))

def warnf(format: str, *args: t.Any) -> None:
    _default_logger.output(2, WARN, sprintf(format, *args))

def warnln(*args: t.Any) -> None:
    _default_logger.output(2, WARN, sprintln(*args))

def error(*args: t.Any) -> None:
    _default_logger.output(2, ERROR, sprint(*args))

def errorf(format: str, *args: t.Any) -> None:
    _default_logger.output(2, ERROR, sprintf(format, *args))

def errorln(*args: t.Any) -> None:
    _default_logger.output(2, ERROR, sprintln(*args))

def fatal(*args: t.Any) -> None:
    try:
        _default_logger.output(2, FATAL, sprint(*args))
    finally:
        exit_process(1)

def fatalf(format: str, *args: t.Any) -> None:
    try:
        _default_logger.output(2, FATAL, sprintf(format, *args))
    finally:
        exit_process(1)

def fatalln(*args: t.Any) -> None:
    try:
        _default_logger.output(2, FATAL, sprintln(*args))
    finally:
        exit_process(1)

def panic(*args: t.Any) -> None:
    s = sprint(*args)
    try:
        _default_logger.output(2, FATAL, s)
    finally:
        raise LogPanic(s)

def panicf(format: str, *args: t.Any) -> None:
    s = sprintf(format, *args)
    try:
        _default_logger.output(2, FATAL, s)
    finally:
        raise LogPanic(s)

def panicln(*args: t.Any) -> None:
    s = sprintln(*args)
    try:
        _default_logger.output(2, FATAL, s)
    finally:
        raise LogPanic(s)
