from __future__ import annotations

"""Leveled, colorized logging with the minimal-logger contract.

A ``Logger`` writes one line per call to a single sink under one lock. On top
of the conventional ``print``/``printf``/``println`` family it adds six
severity levels, a per-logger level filter, ANSI colors and a pluggable
formatter. The free functions exported here forward to a process-wide
default logger writing to ``sys.stderr``.

The ``default_logger`` attribute always returns the logger installed by the
latest ``set_default_logger`` call.

``print``/``printf``/``println`` are available as attributes but are left out
of ``__all__`` so a star import does not shadow the builtin ``print``.
"""

from loguru import logger as _loguru

from .version import VERSION
from .static import (
    Level,
    TRACE,
    DEBUG,
    INFO,
    WARN,
    ERROR,
    FATAL,
    Ldate,
    Ltime,
    Lmicroseconds,
    Llongfile,
    Lshortfile,
    LstdFlags,
    Lcolor,
    Llevel,
    LdefaultFlags,
    LEVEL_COLORS,
    LEVEL_TAGS,
    RESET_COLOR,
)
from .errors import LoggingError, SinkWriteError, LogPanic
from .formatters import LogMessage, Formatter, LoggerFormatter, default_formatter
from .base import Logger
from .settings import LoggerSettings
from .main import (
    create_default_logger,
    get_default_logger,
    set_default_logger,
    flags,
    set_flags,
    prefix,
    set_prefix,
    writer,
    set_output,
    formatter,
    set_formatter,
    default_level,
    set_default_level,
    level_filter,
    set_level_filter,
    would_log,
    output,
    log,
    print,
    printf,
    println,
    trace,
    tracef,
    traceln,
    debug,
    debugf,
    debugln,
    info,
    infof,
    infoln,
    warn,
    warnf,
    warnln,
    error,
    errorf,
    errorln,
    fatal,
    fatalf,
    fatalln,
    panic,
    panicf,
    panicln,
)
from .bridges import InterceptHandler, install_intercept_handler, LoguruSink, install_loguru_sink

# Library diagnostics stay quiet unless the application opts in
_loguru.disable('nicelog')

__version__ = VERSION


def __getattr__(name: str):
    if name == 'default_logger': return get_default_logger()
    raise AttributeError(f'module {__name__!r} has no attribute {name!r}')


__all__ = [
    "Level",
    "TRACE",
    "DEBUG",
    "INFO",
    "WARN",
    "ERROR",
    "FATAL",
    "Ldate",
    "Ltime",
    "Lmicroseconds",
    "Llongfile",
    "Lshortfile",
    "LstdFlags",
    "Lcolor",
    "Llevel",
    "LdefaultFlags",
    "LEVEL_COLORS",
    "LEVEL_TAGS",
    "RESET_COLOR",
    "LoggingError",
    "SinkWriteError",
    "LogPanic",
    "LogMessage",
    "Formatter",
    "LoggerFormatter",
    "default_formatter",
    "Logger",
    "LoggerSettings",
    "create_default_logger",
    "get_default_logger",
    "set_default_logger",
    "default_logger",
    "flags",
    "set_flags",
    "prefix",
    "set_prefix",
    "writer",
    "set_output",
    "formatter",
    "set_formatter",
    "default_level",
    "set_default_level",
    "level_filter",
    "set_level_filter",
    "would_log",
    "output",
    "log",
    "trace",
    "tracef",
    "traceln",
    "debug",
    "debugf",
    "debugln",
    "info",
    "infof",
    "infoln",
    "warn",
    "warnf",
    "warnln",
    "error",
    "errorf",
    "errorln",
    "fatal",
    "fatalf",
    "fatalln",
    "panic",
    "panicf",
    "panicln",
    "InterceptHandler",
    "install_intercept_handler",
    "LoguruSink",
    "install_loguru_sink",
]
