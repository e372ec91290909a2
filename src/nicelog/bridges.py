from __future__ import annotations

"""
Bridges that route records from the stdlib ``logging`` module and from
loguru into a nicelog Logger, keeping each record's own file and line.
"""

import logging
import traceback
import typing as t
from datetime import datetime

from loguru import logger as _loguru

from .static import LOGLEVEL_MAPPING
from .utils import get_stdlib_level

if t.TYPE_CHECKING:
    from loguru import Message
    from .base import Logger


def _resolve_target(logger: t.Optional['Logger']) -> 'Logger':
    if logger is not None:
        return logger
    from .main import get_default_logger
    return get_default_logger()


class InterceptHandler(logging.Handler):
    """
    A ``logging.Handler`` that forwards records to a nicelog Logger, or to
    the process-wide default logger when none is given.
    """

    def __init__(self, logger: t.Optional['Logger'] = None, level: int = logging.NOTSET):
        super().__init__(level)
        self.logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = get_stdlib_level(record.levelno)
            message = record.getMessage()
            if record.exc_info:
                message += '\n' + ''.join(traceback.format_exception(*record.exc_info)).rstrip('\n')
            _resolve_target(self.logger).output_record(
                level,
                message,
                file = record.pathname,
                line = record.lineno,
                time = datetime.fromtimestamp(record.created),
            )
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def install_intercept_handler(
    logger: t.Optional['Logger'] = None,
    level: int = logging.NOTSET,
) -> InterceptHandler:
    """
    Replaces the root stdlib handlers with an ``InterceptHandler``
    """
    handler = InterceptHandler(logger)
    logging.basicConfig(handlers = [handler], level = level, force = True)
    _loguru.debug('Installed stdlib intercept handler for {!r}', handler.logger or 'default logger')
    return handler


class LoguruSink:
    """
    A loguru sink forwarding messages to a nicelog Logger.

    Usage::

        from loguru import logger
        handler_id = logger.add(LoguruSink(my_logger), level = 0)

    CRITICAL records are written at FATAL but never terminate the process.
    """

    def __init__(self, logger: t.Optional['Logger'] = None):
        self.logger = logger

    def __call__(self, message: 'Message') -> None:
        record = message.record
        level = LOGLEVEL_MAPPING.get(record['level'].name)
        if level is None:
            level = get_stdlib_level(record['level'].no)
        text = record['message']
        exc = record['exception']
        if exc is not None and exc.type is not None:
            text += '\n' + ''.join(traceback.format_exception(exc.type, exc.value, exc.traceback)).rstrip('\n')
        _resolve_target(self.logger).output_record(
            level,
            text,
            file = record['file'].path,
            line = record['line'],
            time = record['time'],
        )


def install_loguru_sink(logger: t.Optional['Logger'] = None, level: t.Union[str, int] = 0, **kwargs: t.Any) -> int:
    """
    Adds a ``LoguruSink`` to the global loguru logger and returns the handler id
    """
    return _loguru.add(LoguruSink(logger), level = level, format = '{message}', **kwargs)


__all__ = [
    'InterceptHandler',
    'install_intercept_handler',
    'LoguruSink',
    'install_loguru_sink',
]
