from __future__ import annotations

"""Exceptions raised by nicelog loggers."""


class LoggingError(Exception):
    """Base class for nicelog errors."""


class SinkWriteError(LoggingError, OSError):
    """
    Raised when the sink rejects a log line, or accepts only part of it.

    The original exception, if any, is chained as ``__cause__``.
    """


class LogPanic(LoggingError):
    """
    Raised by the ``panic`` entry points after the line has been emitted.

    Carries the formatted message so callers that recover from it can
    inspect what was logged.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


__all__ = ['LoggingError', 'SinkWriteError', 'LogPanic']
