from __future__ import annotations

"""
The nicelog Logger: a single lock-protected writer with levels and flags
"""

import contextlib
import io
import os
import sys
import threading
import typing as t
from datetime import datetime

from loguru import logger as _diag

from .errors import LogPanic, SinkWriteError
from .formatters import Formatter, LogMessage, default_formatter
from .static import (
    DEBUG,
    ERROR,
    FATAL,
    INFO,
    TRACE,
    WARN,
    Level,
    Llongfile,
    LstdFlags,
    Lshortfile,
)
from .utils import encode_text, get_logging_level, sprint, sprintf, sprintln

if t.TYPE_CHECKING:
    from types import FrameType


class Sink(t.Protocol):
    def write(self, data: t.Any) -> t.Any: ...


LevelT = t.Union[Level, int, str]


def coerce_level(level: LevelT) -> int:
    """
    Level names are resolved through the level mapping,
    numbers are kept as given so custom thresholds still work
    """
    if isinstance(level, str):
        return get_logging_level(level)
    return level


def exit_process(code: int = 1) -> t.NoReturn:
    """
    Terminates the process with ``code``.

    On the main thread this raises ``SystemExit`` so ``atexit`` handlers run.
    ``SystemExit`` would only end a worker thread, so there the standard
    streams are flushed and the process exits immediately.
    """
    if threading.current_thread() is threading.main_thread():
        sys.exit(code)
    for stream in (sys.stdout, sys.stderr):
        with contextlib.suppress(OSError, ValueError, AttributeError):
            stream.flush()
    os._exit(code)


def resolve_caller(depth: int) -> t.Tuple[str, int]:
    """
    Returns the file and line ``depth`` frames above the function calling this
    function, or ``('???', 0)`` when the stack is not that deep
    """
    try:
        frame: 'FrameType' = sys._getframe(depth + 1)
    except ValueError:
        return '???', 0
    return frame.f_code.co_filename, frame.f_lineno


class Logger:
    """
    A leveled logger writing one line per call to a single sink.

    All state lives behind one lock, which also serializes writes, so a
    Logger can be shared freely between threads without lines interleaving.
    """

    def __init__(
        self,
        out: Sink,
        prefix: str = '',
        flag: int = LstdFlags,
        formatter: t.Optional[Formatter] = None,
        clock: t.Optional[t.Callable[[], datetime]] = None,
    ):
        self._lock = threading.Lock()
        self._flag = int(flag)
        self._out = out
        self._formatter = formatter or default_formatter
        self._buf = bytearray()
        self._prefix = prefix
        self._default_level: int = INFO
        self._level_filter: int = INFO
        self._clock = clock or datetime.now

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} prefix={self._prefix!r} flag={self._flag} level_filter={self._level_filter}>'

    """
    Output Pipeline
    """

    def output(self, calldepth: int, level: int, s: str) -> None:
        """
        Emits one log line.

        ``calldepth`` counts the frames to skip when resolving the caller
        location; 1 is the direct caller of ``output``. Lines below the level
        filter are dropped silently. Sink failures raise ``SinkWriteError``.
        """
        now = self._clock()
        file, line = '', 0
        try:
            with self._lock:
                if level < self._level_filter:
                    return

                if self._flag & (Lshortfile | Llongfile):
                    # Walk the stack without holding the lock
                    self._lock.release()
                    try:
                        file, line = resolve_caller(calldepth)
                    finally:
                        self._lock.acquire()

                self._emit(now, file, line, level, s)
        except SinkWriteError as e:
            # Lock is released here, so a loguru sink writing back to us is safe
            _diag.warning('Failed to write log line to {!r}: {}', self._out, e)
            raise

    def output_record(
        self,
        level: int,
        s: str,
        file: str = '???',
        line: int = 0,
        time: t.Optional[datetime] = None,
    ) -> None:
        """
        Emits a line whose caller location is already known, e.g. records
        forwarded from another logging framework
        """
        now = time or self._clock()
        with self._lock:
            if level < self._level_filter:
                return
            self._emit(now, file, line, level, s)

    def _emit(self, now: datetime, file: str, line: int, level: int, s: str) -> None:
        # Lock must be held
        buf = self._buf
        del buf[:]
        msg = LogMessage(now, file, line, level, self._prefix, self._flag)
        self._formatter(msg, buf)
        buf += encode_text(s)
        if s and not s.endswith('\n'):
            buf += b'\n'
        self._write(bytes(buf))

    def _write(self, data: bytes) -> None:
        out = self._out
        try:
            if isinstance(out, io.TextIOBase):
                out.write(data.decode('utf-8', errors = 'replace'))
                written = None
            else:
                written = out.write(data)
            flush = getattr(out, 'flush', None)
            if flush is not None: flush()
        except Exception as e:
            raise SinkWriteError(f'Failed to write log line: {e}') from e
        if isinstance(written, int) and not isinstance(written, bool) and written < len(data):
            raise SinkWriteError(f'Short write: {written} of {len(data)} bytes')

    """
    State Accessors
    """

    def formatter(self) -> Formatter:
        with self._lock:
            return self._formatter

    def set_formatter(self, formatter: t.Optional[Formatter]) -> None:
        """
        Replaces the formatter; ``None`` restores the default one.

        A line emitted concurrently with the swap may use either formatter.
        """
        if formatter is not None and not callable(formatter):
            raise TypeError(f'Formatter must be callable, got {type(formatter).__name__}')
        with self._lock:
            self._formatter = formatter or default_formatter
        _diag.debug('Formatter set to {!r}', formatter or default_formatter)

    def flags(self) -> int:
        with self._lock:
            return self._flag

    def set_flags(self, flag: int) -> None:
        with self._lock:
            self._flag = int(flag)

    def prefix(self) -> str:
        with self._lock:
            return self._prefix

    def set_prefix(self, prefix: str) -> None:
        with self._lock:
            self._prefix = prefix

    def writer(self) -> Sink:
        with self._lock:
            return self._out

    def set_output(self, out: Sink) -> None:
        with self._lock:
            self._out = out

    def default_level(self) -> int:
        with self._lock:
            return self._default_level

    def set_default_level(self, level: LevelT) -> None:
        level = coerce_level(level)
        with self._lock:
            self._default_level = level

    def level_filter(self) -> int:
        with self._lock:
            return self._level_filter

    def set_level_filter(self, level: LevelT) -> None:
        level = coerce_level(level)
        with self._lock:
            self._level_filter = level

    def would_log(self, level: LevelT) -> bool:
        """
        Whether a line at ``level`` would be written. Useful to skip building
        expensive arguments.
        """
        level = coerce_level(level)
        with self._lock:
            return level >= self._level_filter

    """
    Entry Points
    """

    def log(self, level: LevelT, *args: t.Any) -> None:
        self.output(2, coerce_level(level), sprint(*args))

    def print(self, *args: t.Any) -> None:
        """Logs at the logger's default level."""
        self.output(2, self.default_level(), sprint(*args))

    def printf(self, format: str, *args: t.Any) -> None:
        self.output(2, self.default_level(), sprintf(format, *args))

    def println(self, *args: t.Any) -> None:
        self.output(2, self.default_level(), sprintln(*args))

    def trace(self, *args: t.Any) -> None:
        self.output(2, TRACE, sprint(*args))

    def tracef(self, format: str, *args: t.Any) -> None:
        self.output(2, TRACE, sprintf(format, *args))

    def traceln(self, *args: t.Any) -> None:
        self.output(2, TRACE, sprintln(*args))

    def debug(self, *args: t.Any) -> None:
        self.output(2, DEBUG, sprint(*args))

    def debugf(self, format: str, *args: t.Any) -> None:
        self.output(2, DEBUG, sprintf(format, *args))

    def debugln(self, *args: t.Any) -> None:
        self.output(2, DEBUG, sprintln(*args))

    def info(self, *args: t.Any) -> None:
        self.output(2, INFO, sprint(*args))

    def infof(self, format: str, *args: t.Any) -> None:
        self.output(2, INFO, sprintf(format, *args))

    def infoln(self, *args: t.Any) -> None:
        self.output(2, INFO, sprintln(*args))

    def warn(self, *args: t.Any) -> None:
        self.output(2, WARN, sprint(*args))

    def warnf(self, format: str, *args: t.Any) -> None:
        self.output(2, WARN, sprintf(format, *args))

    def warnln(self, *args: t.Any) -> None:
        self.output(2, WARN, sprintln(*args))

    def error(self, *args: t.Any) -> None:
        self.output(2, ERROR, sprint(*args))

    def errorf(self, format: str, *args: t.Any) -> None:
        self.output(2, ERROR, sprintf(format, *args))

    def errorln(self, *args: t.Any) -> None:
        self.output(2, ERROR, sprintln(*args))

    def fatal(self, *args: t.Any) -> None:
        """
        Logs at FATAL, then exits with status 1.

        The exit happens even if the line was filtered out or the write failed.
        Called from a worker thread it ends the whole process, not only the thread.
        """
        try:
            self.output(2, FATAL, sprint(*args))
        finally:
            exit_process(1)

    def fatalf(self, format: str, *args: t.Any) -> None:
        try:
            self.output(2, FATAL, sprintf(format, *args))
        finally:
            exit_process(1)

    def fatalln(self, *args: t.Any) -> None:
        try:
            self.output(2, FATAL, sprintln(*args))
        finally:
            exit_process(1)

    def panic(self, *args: t.Any) -> None:
        """
        Logs at FATAL, then raises ``LogPanic`` with the message.
        """
        s = sprint(*args)
        try:
            self.output(2, FATAL, s)
        finally:
            raise LogPanic(s)

    def panicf(self, format: str, *args: t.Any) -> None:
        s = sprintf(format, *args)
        try:
            self.output(2, FATAL, s)
        finally:
            raise LogPanic(s)

    def panicln(self, *args: t.Any) -> None:
        s = sprintln(*args)
        try:
            self.output(2, FATAL, s)
        finally:
            raise LogPanic(s)


__all__ = ['Logger', 'Sink', 'coerce_level', 'exit_process', 'resolve_caller']
