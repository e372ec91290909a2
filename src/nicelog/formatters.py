from __future__ import annotations

"""Line formatting for nicelog.

A formatter renders the metadata part of one log line (color, prefix, level
tag, timestamp, caller location) into the logger's scratch buffer. The
logger appends the message text itself afterwards.

Formatters are called while the logger's lock is held, so they must stay
pure: read only the ``LogMessage`` they are given, only append to the buffer,
and never call back into the ``Logger``.
"""

import dataclasses
import typing as t
from datetime import datetime

from .static import (
    LEVEL_COLORS,
    LEVEL_TAGS,
    RESET_COLOR,
    Lcolor,
    Ldate,
    Llevel,
    Llongfile,
    Lmicroseconds,
    Lshortfile,
    Ltime,
)
from .utils import encode_text, shorten_file


@dataclasses.dataclass(frozen = True)
class LogMessage:
    """Snapshot of one logging call and the logger settings at emission time."""

    time: datetime
    file: str
    line: int
    level: int

    # Settings from the emitting logger
    prefix: str
    flag: int


@t.runtime_checkable
class Formatter(t.Protocol):
    """Anything that can render a ``LogMessage`` into a byte buffer."""

    def __call__(self, msg: LogMessage, buf: bytearray) -> None:
        ...


class LoggerFormatter:
    """
    The default formatter.

    Subclass and override ``level_colors`` / ``level_tags`` to change the
    palette or tags without rewriting the rendering order.
    """

    level_colors: t.Dict[int, str] = LEVEL_COLORS
    level_tags: t.Dict[int, str] = LEVEL_TAGS
    reset_color: str = RESET_COLOR

    def __call__(self, msg: LogMessage, buf: bytearray) -> None:
        flag = msg.flag
        if flag & Lcolor:
            color = self.level_colors.get(msg.level)
            if color: buf += color.encode()

        buf += encode_text(msg.prefix)

        if flag & Llevel:
            tag = self.level_tags.get(msg.level)
            if tag: buf += encode_text(f'{tag} ')

        if flag & (Ldate | Ltime | Lmicroseconds):
            self.format_timestamp(msg.time, flag, buf)

        if flag & (Lshortfile | Llongfile):
            file = shorten_file(msg.file) if flag & Lshortfile else msg.file
            buf += encode_text(f'{file}:{msg.line}: ')

        if flag & Lcolor:
            buf += self.reset_color.encode()

    @staticmethod
    def format_timestamp(ts: datetime, flag: int, buf: bytearray) -> None:
        """Appends the ``YYYY/MM/DD `` and ``HH:MM:SS[.uuuuuu] `` segments."""
        if flag & Ldate:
            buf += f'{ts.year:04d}/{ts.month:02d}/{ts.day:02d} '.encode()
        if flag & (Ltime | Lmicroseconds):
            buf += f'{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}'.encode()
            if flag & Lmicroseconds:
                buf += f'.{ts.microsecond:06d}'.encode()
            buf += b' '


default_formatter = LoggerFormatter()


__all__ = [
    'LogMessage',
    'Formatter',
    'LoggerFormatter',
    'default_formatter',
]
