from __future__ import annotations

"""Argument rendering and level helpers used by the entry points."""

import os
import typing as t

from .static import Level, LOGLEVEL_MAPPING, STDLIB_LOGLEVEL_MAPPING

STDLIB_MIN_LEVELNO = 10


def format_item(item: t.Any) -> str:
    """Render a single operand the way the default ``%v`` verb would."""

    if isinstance(item, str):
        return item
    if isinstance(item, (bytes, bytearray)):
        return bytes(item).decode('utf-8', errors='replace')
    return str(item)


def sprint(*args: t.Any) -> str:
    """
    Concatenate the operands, adding a space between two operands
    when neither of them is a string
    """
    rendered = ''
    prev_is_str = True
    for n, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if n > 0 and not is_str and not prev_is_str:
            rendered += ' '
        rendered += format_item(arg)
        prev_is_str = is_str
    return rendered


def sprintln(*args: t.Any) -> str:
    """Join the operands with single spaces and terminate with a newline."""

    return ' '.join(format_item(arg) for arg in args) + '\n'


def sprintf(format: str, *args: t.Any) -> str:
    """%-style formatting; the format is used verbatim when there are no args."""

    if not args:
        return format
    return format % args


def encode_text(s: str) -> bytes:
    """UTF-8 encode, escaping lone surrogates (e.g. from undecodable file names)."""

    return s.encode('utf-8', errors = 'backslashreplace')


def get_logging_level(level: t.Union[str, int, Level]) -> int:
    """
    Normalise a level name, a nicelog level number or a stdlib/loguru
    level number (10 and above) into a ``Level``. Any other number is
    kept as given so custom thresholds like 6 still silence everything.

    >>> get_logging_level('warning')
    <Level.WARN: 3>
    """
    if isinstance(level, Level):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return get_logging_level(int(name))
        if name not in LOGLEVEL_MAPPING:
            raise ValueError(f'Unknown log level: {level!r}')
        return LOGLEVEL_MAPPING[name]
    if isinstance(level, int):
        try:
            return Level(level)
        except ValueError:
            pass
        if level >= STDLIB_MIN_LEVELNO:
            return get_stdlib_level(level)
        return level
    raise TypeError(f'Invalid log level type: {type(level).__name__}')


def get_stdlib_level(levelno: int) -> Level:
    """Maps a stdlib or loguru level number onto the closest band at or below it."""

    if levelno in STDLIB_LOGLEVEL_MAPPING:
        return STDLIB_LOGLEVEL_MAPPING[levelno]
    for number in sorted(STDLIB_LOGLEVEL_MAPPING, reverse = True):
        if levelno >= number:
            return STDLIB_LOGLEVEL_MAPPING[number]
    return Level.TRACE


def shorten_file(file: str) -> str:
    """Strip everything up to and including the last path separator."""

    idx = file.rfind('/')
    if os.sep != '/':
        idx = max(idx, file.rfind(os.sep))
    return file[idx + 1:] if idx != -1 else file


__all__ = [
    'format_item',
    'sprint',
    'sprintln',
    'sprintf',
    'encode_text',
    'get_logging_level',
    'get_stdlib_level',
    'shorten_file',
]
