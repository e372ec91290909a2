from __future__ import annotations

"""Level and flag constants shared by every nicelog component."""

from enum import IntEnum


class Level(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


TRACE = Level.TRACE
DEBUG = Level.DEBUG
INFO = Level.INFO
WARN = Level.WARN
ERROR = Level.ERROR
FATAL = Level.FATAL

# Same bit layout as the minimal logger
Ldate = 1
Ltime = 2
Lmicroseconds = 4
Llongfile = 8
Lshortfile = 16
LstdFlags = Ldate | Ltime

# Extensions
Lcolor = Lshortfile << 1
Llevel = Lshortfile << 2

LdefaultFlags = LstdFlags | Lcolor | Llevel

LEVEL_COLORS = {
    TRACE: '\x1b[34m',  # Blue
    DEBUG: '\x1b[34m',  # Blue
    INFO: '\x1b[32m',   # Green
    WARN: '\x1b[33m',   # Yellow
    ERROR: '\x1b[31m',  # Red
    FATAL: '\x1b[31m',  # Red
}

LEVEL_TAGS = {
    TRACE: '[T]',
    DEBUG: '[D]',
    INFO: '[I]',
    WARN: '[W]',
    ERROR: '[E]',
    FATAL: '[F]',
}

RESET_COLOR = '\x1b[0m'

LOGLEVEL_MAPPING = {
    'TRACE': TRACE,
    'DEBUG': DEBUG,
    'DEV': DEBUG,
    'INFO': INFO,
    'SUCCESS': INFO,
    'WARN': WARN,
    'WARNING': WARN,
    'ERROR': ERROR,
    'FATAL': FATAL,
    'CRITICAL': FATAL,
}

# stdlib / loguru numeric levels
STDLIB_LOGLEVEL_MAPPING = {
    50: FATAL,
    40: ERROR,
    30: WARN,
    25: INFO,
    20: INFO,
    10: DEBUG,
    5: TRACE,
}
