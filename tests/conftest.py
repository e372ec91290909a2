import sys
import threading
from datetime import datetime, timezone
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from nicelog import Logger, get_default_logger, set_default_logger  # noqa: E402

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5, tzinfo = timezone.utc)


class RecordingSink:
    """Keeps every ``write`` call separately so tests can count them."""

    def __init__(self):
        self.writes: list[bytes] = []
        self._lock = threading.Lock()

    def write(self, data: bytes) -> int:
        with self._lock:
            self.writes.append(data)
        return len(data)

    @property
    def text(self) -> str:
        return b''.join(self.writes).decode()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_logger(sink, fixed_clock):
    def factory(prefix: str = '', flag: int = 0, **kwargs) -> Logger:
        kwargs.setdefault('clock', fixed_clock)
        return Logger(kwargs.pop('out', sink), prefix, flag, **kwargs)
    return factory


@pytest.fixture
def swap_default_logger():
    """Installs a logger as the process default for the duration of a test."""
    previous = get_default_logger()
    def install(logger: Logger) -> Logger:
        set_default_logger(logger)
        return logger
    yield install
    set_default_logger(previous)
