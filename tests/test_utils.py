from __future__ import annotations

import pytest

from nicelog.static import DEBUG, ERROR, FATAL, INFO, TRACE, WARN, Lcolor, Llevel, Lshortfile
from nicelog.utils import get_logging_level, get_stdlib_level, shorten_file, sprint, sprintf, sprintln


def test_sprint_spaces_only_between_non_strings() -> None:
    assert sprint() == ''
    assert sprint('a', 'b') == 'ab'
    assert sprint(1, 2, 3) == '1 2 3'
    assert sprint('n=', 1, 2.5, 'x', True) == 'n=1 2.5xTrue'
    assert sprint(b'raw', 1) == 'raw 1'


def test_sprintln_always_spaces_and_terminates() -> None:
    assert sprintln('a', 'b', 1) == 'a b 1\n'
    assert sprintln() == '\n'


def test_sprintf() -> None:
    assert sprintf('%s-%03d', 'id', 7) == 'id-007'
    assert sprintf('50%') == '50%'


@pytest.mark.parametrize('value, expected', [
    ('trace', TRACE), ('DEBUG', DEBUG), ('dev', DEBUG), ('info', INFO),
    ('success', INFO), ('warn', WARN), ('WARNING', WARN), ('error', ERROR),
    ('fatal', FATAL), ('critical', FATAL), (' Info ', INFO), ('3', WARN),
    (0, TRACE), (5, FATAL), (10, DEBUG), (20, INFO), (25, INFO), (35, WARN), (60, FATAL),
])
def test_get_logging_level(value, expected) -> None:
    assert get_logging_level(value) is expected


@pytest.mark.parametrize('value', [6, '6', ' 6 ', 9, '9'])
def test_get_logging_level_keeps_custom_thresholds(value) -> None:
    level = get_logging_level(value)
    assert level == int(str(value).strip())
    assert level > FATAL


def test_get_logging_level_rejects_unknowns() -> None:
    with pytest.raises(ValueError):
        get_logging_level('noisy')
    with pytest.raises(TypeError):
        get_logging_level(1.5)


def test_stdlib_levels_below_trace_band() -> None:
    assert get_stdlib_level(1) is TRACE
    assert get_stdlib_level(5) is TRACE
    assert get_stdlib_level(45) is ERROR


def test_shorten_file() -> None:
    assert shorten_file('a/b/c.go') == 'c.go'
    assert shorten_file('c.go') == 'c.go'
    assert shorten_file('/abs/') == ''


def test_extension_bits_follow_conventional_layout() -> None:
    assert Lcolor == Lshortfile << 1 == 32
    assert Llevel == Lshortfile << 2 == 64
