from __future__ import annotations

import inspect
import sys
from pathlib import Path

import pytest

import nicelog
from nicelog import (
    INFO,
    WARN,
    Lcolor,
    LdefaultFlags,
    Llevel,
    Lshortfile,
    Logger,
    LoggerSettings,
    LogPanic,
    create_default_logger,
    get_default_logger,
    set_default_logger,
)


def test_default_logger_writes_to_stderr_with_default_flags(monkeypatch) -> None:
    monkeypatch.delenv('NO_COLOR', raising = False)
    logger = create_default_logger(settings = LoggerSettings())
    assert logger.writer() is sys.stderr
    assert logger.flags() == LdefaultFlags
    assert logger.level_filter() == INFO
    assert logger.default_level() == INFO


def test_default_logger_is_a_single_instance() -> None:
    assert get_default_logger() is get_default_logger()
    assert isinstance(nicelog.default_logger, Logger)


def test_set_default_logger_returns_previous(make_logger, swap_default_logger) -> None:
    before = get_default_logger()
    replacement = make_logger()
    assert set_default_logger(replacement) is before
    assert get_default_logger() is replacement
    set_default_logger(before)


def test_default_logger_attribute_follows_swaps(make_logger, swap_default_logger) -> None:
    replacement = swap_default_logger(make_logger())
    assert nicelog.default_logger is replacement
    assert nicelog.main.default_logger is replacement
    with pytest.raises(AttributeError):
        nicelog.no_such_attribute


def test_set_default_logger_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        set_default_logger(object())


def test_free_functions_forward_to_default(make_logger, sink, swap_default_logger) -> None:
    swap_default_logger(make_logger(flag = Llevel))
    nicelog.info('hello', 1)
    nicelog.warnf('%s:%d', 'port', 80)
    nicelog.errorln('a', 'b')
    nicelog.debug('hidden')
    nicelog.print('default')
    assert sink.writes == [b'[I] hello1\n', b'[W] port:80\n', b'[E] a b\n', b'[I] default\n']


def test_free_accessors_forward_to_default(make_logger, swap_default_logger) -> None:
    logger = swap_default_logger(make_logger())
    nicelog.set_flags(Lcolor)
    nicelog.set_prefix('x ')
    nicelog.set_level_filter('warn')
    nicelog.set_default_level(WARN)
    assert logger.flags() == nicelog.flags() == Lcolor
    assert logger.prefix() == nicelog.prefix() == 'x '
    assert nicelog.level_filter() == WARN
    assert nicelog.default_level() == WARN
    assert nicelog.would_log(INFO) is False
    assert nicelog.writer() is logger.writer()


def test_free_functions_resolve_user_call_site(make_logger, sink, swap_default_logger) -> None:
    swap_default_logger(make_logger(flag = Lshortfile))
    line = inspect.currentframe().f_lineno + 1
    nicelog.infof('%s', 'site')
    assert sink.text == f'{Path(__file__).name}:{line}: site\n'


def test_free_output_counts_from_its_caller(make_logger, sink, swap_default_logger) -> None:
    swap_default_logger(make_logger(flag = Lshortfile))
    line = inspect.currentframe().f_lineno + 1
    nicelog.output(1, INFO, 'direct')
    assert sink.text == f'{Path(__file__).name}:{line}: direct\n'


def test_free_fatal_and_panic(make_logger, sink, swap_default_logger) -> None:
    swap_default_logger(make_logger())
    with pytest.raises(SystemExit):
        nicelog.fatalf('code %d', 2)
    with pytest.raises(LogPanic):
        nicelog.panicln('stop')
    assert sink.writes == [b'code 2\n', b'stop\n']


def test_free_set_formatter(make_logger, sink, swap_default_logger) -> None:
    logger = swap_default_logger(make_logger())
    nicelog.set_formatter(lambda msg, buf: buf.extend(b'> '))
    nicelog.info('custom')
    assert sink.writes == [b'> custom\n']
    assert nicelog.formatter() is logger.formatter()


def test_print_is_not_star_exported() -> None:
    assert 'print' not in nicelog.__all__
    assert callable(nicelog.print)
