# tests/test_logging_setup.py

from __future__ import annotations

import logging

from nova_tracker.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("nova_tracker.tasks.task_store", logging.DEBUG))


def test_console_filter_quiets_everything_else_below_error() -> None:
    f = _ConsoleNoiseFilter()
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("py.warnings", logging.ERROR))
