"""Tests for LoggingConfig"""

import logging

import pytest

from canvas_export.utils.logging_config import LoggingConfig


@pytest.fixture
def fresh_logging(monkeypatch):
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.setattr(LoggingConfig, '_initialized', False)
    monkeypatch.setattr(LoggingConfig, '_log_file_path', None)
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers and type(handler) in (logging.FileHandler, logging.StreamHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_writes_log_file(fresh_logging, tmp_path):
    log_dir = tmp_path / 'logs'
    LoggingConfig.setup_logging(log_dir)

    logging.getLogger('canvas_export.test').debug('debug detail')

    log_file = LoggingConfig.get_log_file_path()
    assert log_file == log_dir / 'canvas_export.log'
    for handler in fresh_logging.handlers:
        handler.flush()
    text = log_file.read_text(encoding='utf-8')
    assert '[DEBUG] canvas_export.test: debug detail' in text


def test_setup_runs_once(fresh_logging, tmp_path):
    LoggingConfig.setup_logging(tmp_path)
    count = len(fresh_logging.handlers)

    LoggingConfig.setup_logging(tmp_path)
    assert len(fresh_logging.handlers) == count


def test_unusable_log_dir_keeps_console(fresh_logging, tmp_path):
    blocker = tmp_path / 'blocker'
    blocker.write_text('not a folder')

    LoggingConfig.setup_logging(blocker / 'logs')

    assert LoggingConfig.get_log_file_path() is None
    assert any(type(h) is logging.StreamHandler for h in fresh_logging.handlers)


def test_console_level(fresh_logging, tmp_path):
    LoggingConfig.setup_logging(tmp_path, console_level=logging.WARNING)

    console = [h for h in fresh_logging.handlers if type(h) is logging.StreamHandler]
    files = [h for h in fresh_logging.handlers if isinstance(h, logging.FileHandler)]
    assert [h.level for h in console] == [logging.WARNING]
    assert [h.level for h in files] == [logging.DEBUG]
