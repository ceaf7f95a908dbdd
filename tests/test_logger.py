"""
Tests for logging setup.
"""

import logging

import pytest

from tptweak.utils import TWEAK_LOGGER, get_log_dir, set_tweak_log_level, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    tweak_level = logging.getLogger(TWEAK_LOGGER).level
    yield
    logging.getLogger(TWEAK_LOGGER).setLevel(tweak_level)
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only():
    logger = setup_logging(log_level="DEBUG", log_file=False)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_file_handler_under_cache_dir(tmp_path, monkeypatch):
    monkeypatch.setattr("tptweak.utils.logger.os.name", "posix")
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))

    logger = setup_logging(log_file=True)

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert get_log_dir() == tmp_path / "tptweak" / "logs"
    assert list((tmp_path / "tptweak" / "logs").glob("tptweak_*.log"))


def test_unknown_level_falls_back_to_info():
    logger = setup_logging(log_level="chatty", log_file=False)
    assert logger.level == logging.INFO


def test_tweak_level_separate_from_root():
    setup_logging(log_level="WARNING", log_file=False, tweak_level="DEBUG")
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("tptweak.core.store").getEffectiveLevel() == logging.DEBUG


def test_tweak_level_none_inherits_root():
    set_tweak_log_level("ERROR")
    setup_logging(log_level="WARNING", log_file=False)
    assert logging.getLogger(TWEAK_LOGGER).level == logging.NOTSET
    assert logging.getLogger("tptweak.core.store").getEffectiveLevel() == logging.WARNING
