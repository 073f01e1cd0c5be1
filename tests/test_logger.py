# File: tests/test_logger.py
import logging
from logging.handlers import RotatingFileHandler

import pytest
from robots_policy.logger import LOGGER_NAME, init_logging


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    init_logging()


def test_default_handlers_are_console_only():
    lg = init_logging()
    assert lg is logging.getLogger(LOGGER_NAME)
    assert lg.level == logging.WARNING
    assert lg.propagate is False
    assert len(lg.handlers) == 1
    assert not isinstance(lg.handlers[0], RotatingFileHandler)


def test_log_file_attaches_rotating_handler(tmp_path):
    log_file = tmp_path / "robots.log"
    lg = init_logging(level="DEBUG", log_file=log_file, log_format="%(levelname)s %(message)s")

    file_handlers = [h for h in lg.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(log_file)
    assert file_handlers[0].maxBytes == 5 * 1024 * 1024
    assert file_handlers[0].backupCount == 3

    lg.debug("parsed %d groups", 2)
    file_handlers[0].flush()
    assert log_file.read_text(encoding="utf-8") == "DEBUG parsed 2 groups\n"


def test_reinit_replaces_handlers(tmp_path):
    init_logging(log_file=tmp_path / "a.log")
    lg = init_logging(level="INFO")
    assert lg.level == logging.INFO
    assert len(lg.handlers) == 1
    assert not any(isinstance(h, RotatingFileHandler) for h in lg.handlers)
