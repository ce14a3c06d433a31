"""
Tests for logging setup helpers
"""

import logging

from petrovich.utils import LoggingMixin, get_logger, log_error, setup_logging


class Worker(LoggingMixin):
    pass


def test_setup_logging_level_override():
    setup_logging(log_level="DEBUG")
    assert logging.getLogger("petrovich").level == logging.DEBUG
    setup_logging()
    assert logging.getLogger("petrovich").level == logging.INFO


def test_setup_logging_missing_file_falls_back(tmp_path):
    setup_logging(config_path=str(tmp_path / "missing.yml"), log_level="WARNING")


def test_log_error_includes_context(caplog):
    logger = get_logger("log_error_tests")
    with caplog.at_level(logging.ERROR, logger="log_error_tests"):
        log_error(logger, ValueError("bad"), "loading")
    assert "loading - ValueError: bad" in caplog.text


def test_logging_mixin_logger_name():
    worker = Worker()
    assert worker.logger.name.endswith("test_logging_setup.Worker")
    assert worker.logger is worker.logger
