"""Tests for common.logging module."""

import logging
import sys
from pathlib import Path

import pytest

from redmine_cli.common.logging import setup_logging


@pytest.fixture
def logger_name(request):
    """Unique logger per test; handlers are removed afterwards."""
    name = f"redmine_cli_test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestSetupLogging:
    """Test setup_logging function."""

    def test_default_level_and_stderr(self, logger_name):
        logger = setup_logging(logger_name)

        assert logger.level == logging.WARNING
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
        assert logger.handlers[0].stream is sys.stderr

    def test_custom_level(self, logger_name):
        assert setup_logging(logger_name, level=logging.DEBUG).level == logging.DEBUG
        assert setup_logging(logger_name, level="error").level == logging.ERROR

    def test_log_file_receives_records(self, tmp_path, logger_name):
        log_file = tmp_path / "logs" / "redmine.log"
        logger = setup_logging(logger_name, level="INFO", log_file=log_file)

        logger.info("Dispatching issues")
        for handler in logger.handlers:
            handler.flush()

        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert Path(file_handlers[0].baseFilename) == log_file
        assert "INFO - Dispatching issues" in log_file.read_text()

    def test_repeated_calls_keep_handlers(self, logger_name):
        first = setup_logging(logger_name)
        second = setup_logging(logger_name, level="DEBUG")

        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.DEBUG
