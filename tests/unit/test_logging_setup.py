# ABOUTME: Unit tests for the logging_setup module.
# ABOUTME: Level selection and the Rich handler attached to the package logger.

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler

from shelfparse.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    logger = logging.getLogger("shelfparse")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_setup(self) -> None:
        logger = setup_logging()
        assert logger.name == "shelfparse"
        assert logger.level == logging.WARNING

    def test_custom_log_level(self) -> None:
        assert setup_logging(log_level="DEBUG").level == logging.DEBUG

    def test_case_insensitive_log_level(self) -> None:
        assert setup_logging(log_level="error").level == logging.ERROR

    def test_invalid_log_level_defaults_to_warning(self) -> None:
        assert setup_logging(log_level="LOUD").level == logging.WARNING

    def test_single_rich_handler(self) -> None:
        setup_logging()
        logger = setup_logging(log_level="INFO")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.handlers[0].level == logging.INFO

    def test_module_loggers_inherit_level(self) -> None:
        setup_logging(log_level="ERROR")
        child = logging.getLogger("shelfparse.parsing.basic")
        assert child.getEffectiveLevel() == logging.ERROR
