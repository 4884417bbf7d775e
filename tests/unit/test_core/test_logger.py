"""Tests for logging setup."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from rich.logging import RichHandler

from gochef.core.config import LoggingSettings
from gochef.core.logger import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_rich_handler(self) -> None:
        setup_logging(LoggingSettings())

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0], RichHandler)

    def test_level_override(self) -> None:
        """Test that an explicit level wins over settings."""
        setup_logging(LoggingSettings(level="ERROR"), level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_plain_handler(self) -> None:
        setup_logging(LoggingSettings(use_rich=False))

        handler = logging.getLogger().handlers[0]
        assert type(handler) is logging.StreamHandler

    def test_file_handler(self, tmp_path: Path) -> None:
        """Test that records are also written to the log file."""
        log_file = tmp_path / "logs" / "gochef.log"
        setup_logging(LoggingSettings(file=log_file, level="INFO"))

        get_logger("gochef.test").info("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello from test" in log_file.read_text()


class TestGetLogger:
    def test_cached(self) -> None:
        assert get_logger("gochef.x") is get_logger("gochef.x")
