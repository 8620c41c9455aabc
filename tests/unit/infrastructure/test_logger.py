"""Tests for logging setup."""

import logging

from patterncatalog.config.schemas import LoggingConfig
from patterncatalog.infrastructure.logging.logger import get_logger, setup_logging


def test_file_destination_writes_structured_lines(tmp_path):
    # Arrange
    log_file = tmp_path / "logs" / "patterns.log"
    config = LoggingConfig(level="INFO", destination="file", file_path=str(log_file))

    try:
        # Act
        setup_logging(config)
        get_logger("patterncatalog.test").info("Demonstration finished", demonstration="observer")
        for handler in logging.getLogger().handlers:
            handler.flush()

        # Assert
        content = log_file.read_text()
        assert "Demonstration finished" in content
        assert "demonstration='observer'" in content
    finally:
        setup_logging(LoggingConfig(level="WARNING", destination="stdout"))


def test_setup_replaces_root_handlers():
    setup_logging(LoggingConfig(level="ERROR", destination="stdout"))
    try:
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.ERROR
    finally:
        setup_logging(LoggingConfig(level="WARNING", destination="stdout"))


def test_console_destination_writes_to_stderr(capsys):
    setup_logging(LoggingConfig(level="INFO", destination="stdout"))
    try:
        get_logger("patterncatalog.test").info("Running demonstration", demonstration="state")
        for handler in logging.getLogger().handlers:
            handler.flush()

        captured = capsys.readouterr()
        assert "Running demonstration" in captured.err
        assert captured.out == ""
    finally:
        setup_logging(LoggingConfig(level="WARNING", destination="stdout"))
