"""Unit tests for logging configuration."""

import logging
from collections.abc import Generator

import pytest

from esclient.logging import LogLevel, get_logger, setup_logging


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_logging(self) -> Generator[None, None, None]:
        """Restore the logging configuration touched by the tests."""
        root = logging.getLogger()
        root_level = root.level
        root_handlers = root.handlers[:]
        engine_level = logging.getLogger("opensearch").level

        yield

        root.handlers[:] = root_handlers
        root.setLevel(root_level)
        logging.getLogger("opensearch").setLevel(engine_level)

    def test_returns_package_logger(self) -> None:
        """Test the package logger is returned."""
        logger = setup_logging(LogLevel.DEBUG)

        assert logger.name == "esclient"
        assert logging.getLogger().level == logging.DEBUG

    def test_accepts_level_names(self) -> None:
        """Test levels can be given as strings, in any case."""
        setup_logging("warning")

        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_defaults_to_info(self) -> None:
        """Test an unknown level name falls back to INFO."""
        setup_logging("chatty")

        assert logging.getLogger().level == logging.INFO

    def test_request_logger_is_quiet_by_default(self) -> None:
        """Test the connection's request logger stays at WARNING."""
        setup_logging(LogLevel.DEBUG)

        assert logging.getLogger("opensearch").level == logging.WARNING

    def test_request_tracing(self) -> None:
        """Test request tracing leaves the connection logger alone."""
        logging.getLogger("opensearch").setLevel(logging.NOTSET)

        setup_logging(LogLevel.DEBUG, trace_requests=True)

        assert logging.getLogger("opensearch").level == logging.NOTSET

    def test_format_without_timestamp(self) -> None:
        """Test timestamps can be left out."""
        setup_logging(LogLevel.INFO, include_timestamp=False)

        formatter = logging.getLogger().handlers[0].formatter
        assert formatter is not None
        assert "asctime" not in formatter._fmt


@pytest.mark.unit
def test_get_logger() -> None:
    """Test module loggers are plain named loggers."""
    assert get_logger("esclient.transport") is logging.getLogger("esclient.transport")
