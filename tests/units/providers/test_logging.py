"""Unit tests for the logging provider."""

import logging

from licitax_advisor.providers.logging import LOGGER_NAME, ContextualFilter, LoggingProvider


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, "", 0, "", (), None)


def test_contextual_filter_with_correlation_id() -> None:
    """Tests that the filter adds the correlation_id to the record when it's set."""
    record = _record()

    with LoggingProvider().set_correlation_id("test-id"):
        ContextualFilter().filter(record)

    assert record.correlation_id == "test-id"


def test_contextual_filter_without_correlation_id() -> None:
    """Tests that the filter adds a default value when correlation_id is not set."""
    record = _record()

    ContextualFilter().filter(record)

    assert record.correlation_id == "-"


def test_correlation_id_is_cleared_after_context() -> None:
    """Tests that the correlation id does not leak out of its context."""
    with LoggingProvider().set_correlation_id("outer"):
        with LoggingProvider().set_correlation_id("inner"):
            pass
        record = _record()
        ContextualFilter().filter(record)
        assert record.correlation_id == "outer"

    record = _record()
    ContextualFilter().filter(record)
    assert record.correlation_id == "-"


def test_get_logger_returns_application_logger() -> None:
    """Tests that the provider hands out the named application logger."""
    logger = LoggingProvider().get_logger()
    assert logger.name == LOGGER_NAME
    assert LoggingProvider() is LoggingProvider()


def test_level_override() -> None:
    """Tests that a level override replaces the configured level."""
    logger = LoggingProvider().get_logger()
    original_level = logger.level
    try:
        LoggingProvider().get_logger(level_override="debug")
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(original_level)


def test_unknown_level_defaults_to_info() -> None:
    """Tests that an unknown level name falls back to INFO."""
    assert LoggingProvider._to_level("verbose") == logging.INFO
