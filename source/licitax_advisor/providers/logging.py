"""Application logging.

Everything logs through the `licitax_advisor` logger, which `LoggingProvider`
configures once. Each line carries the correlation id of the HTTP request
being served. The id lives in a context variable, so it follows a request into
the worker thread FastAPI runs synchronous endpoints in.
"""

from __future__ import annotations

import sys
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from logging import Filter, Formatter, Logger, LogRecord, StreamHandler, _nameToLevel, getLogger

from licitax_advisor.providers.config import ConfigProvider

__all__ = ["ContextualFilter", "Logger", "LoggingProvider"]

LOGGER_NAME = "licitax_advisor"

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class ContextualFilter(Filter):
    """Stamps records with the current correlation id, or `-` outside a request."""

    def filter(self, record: LogRecord) -> bool:
        """Adds the correlation ID of the current context to the log record.

        Args:
            record: The log record to be filtered.

        Returns:
            True; no record is dropped.
        """
        record.correlation_id = _correlation_id.get() or "-"
        return True


class LoggingProvider:
    """Hands out the application logger, configuring it on first use.

    The provider is a singleton: the handler is attached once and the level
    comes from `LOG_LEVEL` unless the CLI overrides it.
    """

    _instance: LoggingProvider | None = None
    _logger: Logger | None = None
    _is_configured: bool = False

    def __new__(cls) -> LoggingProvider:
        """Returns the one provider instance."""
        if not cls._instance:  # pragma: no cover
            cls._instance = super().__new__(cls)
        return cls._instance

    def _configure_logger(self) -> Logger:
        """Configures the application logger. This is called only once.

        Returns:
            The configured logger instance.
        """
        logger = getLogger(LOGGER_NAME)

        if self._is_configured:  # pragma: no cover
            return logger

        config = ConfigProvider.get_config()
        logger.setLevel(self._to_level(config.LOG_LEVEL))

        if not logger.handlers:
            handler = StreamHandler(sys.stderr)
            formatter = Formatter(
                "%(asctime)s - %(name)s - [%(levelname)s] [%(correlation_id)s] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            handler.setFormatter(formatter)
            handler.addFilter(ContextualFilter())
            logger.addHandler(handler)

        LoggingProvider._is_configured = True
        logger.debug(f"Logger configured with level: {config.LOG_LEVEL}")
        return logger

    @staticmethod
    def _to_level(level_name: str) -> int:
        """Resolves a level name such as 'debug' to its numeric value.

        Args:
            level_name: The case-insensitive level name.

        Returns:
            The numeric level, defaulting to INFO for unknown names.
        """
        return _nameToLevel.get(level_name.upper(), _nameToLevel["INFO"])

    def get_logger(self, level_override: str | None = None) -> Logger:
        """Returns the configured logger instance.

        The logger is configured lazily on first use, which keeps module
        imports and test setups free of side effects.

        Args:
            level_override: An optional level name that replaces the
                configured level, used by the CLI `--log-level` option.

        Returns:
            The configured logger instance.
        """
        if not LoggingProvider._logger:
            LoggingProvider._logger = self._configure_logger()
        if level_override:
            LoggingProvider._logger.setLevel(self._to_level(level_override))
        return LoggingProvider._logger

    @contextmanager
    def set_correlation_id(self, correlation_id: str) -> Generator[None, None, None]:
        """Tags every record logged inside the block with `correlation_id`.

        The previous value is restored on exit, so blocks can nest.

        Args:
            correlation_id: The id of the request being served.

        Yields:
            None.
        """
        token = _correlation_id.set(correlation_id)
        try:
            yield
        finally:
            _correlation_id.reset(token)
