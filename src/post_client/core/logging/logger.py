"""
Structured logger used by the clients when logging is enabled.
"""

import logging
from typing import Optional, Any

from .config import LoggingConfig, LogLevel
from .formatters import get_formatter
from .filters import CorrelationIdFilter, ExtraFieldsFilter
from .handlers import create_console_handler, create_file_handler


class PostClientLogger:
    """
    Thin wrapper over ``logging.Logger`` that takes extra fields as kwargs.

    Handlers are built from ``LoggingConfig``; the underlying logger does not
    propagate to the root logger.

    Example:
        >>> logger = PostClientLogger(LoggingConfig.create(format="json"))
        >>> logger.info("Request completed", method="GET", status_code=200)
        >>> logger.close()
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = "post_client"):
        self.config = config or LoggingConfig()
        self.name = name
        self._closed = False

        level = self._get_level(self.config.level)

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.propagate = False

        # Reinitialising with the same name replaces previous handlers
        for handler in self._logger.handlers[:]:
            self._logger.removeHandler(handler)
            handler.close()

        filters = []
        if self.config.enable_correlation_id:
            filters.append(CorrelationIdFilter())
        if self.config.extra_fields:
            filters.append(ExtraFieldsFilter(self.config.extra_fields))

        formatter = get_formatter(self.config.format.value)

        if self.config.enable_console:
            self._logger.addHandler(create_console_handler(
                level, formatter, filters, stream=self.config.console_stream
            ))

        if self.config.enable_file and self.config.file_path:
            self._logger.addHandler(create_file_handler(
                file_path=self.config.file_path,
                level=level,
                formatter=formatter,
                max_bytes=self.config.max_bytes,
                backup_count=self.config.backup_count,
                filters=filters
            ))

    @staticmethod
    def _get_level(level: LogLevel) -> int:
        return getattr(logging, level.value)

    @property
    def logger(self) -> logging.Logger:
        """Underlying ``logging.Logger``."""
        return self._logger

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """
        Log info message.

        Example:
            >>> logger.info("Request completed", status_code=200, duration_ms=150)
        """
        self._logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, extra=kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log error with traceback; call from an exception handler."""
        self._logger.exception(message, extra=kwargs)

    def close(self) -> None:
        """
        Flush and close all handlers. Idempotent.
        """
        if self._closed:
            return

        for handler in self._logger.handlers[:]:
            try:
                handler.flush()
                handler.close()
            finally:
                self._logger.removeHandler(handler)

        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


def logger_name_for(base_url: str) -> str:
    """
    Per-host logger name, e.g. ``post_client.jsonplaceholder.typicode.com``.
    """
    from urllib.parse import urlparse

    netloc = urlparse(base_url).netloc
    return f"post_client.{netloc}" if netloc else "post_client"
