"""
Logging system for Post Client.

Structured logging with JSON/text/colored formats, console and rotating
file handlers, and per-request correlation IDs.

Example:
    >>> from post_client.core.logging import LoggingConfig
    >>> from post_client import PostClient, PostClientConfig
    >>>
    >>> config = PostClientConfig.create(logging=LoggingConfig.create(level="DEBUG"))
    >>> with PostClient(config=config) as client:
    ...     client.fetch_post(1)
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import PostClientLogger, logger_name_for
from .formatters import JSONFormatter, TextFormatter, ColoredFormatter, get_formatter
from .filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
)
from .handlers import create_console_handler, create_file_handler

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "PostClientLogger",
    "logger_name_for",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "ColoredFormatter",
    "get_formatter",
    # Filters
    "CorrelationIdFilter",
    "ExtraFieldsFilter",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    # Handlers
    "create_console_handler",
    "create_file_handler",
]
