"""
Configuration loader from environment variables and .env files.
"""

from typing import Any, Optional

from pydantic import ValidationError

from ..config import PostClientConfig, TimeoutConfig
from ..exceptions import ConfigurationError
from ..logging.config import LoggingConfig
from .settings import PostClientSettings


def load_from_env(env_file: Optional[str] = None, **overrides: Any) -> PostClientConfig:
    """
    Load PostClientConfig from environment variables.

    Priority (highest to lowest):
    1. **overrides - explicit parameters (settings field names)
    2. Environment variables (POST_CLIENT_*)
    3. .env file (``env_file`` or ./.env)
    4. Defaults

    Raises:
        ConfigurationError: A value fails validation

    Example:
        >>> config = load_from_env()
        >>> config = load_from_env(env_file=".env.staging", raise_for_status=True)
    """
    try:
        settings = PostClientSettings(_env_file=env_file or '.env', **overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid POST_CLIENT_* settings: {e}") from e

    timeout = None
    if settings.timeout_connect is not None or settings.timeout_read is not None:
        timeout = TimeoutConfig(
            connect=settings.timeout_connect or 5,
            read=settings.timeout_read or 30,
        )

    logging_config = None
    if settings.log_enabled:
        logging_config = LoggingConfig.create(
            level=settings.log_level,
            format=settings.log_format,
            enable_console=settings.log_enable_console,
            console_stream=settings.log_console_stream,
            enable_file=settings.log_file_path is not None,
            file_path=settings.log_file_path,
            max_bytes=settings.log_max_bytes,
            backup_count=settings.log_backup_count,
        )

    return PostClientConfig(
        base_url=settings.base_url,
        timeout=timeout,
        verify_ssl=settings.verify_ssl,
        raise_for_status=settings.raise_for_status,
        logging=logging_config,
    )


def format_config_summary(config: PostClientConfig) -> str:
    """
    Human-readable summary of a configuration, one setting per line.

    Example:
        >>> print(format_config_summary(load_from_env()))
        PostClientConfig:
          base_url: https://jsonplaceholder.typicode.com/posts
          ...
    """
    timeout = (
        f"connect={config.timeout.connect}s, read={config.timeout.read}s"
        if config.timeout else "transport default"
    )
    lines = [
        "PostClientConfig:",
        f"  base_url: {config.base_url}",
        f"  timeout: {timeout}",
        f"  verify_ssl: {config.verify_ssl}",
        f"  raise_for_status: {config.raise_for_status}",
    ]
    if config.logging:
        lines.append(f"  logging: level={config.logging.level.value}, format={config.logging.format.value}")
        if config.logging.enable_file:
            lines.append(f"    file: {config.logging.file_path}")
    else:
        lines.append("  logging: disabled")
    return "\n".join(lines)
