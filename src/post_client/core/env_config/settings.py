"""
Pydantic settings for environment configuration.
"""

from typing import Optional, Literal
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..config import DEFAULT_BASE_URL


class PostClientSettings(BaseSettings):
    """
    Post Client configuration from environment variables.

    Reads from:
    1. Environment variables (POST_CLIENT_*)
    2. .env file
    3. Defaults

    Example .env file:
        POST_CLIENT_BASE_URL=http://localhost:3000/posts
        POST_CLIENT_TIMEOUT_CONNECT=3
        POST_CLIENT_TIMEOUT_READ=10
        POST_CLIENT_RAISE_FOR_STATUS=true
        POST_CLIENT_LOG_ENABLED=true
        POST_CLIENT_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix='POST_CLIENT_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Root URL of the posts resource")

    # Both unset = transport default (no timeout)
    timeout_connect: Optional[float] = Field(default=None, gt=0)
    timeout_read: Optional[float] = Field(default=None, gt=0)

    verify_ssl: bool = Field(default=True)
    raise_for_status: bool = Field(default=False)

    # Logging
    log_enabled: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_format: Literal["json", "text", "colored"] = Field(default="text")
    log_enable_console: bool = Field(default=True)
    log_console_stream: Literal["stdout", "stderr"] = Field(default="stdout")
    log_file_path: Optional[str] = None
    log_max_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    log_backup_count: int = Field(default=5, ge=0)

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator('log_format', mode='before')
    @classmethod
    def normalize_format(cls, v):
        return v.lower() if isinstance(v, str) else v
