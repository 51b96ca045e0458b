"""Core модули Post Client."""

from .config import PostClientConfig, TimeoutConfig, DEFAULT_BASE_URL
from .codec import PostCodec
from .exceptions import (
    PostClientException,
    TransportError,
    TimeoutError,
    ConnectionError,
    DecodeError,
    HTTPStatusError,
    ConfigurationError,
    classify_requests_exception,
    classify_httpx_exception,
)

__all__ = [
    # Config
    "PostClientConfig",
    "TimeoutConfig",
    "DEFAULT_BASE_URL",
    # Codec
    "PostCodec",
    # Exceptions
    "PostClientException",
    "TransportError",
    "TimeoutError",
    "ConnectionError",
    "DecodeError",
    "HTTPStatusError",
    "ConfigurationError",
    "classify_requests_exception",
    "classify_httpx_exception",
]
