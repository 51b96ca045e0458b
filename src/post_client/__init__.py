"""Post Client - typed client for a JSON posts REST resource."""

import logging
from importlib.metadata import version, PackageNotFoundError

from .client import PostClient
from .async_client import AsyncPostClient
from .models import Post
from .result import FetchResult
from .core.codec import PostCodec
from .core.config import PostClientConfig, TimeoutConfig, DEFAULT_BASE_URL
from .core.env_config import load_from_env
from .core.exceptions import (
    PostClientException,
    TransportError,
    TimeoutError,
    ConnectionError,
    DecodeError,
    HTTPStatusError,
    ConfigurationError,
)

# Library default: silent unless the application configures logging
logging.getLogger('post_client').addHandler(logging.NullHandler())

try:
    __version__ = version("post-client")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

__all__ = [
    # Clients
    "PostClient",
    "AsyncPostClient",

    # Model
    "Post",
    "PostCodec",
    "FetchResult",

    # Config
    "PostClientConfig",
    "TimeoutConfig",
    "DEFAULT_BASE_URL",
    "load_from_env",

    # Exceptions
    "PostClientException",
    "TransportError",
    "TimeoutError",
    "ConnectionError",
    "DecodeError",
    "HTTPStatusError",
    "ConfigurationError",

    # Version
    "__version__",
]
