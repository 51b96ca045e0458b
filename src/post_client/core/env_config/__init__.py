"""
Environment configuration for Post Client.

Example:
    >>> from post_client.core.env_config import load_from_env
    >>> config = load_from_env(env_file=".env.production")
"""

from .loader import load_from_env, format_config_summary
from .settings import PostClientSettings

__all__ = [
    "load_from_env",
    "format_config_summary",
    "PostClientSettings",
]
