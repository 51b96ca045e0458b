"""
Pytest configuration and fixtures for post-client tests.
"""

import pytest
import responses as responses_lib

from src.post_client.client import PostClient
from src.post_client.core.config import PostClientConfig
from src.post_client.core.logging.config import LoggingConfig


def _make_post(post_id, user_id=None):
    """Post payload shaped like the canonical upstream record."""
    return {
        "userId": user_id if user_id is not None else (post_id - 1) // 10 + 1,
        "id": post_id,
        "title": f"title {post_id}",
        "body": f"body of post {post_id}\nsecond line",
    }


@pytest.fixture
def base_url():
    """Posts resource root for testing."""
    return "https://api.example.com/posts"


@pytest.fixture
def posts_payload():
    """Canonical fixture: 100 posts, 10 per user."""
    return [_make_post(i) for i in range(1, 101)]


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def config(base_url):
    return PostClientConfig(base_url=base_url)


@pytest.fixture
def client(config):
    """PostClient instance for testing."""
    client = PostClient(config=config)
    yield client
    client.close()


@pytest.fixture
def logging_config_with_file(tmp_path):
    """
    LoggingConfig with JSON file logging into a temporary directory.
    """
    return LoggingConfig.create(
        level="DEBUG",
        format="json",
        enable_console=False,
        enable_file=True,
        file_path=str(tmp_path / "logs" / "posts.log")
    )


@pytest.fixture
def make_post():
    """Factory for single post payloads."""
    return _make_post
