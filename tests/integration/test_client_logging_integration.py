"""
Integration tests: PostClient with structured file logging enabled.
"""

import json
from pathlib import Path

import pytest
import requests
import responses

from src.post_client.client import PostClient
from src.post_client.core.config import PostClientConfig
from src.post_client.core.exceptions import DecodeError, TransportError
from src.post_client.core.logging.filters import get_correlation_id


def read_entries(path):
    return [json.loads(line) for line in Path(path).read_text(encoding="utf-8").splitlines()]


pytestmark = pytest.mark.integration


class TestClientLogging:

    def test_no_logging_by_default(self, client, mock_responses, base_url, make_post, caplog):
        mock_responses.add(responses.GET, f"{base_url}/1", json=make_post(1), status=200)

        with caplog.at_level("DEBUG", logger="post_client"):
            client.fetch_post(1)

        assert caplog.records == []

    def test_successful_request_logged(self, mock_responses, base_url, make_post, logging_config_with_file):
        config = PostClientConfig(base_url=base_url, logging=logging_config_with_file)
        mock_responses.add(responses.GET, f"{base_url}/1", json=make_post(1), status=200)

        with PostClient(config=config) as client:
            client.fetch_post(1)

        entries = read_entries(logging_config_with_file.file_path)
        messages = [e["message"] for e in entries]
        assert messages == ["Request started", "Response received", "Request completed"]

        completed = entries[-1]
        assert completed["status_code"] == 200
        assert completed["url"] == f"{base_url}/1"
        assert completed["logger"] == "post_client.api.example.com"

        correlation_ids = {e["correlation_id"] for e in entries}
        assert len(correlation_ids) == 1
        assert get_correlation_id() is None

    def test_each_request_gets_new_correlation_id(self, mock_responses, base_url, logging_config_with_file):
        config = PostClientConfig(base_url=base_url, logging=logging_config_with_file)
        mock_responses.add(responses.GET, base_url, json=[], status=200)
        mock_responses.add(responses.GET, base_url, json=[], status=200)

        with PostClient(config=config) as client:
            client.fetch_all_posts()
            client.fetch_all_posts()

        started = [e for e in read_entries(logging_config_with_file.file_path) if e["message"] == "Request started"]
        assert len(started) == 2
        assert started[0]["correlation_id"] != started[1]["correlation_id"]

    def test_decode_failure_logged_and_raised(self, mock_responses, base_url, logging_config_with_file):
        config = PostClientConfig(base_url=base_url, logging=logging_config_with_file)
        mock_responses.add(responses.GET, base_url, body="", status=200)

        with PostClient(config=config) as client:
            with pytest.raises(DecodeError):
                client.fetch_all_posts()

        failed = read_entries(logging_config_with_file.file_path)[-1]
        assert failed["message"] == "Request failed"
        assert failed["level"] == "ERROR"
        assert failed["error_type"] == "DecodeError"

    def test_transport_failure_logged_and_raised(self, mock_responses, base_url, logging_config_with_file):
        config = PostClientConfig(base_url=base_url, logging=logging_config_with_file)
        mock_responses.add(responses.GET, base_url, body=requests.exceptions.ConnectionError("refused"))

        with PostClient(config=config) as client:
            with pytest.raises(TransportError):
                client.fetch_all_posts()

        failed = read_entries(logging_config_with_file.file_path)[-1]
        assert failed["error_type"] == "ConnectionError"
        assert "duration_ms" in failed
