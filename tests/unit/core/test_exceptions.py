"""
Tests for the exception hierarchy and transport error classification.
"""

import httpx
import pytest
import requests

from src.post_client.core.exceptions import (
    ConfigurationError,
    ConnectionError,
    DecodeError,
    HTTPStatusError,
    PostClientException,
    TimeoutError,
    TransportError,
    classify_httpx_exception,
    classify_requests_exception,
)

URL = "https://api.example.com/posts"


class TestHierarchy:
    """Test exception classes."""

    @pytest.mark.parametrize("exc", [
        TransportError("x"),
        TimeoutError("x"),
        ConnectionError("x"),
        DecodeError("x"),
        HTTPStatusError(500, URL),
        ConfigurationError("x"),
    ])
    def test_all_derive_from_base(self, exc):
        assert isinstance(exc, PostClientException)

    def test_transport_and_decode_are_distinct(self):
        assert not issubclass(DecodeError, TransportError)
        assert not issubclass(TransportError, DecodeError)

    def test_transport_error_message_with_url(self):
        exc = ConnectionError("Connection error", URL)
        assert str(exc) == f"Connection error (url: {URL})"
        assert exc.url == URL

    def test_timeout_error_message(self):
        exc = TimeoutError("Request timeout", URL, timeout_type="read")
        assert "read timeout" in str(exc)
        assert URL in str(exc)

    def test_decode_error_without_url(self):
        exc = DecodeError("Cannot decode")
        assert str(exc) == "Cannot decode"
        assert exc.status_code is None

    def test_http_status_error_message(self):
        exc = HTTPStatusError(404, f"{URL}/1", "{}")
        assert str(exc) == f"HTTP 404 error for {URL}/1: {{}}"


class TestClassifyRequestsException:
    """Test classify_requests_exception()."""

    @pytest.mark.parametrize("exc, expected, timeout_type", [
        (requests.exceptions.ConnectTimeout(), TimeoutError, "connect"),
        (requests.exceptions.ReadTimeout(), TimeoutError, "read"),
    ])
    def test_timeouts(self, exc, expected, timeout_type):
        ours = classify_requests_exception(exc, URL)
        assert type(ours) is expected
        assert ours.timeout_type == timeout_type

    def test_connection_error(self):
        ours = classify_requests_exception(requests.exceptions.ConnectionError("refused"), URL)
        assert type(ours) is ConnectionError

    def test_other_request_exception(self):
        ours = classify_requests_exception(requests.exceptions.InvalidURL("bad"), URL)
        assert type(ours) is TransportError
        assert "bad" in str(ours)


class TestClassifyHttpxException:
    """Test classify_httpx_exception()."""

    def test_connect_timeout(self):
        ours = classify_httpx_exception(httpx.ConnectTimeout("slow"), URL)
        assert type(ours) is TimeoutError
        assert ours.timeout_type == "connect"

    def test_read_timeout(self):
        ours = classify_httpx_exception(httpx.ReadTimeout("slow"), URL)
        assert ours.timeout_type == "read"

    @pytest.mark.parametrize("exc", [httpx.ConnectError("refused"), httpx.ReadError("reset")])
    def test_network_errors(self, exc):
        assert type(classify_httpx_exception(exc, URL)) is ConnectionError

    def test_other_errors(self):
        ours = classify_httpx_exception(httpx.RemoteProtocolError("garbage"), URL)
        assert type(ours) is TransportError
