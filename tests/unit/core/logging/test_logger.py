"""
Tests for PostClientLogger, filters and handlers.
"""

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from src.post_client.core.logging.config import LoggingConfig, LogFormat, LogLevel
from src.post_client.core.logging.filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from src.post_client.core.logging.logger import PostClientLogger, logger_name_for


class TestLoggingConfig:

    def test_create_from_strings(self):
        config = LoggingConfig.create(level="debug", format="JSON")
        assert config.level is LogLevel.DEBUG
        assert config.format is LogFormat.JSON

    def test_plain_strings_coerced(self):
        config = LoggingConfig(level="warning", format="colored")
        assert config.level is LogLevel.WARNING

    def test_file_requires_path(self):
        with pytest.raises(ValueError):
            LoggingConfig(enable_file=True)

    def test_unknown_console_stream(self):
        with pytest.raises(ValueError):
            LoggingConfig(console_stream="syslog")


class TestCorrelationId:

    def teardown_method(self):
        clear_correlation_id()

    def test_set_get_clear(self):
        set_correlation_id("req-1")
        assert get_correlation_id() == "req-1"
        clear_correlation_id()
        assert get_correlation_id() is None

    def test_filter_adds_id(self):
        record = logging.LogRecord("t", logging.INFO, "f.py", 1, "m", (), None)
        set_correlation_id("req-2")

        assert CorrelationIdFilter().filter(record)
        assert record.correlation_id == "req-2"

    def test_filter_without_id(self):
        record = logging.LogRecord("t", logging.INFO, "f.py", 1, "m", (), None)
        CorrelationIdFilter().filter(record)
        assert not hasattr(record, "correlation_id")

    def test_extra_fields_do_not_override(self):
        record = logging.LogRecord("t", logging.INFO, "f.py", 1, "m", (), None)
        record.service = "mine"

        ExtraFieldsFilter({"service": "default", "env": "test"}).filter(record)

        assert record.service == "mine"
        assert record.env == "test"


class TestPostClientLogger:

    def test_console_handler(self):
        logger = PostClientLogger(LoggingConfig.create(level="DEBUG"), name="post_client.test.console")
        try:
            handlers = logger.logger.handlers
            assert len(handlers) == 1
            assert logger.logger.level == logging.DEBUG
            assert logger.logger.propagate is False
        finally:
            logger.close()

    def test_console_stream_stderr(self, capsys):
        config = LoggingConfig.create(console_stream="stderr")
        logger = PostClientLogger(config, name="post_client.test.stderr")
        try:
            logger.info("to stderr")
        finally:
            logger.close()

        captured = capsys.readouterr()
        assert "to stderr" in captured.err
        assert captured.out == ""

    def test_file_logging_json(self, logging_config_with_file):
        logger = PostClientLogger(logging_config_with_file, name="post_client.test.file")
        logger.info("Request completed", method="GET", status_code=200)
        logger.close()

        lines = Path(logging_config_with_file.file_path).read_text(encoding="utf-8").splitlines()
        entry = json.loads(lines[-1])
        assert entry["message"] == "Request completed"
        assert entry["method"] == "GET"
        assert entry["status_code"] == 200

    def test_file_handler_rotates(self, logging_config_with_file):
        logger = PostClientLogger(logging_config_with_file, name="post_client.test.rotate")
        try:
            assert isinstance(logger.logger.handlers[0], RotatingFileHandler)
        finally:
            logger.close()

    def test_reinit_replaces_handlers(self):
        config = LoggingConfig.create()
        first = PostClientLogger(config, name="post_client.test.reinit")
        second = PostClientLogger(config, name="post_client.test.reinit")
        try:
            assert len(second.logger.handlers) == 1
        finally:
            first.close()
            second.close()

    def test_close_idempotent(self):
        logger = PostClientLogger(LoggingConfig.create(), name="post_client.test.close")
        logger.close()
        logger.close()
        assert logger.logger.handlers == []

    def test_context_manager(self):
        with PostClientLogger(LoggingConfig.create(), name="post_client.test.ctx") as logger:
            assert logger.logger.handlers
        assert logger.logger.handlers == []


class TestLoggerNameFor:

    def test_uses_host(self):
        assert logger_name_for("https://jsonplaceholder.typicode.com/posts") == "post_client.jsonplaceholder.typicode.com"

    def test_with_port(self):
        assert logger_name_for("http://localhost:3000/posts") == "post_client.localhost:3000"
