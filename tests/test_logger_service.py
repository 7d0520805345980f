# tests/test_logger_service.py
"""Tests for the loguru-backed logging capability."""
import json

import pytest
from loguru import logger

from hello_lambda.application.log_setup import setup_logging
from hello_lambda.application.services.logger_service import Level, LogContext, LoguruLogger
from hello_lambda.application.settings import Settings


@pytest.fixture
def log():
    return LoguruLogger()


class TestLevel:
    @pytest.mark.parametrize(
        "level, text, loguru_name",
        [
            (Level.TRACE, "trace", "TRACE"),
            (Level.DEBUG, "debug", "DEBUG"),
            (Level.INFO, "info", "INFO"),
            (Level.WARN, "warn", "WARNING"),
            (Level.ERROR, "error", "ERROR"),
        ],
    )
    def test_names(self, level, text, loguru_name):
        assert str(level) == text
        assert level.loguru_name == loguru_name


class TestLogContext:
    def test_only_set_fields(self):
        ctx = LogContext(request_id="req-1", user_id=42)
        assert ctx.as_fields() == {"request_id": "req-1", "user_id": 42}

    def test_empty(self):
        assert LogContext().as_fields() == {}


class TestLoguruLogger:
    @pytest.mark.parametrize("level", list(Level))
    def test_message_and_level(self, log, log_records, level):
        log.log(level, f"This is a {level} message")

        assert len(log_records) == 1
        assert log_records[0]["message"] == f"This is a {level} message"
        assert log_records[0]["level"].name == level.loguru_name

    def test_records_caller_location(self, log, log_records):
        log.log(Level.INFO, "where am I")

        record = log_records[0]
        assert record["function"] == "test_records_caller_location"
        assert record["file"].name == "test_logger_service.py"
        assert record["line"] > 0

    def test_fields_are_bound(self, log, log_records):
        log.log(Level.INFO, "User logged in", user="alice", ip="192.168.1.1")

        assert log_records[0]["extra"] == {"user": "alice", "ip": "192.168.1.1"}

    @pytest.mark.parametrize(
        "ctx, key, value",
        [
            (LogContext(request_id="req-123-456"), "request_id", "req-123-456"),
            (LogContext(trace_id="trace-xyz-789"), "trace_id", "trace-xyz-789"),
            (LogContext(correlation_id="corr-abc-def"), "correlation_id", "corr-abc-def"),
            (LogContext(user_id=12345), "user_id", 12345),
        ],
    )
    def test_context_is_attached(self, log, log_records, ctx, key, value):
        log.log(Level.INFO, "Request processed", context=ctx)

        assert log_records[0]["extra"] == {key: value}

    def test_context_and_fields_together(self, log, log_records):
        ctx = LogContext(request_id="req-1", trace_id="trace-1")
        log.log(Level.DEBUG, "Processing order", context=ctx, order_id=456)

        assert log_records[0]["extra"] == {"request_id": "req-1", "trace_id": "trace-1", "order_id": 456}

    def test_exception_is_attached(self, log, log_records):
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            log.log(Level.ERROR, "failed", exc=e)

        assert log_records[0]["exception"].type is RuntimeError

    def test_no_exception_by_default(self, log, log_records):
        log.log(Level.ERROR, "failed")

        assert log_records[0]["exception"] is None


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore_loguru(self):
        yield
        logger.remove()
        logger.add(lambda _: None)

    def test_json_output(self, capsys):
        log = setup_logging(Settings(_env_file=None, log_json=True, debug=True))
        log.log(Level.DEBUG, "Request received", context=LogContext(request_id="req-9"), path="/hello")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)["record"]
        assert record["message"] == "Request received"
        assert record["level"]["name"] == "DEBUG"
        assert record["extra"] == {"request_id": "req-9", "path": "/hello"}

    def test_level_follows_settings(self, capsys):
        log = setup_logging(Settings(_env_file=None, debug=False))
        log.log(Level.DEBUG, "hidden")
        log.log(Level.INFO, "shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_plain_format(self, capsys):
        log = setup_logging(Settings(_env_file=None, log_json=False, log_level="warn"))
        log.log(Level.WARN, "Validation failed", name="John@Doe")

        out = capsys.readouterr().out
        assert "WARNING" in out
        assert "Validation failed" in out
        assert "John@Doe" in out
