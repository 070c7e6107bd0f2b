"""Tests for structured logging configuration."""

import json
import logging

import structlog

from cli.logging_config import MAX_LOGGED_VALUE_CHARS, _redact_personal, setup_logging


class TestLoggingConfig:
    """Test structlog setup modes."""

    def test_console_mode(self):
        """Console mode uses dev renderer."""
        setup_logging(json_mode=False, level="DEBUG")
        logger = structlog.get_logger()
        logger.info("test message", key="value")
        # Smoke test: no crash

    def test_json_file_output(self, tmp_path):
        """Log file receives parseable JSON lines."""
        log_file = tmp_path / "logs" / "app.log"
        setup_logging(json_mode=True, level="DEBUG", log_file=log_file)
        logging.getLogger("test_json").info("json test")
        for handler in logging.getLogger().handlers:
            handler.flush()

        line = log_file.read_text().strip().splitlines()[-1]
        assert json.loads(line)["event"] == "json test"

    def test_level_filtering(self):
        """Log level filters lower messages."""
        setup_logging(json_mode=False, level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_default_level_is_info(self):
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_processor_chain(self):
        setup_logging(json_mode=True, level="DEBUG")
        config = structlog.get_config()
        assert _redact_personal in config["processors"]


class TestRedaction:
    def test_email_masked(self):
        out = _redact_personal(None, None, {"event": "x", "user": "me@example.com"})
        assert out["user"] == "REDACTED@email"

    def test_long_values_truncated(self):
        out = _redact_personal(None, None, {"event": "x", "text": "a" * 500})
        assert out["text"].endswith("...[truncated]")
        assert len(out["text"]) == MAX_LOGGED_VALUE_CHARS + len("...[truncated]")

    def test_event_and_non_strings_untouched(self):
        event = "e" * 500
        out = _redact_personal(None, None, {"event": event, "count": 3})
        assert out == {"event": event, "count": 3}
