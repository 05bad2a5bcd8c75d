"""
Tests for the logging module.

Tests verify:
- configure_logging accepts console and JSON output
- LogContext binds fields and unbinds them on exit
- Nested contexts only remove their own keys
"""

import structlog

from patternlab.core.logging import LogContext, configure_logging, get_logger


class TestConfigureLogging:
    def test_json_format(self):
        configure_logging(level="DEBUG", json_format=True)

        get_logger("test").info("json_event", pattern="atoms-button")

    def test_console_format(self):
        configure_logging(level="WARNING", json_format=False, add_timestamp=False)

        get_logger("test").info("suppressed_event")


class TestLogContext:
    def setup_method(self):
        structlog.contextvars.clear_contextvars()

    def teardown_method(self):
        structlog.contextvars.clear_contextvars()

    def test_log_context_scoped(self):
        with LogContext(pattern="atoms-button") as ctx:
            assert isinstance(ctx, LogContext)
            assert structlog.contextvars.get_contextvars() == {"pattern": "atoms-button"}

        assert structlog.contextvars.get_contextvars() == {}

    def test_nested_contexts_keep_outer_fields(self):
        with LogContext(build_output="public"):
            with LogContext(pattern="atoms-button"):
                assert structlog.contextvars.get_contextvars() == {
                    "build_output": "public",
                    "pattern": "atoms-button",
                }

            assert structlog.contextvars.get_contextvars() == {"build_output": "public"}

    def test_context_reaches_events(self):
        with LogContext(pattern="atoms-button"):
            event = structlog.contextvars.merge_contextvars(
                None, "info", {"event": "pattern_rendered"}
            )

        assert event == {"event": "pattern_rendered", "pattern": "atoms-button"}
