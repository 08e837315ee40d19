"""Tests for structured logging configuration."""

import json
import logging

import structlog

from retail_tokens.config import Settings
from retail_tokens.logging_config import (
    LogContext,
    bind_context,
    clear_context,
    configure_library_logging,
    configure_logging,
    get_console_processors,
    get_json_processors,
    get_logger,
    unbind_context,
)


class TestProcessors:
    def test_console_ends_with_console_renderer(self):
        assert isinstance(get_console_processors()[-1], structlog.dev.ConsoleRenderer)

    def test_json_ends_with_json_renderer(self):
        assert isinstance(get_json_processors()[-1], structlog.processors.JSONRenderer)


class TestLibraryDefaults:
    def test_routes_through_stdlib(self):
        structlog.reset_defaults()
        configure_library_logging()

        config = structlog.get_config()
        assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger

    def test_unconfigured_debug_events_are_dropped(self, capsys):
        structlog.reset_defaults()
        configure_library_logging()

        get_logger("retail_tokens.tests.quiet").debug("token_lookup", name="Spacing4")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestConfigureLogging:
    def test_sets_package_log_level(self):
        configure_logging(Settings(log_level="ERROR", environment="testing"))

        assert logging.getLogger("retail_tokens").level == logging.ERROR

    def test_debug_overrides_log_level(self):
        configure_logging(
            Settings(log_level="ERROR", debug=True, environment="testing")
        )

        assert logging.getLogger("retail_tokens").level == logging.DEBUG

    def test_json_output(self, caplog):
        configure_logging(
            Settings(log_level="INFO", log_format="json", environment="testing")
        )
        logger = get_logger("retail_tokens.tests.json")

        with caplog.at_level(logging.INFO, logger="retail_tokens"):
            logger.info("tables_exported", count=6)

        payload = json.loads(caplog.records[-1].getMessage())
        assert payload["event"] == "tables_exported"
        assert payload["count"] == 6
        assert payload["level"] == "INFO"
        assert payload["environment"] == "development"

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "rdt.log"

        configure_logging(
            Settings(log_level="INFO", log_file=log_file, environment="testing")
        )
        root = logging.getLogger()
        handlers = [
            h for h in root.handlers if isinstance(h, logging.FileHandler)
            and h.baseFilename == str(log_file)
        ]
        try:
            assert log_file.exists()
            assert len(handlers) == 1
        finally:
            for handler in handlers:
                root.removeHandler(handler)
                handler.close()


class TestContext:
    def test_bind_and_unbind(self):
        bind_context(command="css")
        assert structlog.contextvars.get_contextvars()["command"] == "css"

        unbind_context("command")
        assert "command" not in structlog.contextvars.get_contextvars()

    def test_clear_context(self):
        bind_context(theme="dark", layer="core")
        clear_context()

        assert structlog.contextvars.get_contextvars() == {}

    def test_log_context_is_temporary(self):
        with LogContext(theme="dark"):
            assert structlog.contextvars.get_contextvars()["theme"] == "dark"

        assert "theme" not in structlog.contextvars.get_contextvars()
