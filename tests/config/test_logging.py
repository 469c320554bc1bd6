"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from cw20kit.config.logging import PACKAGE_LOGGER, bind_command, configure_logging


class TestConfigureLogging:
    @pytest.mark.parametrize(
        "verbose,quiet,level",
        [
            (True, False, logging.DEBUG),
            (False, False, logging.WARNING),
            (False, True, logging.ERROR),
            (True, True, logging.DEBUG),
        ],
    )
    def test_level(self, verbose: bool, quiet: bool, level: int) -> None:
        configure_logging(verbose=verbose, quiet=quiet)
        assert logging.getLogger(PACKAGE_LOGGER).level == level

    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        before = root.handlers[:]
        configure_logging(verbose=True, log_json=True)
        assert root.handlers == before

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("cw20kit.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "cw20kit.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("cw20kit.services.schema").debug("Exported 14 schema files")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Exported 14 schema files"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "cw20kit.services.schema"

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("pydantic").debug("noise")
        assert capfd.readouterr().err == ""

    def test_quiet_hides_warnings(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(quiet=True, log_json=True)
        logging.getLogger("cw20kit.services.messages").warning("hidden")
        assert capfd.readouterr().err == ""

    def test_debug_hidden_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        logging.getLogger("cw20kit.services.messages").debug("hidden")
        assert capfd.readouterr().err == ""

    def test_reconfiguring_replaces_handler(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1


class TestBindCommand:
    def test_command_in_records(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        bind_command("validate")
        structlog.get_logger("cw20kit.test").info("checked")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["command"] == "validate"

    def test_rebinding_replaces(self) -> None:
        bind_command("decode")
        bind_command("schema")
        assert structlog.contextvars.get_contextvars() == {"command": "schema"}
