"""Tests for structlog configuration and library log events."""

import json
import logging
import subprocess
import sys
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

from funseq.logging.config import configure_logging, get_config_logger, get_logger


class TestConfigureLogging:
    """Test logging configuration."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_output(self, caplog):
        """JSON rendering hands one parseable object per event to stdlib logging."""
        caplog.set_level(logging.DEBUG)
        configure_logging(level="DEBUG", format_json=True, include_timestamp=False)
        get_logger("funseq.test").info("hello", answer=42)

        payload = json.loads(caplog.records[-1].getMessage())
        assert payload["event"] == "hello"
        assert payload["answer"] == 42
        assert payload["level"] == "info"
        assert payload["logger"] == "funseq.test"

    def test_invalid_level(self):
        """Unknown level names are rejected."""
        with pytest.raises(AttributeError):
            configure_logging(level="LOUD")


class TestLibraryEvents:
    """Test what the library emits without any logging configuration."""

    def test_operations_are_silent_by_default(self):
        """Sequence operations write nothing in a fresh interpreter."""
        code = (
            "from funseq import elements_equal, group\n"
            "group([1, 2, 3], lambda n: n % 2)\n"
            "elements_equal([1, 1, 2])\n"
            "elements_equal([[1], [1]])\n"
        )
        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            cwd=str(Path(__file__).resolve().parent.parent),
            check=True,
        )
        assert result.stdout == ""
        assert result.stderr == ""

    def test_config_logger_binds_subsystem(self):
        """The configuration logger carries its subsystem."""
        with capture_logs() as logs:
            get_config_logger("funseq.test").debug("loaded")
        assert logs[0]["subsystem"] == "config"
