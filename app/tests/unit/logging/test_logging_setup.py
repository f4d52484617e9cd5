"""Unit tests for jsonlocale.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
- Isolation from the host application's structlog configuration
"""

import json
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest
import structlog

import jsonlocale
from jsonlocale.logging.setup import (
    PACKAGE_HANDLER_NAME,
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


def _host_marker(logger, method_name, event_dict):
    event_dict["host"] = True
    return event_dict


class _RecordCollector(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def host_structlog_config():
    """Install a host application's structlog setup, restored afterwards."""
    saved = structlog.get_config()
    processors = [_host_marker, structlog.processors.JSONRenderer()]
    structlog.configure(processors=processors)
    yield processors
    structlog.reset_defaults()
    structlog.configure(**saved)


@pytest.fixture
def package_records():
    """Collect records of the package logger with INFO enabled."""
    collector = _RecordCollector()
    package_logger = logging.getLogger("jsonlocale")
    package_logger.addHandler(collector)
    yield collector.records
    package_logger.removeHandler(collector)
    configure_logging()


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_logger(self):
        """configure_logging returns a logger with the standard methods."""
        result = configure_logging()

        assert hasattr(result, "info")
        assert hasattr(result, "debug")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_accepts_overrides(self):
        """configure_logging accepts log level and production overrides."""
        assert configure_logging(log_level="DEBUG") is not None
        assert configure_logging(is_production=True) is not None
        assert configure_logging(log_level="WARNING", is_production=False) is not None

    def test_configure_logging_suppresses_in_test_env(self):
        """In test environment, the package logger is silenced."""
        configure_logging()

        package_logger = logging.getLogger("jsonlocale")
        assert package_logger.level > logging.CRITICAL
        assert package_logger.propagate is False

    def test_handler_added_once(self):
        """Repeated configuration does not stack the package handler."""
        configure_logging()
        configure_logging()

        own_handlers = [
            handler
            for handler in logging.getLogger("jsonlocale").handlers
            if handler.get_name() == PACKAGE_HANDLER_NAME
        ]
        assert len(own_handlers) == 1

    def test_production_records_are_json(self, package_records):
        """Package records are rendered by the package's own processors."""
        configure_logging(is_production=True)
        logging.getLogger("jsonlocale").setLevel(logging.INFO)

        get_module_logger().info("library_event", language="de")

        assert len(package_records) == 1
        payload = json.loads(package_records[0].getMessage())
        assert payload["event"] == "library_event"
        assert payload["language"] == "de"
        assert payload["module_path"] == __name__

    def test_records_below_level_are_dropped(self, package_records):
        configure_logging(is_production=True)
        logging.getLogger("jsonlocale").setLevel(logging.WARNING)

        get_module_logger().info("library_event")

        assert package_records == []


@pytest.mark.unit
class TestHostConfiguration:
    """The package never replaces the host's structlog configuration."""

    def test_configure_logging_keeps_host_processors(self, host_structlog_config):
        configure_logging(log_level="DEBUG", is_production=True)
        get_module_logger().info("library_event")

        assert structlog.get_config()["processors"] == host_structlog_config

    def test_import_keeps_host_processors(self):
        """A fresh interpreter that configured structlog first keeps its setup."""
        script = (
            "import structlog\n"
            "def host(logger, name, event):\n"
            "    return event\n"
            "structlog.configure(processors=[host, structlog.processors.JSONRenderer()])\n"
            "import jsonlocale\n"
            "print(structlog.get_config()['processors'][0] is host)\n"
        )
        env = dict(os.environ, PYTHONPATH=str(Path(jsonlocale.__file__).parents[1]))

        result = subprocess.run(
            [sys.executable, "-c", script],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )

        assert result.stdout.strip() == "True"


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_binds_calling_module(self):
        """get_module_logger binds the caller's module name as context."""
        log = get_module_logger()

        context = structlog.get_context(log)
        assert context["component"] == __name__.split(".")[-1]
        assert context["module_path"] == __name__

    def test_library_modules_log_with_context(self):
        """Library loggers carry their module path."""
        from jsonlocale.i18n import cache

        context = structlog.get_context(cache.logger)
        assert context == {
            "component": "cache",
            "module_path": "jsonlocale.i18n.cache",
        }

    def test_logging_methods_dont_raise(self):
        """Logging methods execute without raising exceptions."""
        log = get_module_logger()

        log.debug("debug_message", extra="data")
        log.info("info_message", key="value")
        log.warning("warning_message")
        log.error("error_message", error_code="E001")

    def test_exception_logging(self):
        """Exception logging works correctly."""
        log = get_module_logger()

        try:
            raise ValueError("test error")
        except ValueError:
            log.exception("error_occurred")
