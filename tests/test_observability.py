"""
Tests for observability — logging setup.
"""

import logging
from pathlib import Path

import pytest

from acis_locator.core.observability.logging_config import (
    _parse_level,
    configure_logging,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_fallback(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("chatty") == logging.WARNING


class TestSetupLogging:
    def test_console_only(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler_lowers_root_level(self, tmp_path: Path):
        log_file = tmp_path / "locate.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("acis_locator.test").debug("searched %s", "x")
        for handler in root.handlers:
            handler.flush()
        assert "searched x" in log_file.read_text(encoding="utf-8")

    def test_repeat_setup_replaces_handlers(self):
        setup_logging("INFO")
        setup_logging("ERROR")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.ERROR

    def test_file_parent_dirs_created(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "nested" / "locate.log"
        setup_logging("INFO", log_file=str(log_file))
        assert log_file.parent.is_dir()


class TestResolveLevel:
    def test_flags_beat_env(self):
        env = {"ACISLOC_LOG_LEVEL": "ERROR"}
        assert resolve_level(debug=True, verbose=True, environ=env) == "DEBUG"
        assert resolve_level(verbose=True, environ=env) == "INFO"
        assert resolve_level(quiet=True, environ={"ACISLOC_LOG_LEVEL": "DEBUG"}) == "ERROR"

    def test_env_then_default(self):
        assert resolve_level(environ={"ACISLOC_LOG_LEVEL": "info"}) == "info"
        assert resolve_level(environ={}) == "WARNING"
        assert resolve_level(environ={"ACISLOC_LOG_LEVEL": ""}) == "WARNING"


class TestConfigureLogging:
    def test_env_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "trace.log"
        configure_logging(environ={
            "ACISLOC_LOG_FILE": str(log_file),
            "ACISLOC_LOG_FILE_LEVEL": "DEBUG",
        })
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert root.handlers[0].level == logging.WARNING

    def test_quiet_flag(self):
        configure_logging(quiet=True, environ={})
        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert len(root.handlers) == 1
