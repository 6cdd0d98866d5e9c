"""Tests for configuration resolution."""

import io
import logging
import os
from pathlib import Path

from expense_cli import config
from expense_core.logger import configure_logging, get_logger


class TestDataDir:
    """Data directory precedence."""

    def test_cli_flag_wins(self, tmp_path):
        env = {config.DATA_DIR_ENV: "/from/env"}
        assert config.resolve_data_dir(tmp_path, env) == tmp_path

    def test_environment_variable(self):
        env = {config.DATA_DIR_ENV: "/from/env"}
        assert config.resolve_data_dir(None, env) == Path("/from/env")

    def test_xdg_data_home(self):
        env = {"XDG_DATA_HOME": "/xdg"}
        assert config.resolve_data_dir(None, env) == Path("/xdg/expense-tracker")

    def test_home_fallback(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert config.resolve_data_dir(None, {}) == tmp_path / ".local" / "share" / "expense-tracker"

    def test_dotenv_file_is_loaded(self, tmp_path, monkeypatch):
        """Values from .env in the working directory reach the environment."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv(config.DATA_DIR_ENV, raising=False)
        (tmp_path / ".env").write_text(f"{config.DATA_DIR_ENV}=/from/dotenv\n", encoding="utf-8")
        config.load_environment()
        try:
            assert config.resolve_data_dir() == Path("/from/dotenv")
        finally:
            os.environ.pop(config.DATA_DIR_ENV, None)


class TestLogging:
    """Log level selection."""

    def test_verbose_forces_debug(self):
        assert config.resolve_log_level(True, {config.LOG_LEVEL_ENV: "ERROR"}) == "DEBUG"

    def test_level_from_environment(self):
        assert config.resolve_log_level(False, {config.LOG_LEVEL_ENV: "info"}) == "INFO"

    def test_default_level(self):
        assert config.resolve_log_level(False, {}) == "WARNING"

    def test_configure_logging_sets_package_level(self):
        configure_logging("DEBUG")
        assert get_logger("x").getEffectiveLevel() == logging.DEBUG
        configure_logging("not-a-level")
        assert get_logger("x").getEffectiveLevel() == logging.WARNING

    def test_single_stderr_handler_accepts_a_new_stream(self):
        """Repeated configuration keeps one handler, and it can be re-pointed."""
        configure_logging()
        configure_logging()
        handlers = logging.getLogger("expense_tracker").handlers
        assert len(handlers) == 1
        handler = handlers[0]
        assert type(handler) is logging.StreamHandler

        buffer = io.StringIO()
        previous = handler.setStream(buffer)
        try:
            get_logger("tests").warning("disk almost full")
        finally:
            handler.setStream(previous)
        assert "WARNING  | expense_tracker.tests | disk almost full" in buffer.getvalue()
