"""Tests for the environment-driven logging setup."""

import logging
import logging.handlers
from pathlib import Path

import pytest
import structlog
from storefront.utils.logging import _renderer, get_environment, get_log_level, setup_stdlib_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("ENV", "ENVIRONMENT", "PROTEAN_ENV", "LOG_LEVEL", "LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestLogLevel:
    def test_defaults_to_development(self, clean_env):
        assert get_environment() == "development"
        assert get_log_level() == "DEBUG"

    @pytest.mark.parametrize(
        "environment, level",
        [("production", "INFO"), ("staging", "INFO"), ("test", "WARNING"), ("unknown", "INFO")],
    )
    def test_level_follows_environment(self, clean_env, environment, level):
        clean_env.setenv("PROTEAN_ENV", environment)
        assert get_log_level() == level

    def test_env_takes_precedence_over_protean_env(self, clean_env):
        clean_env.setenv("ENV", "Production")
        clean_env.setenv("PROTEAN_ENV", "test")
        assert get_environment() == "production"

    def test_log_level_override(self, clean_env):
        clean_env.setenv("PROTEAN_ENV", "production")
        clean_env.setenv("LOG_LEVEL", "ERROR")
        assert get_log_level() == "ERROR"


class TestRenderer:
    def test_json_in_production(self, clean_env):
        clean_env.setenv("ENV", "production")
        assert isinstance(_renderer(), structlog.processors.JSONRenderer)

    def test_console_elsewhere(self, clean_env):
        clean_env.setenv("ENV", "development")
        assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


class TestStdlibHandlers:
    def test_console_and_rotating_files(self, clean_env, restore_root_logger, tmp_path):
        clean_env.setenv("LOG_DIR", str(tmp_path / "logs"))
        clean_env.setenv("PROTEAN_ENV", "production")

        setup_stdlib_logging()

        root = restore_root_logger
        assert root.level == logging.INFO
        assert len(root.handlers) == 3

        files = sorted(
            Path(handler.baseFilename).name
            for handler in root.handlers
            if isinstance(handler, logging.handlers.RotatingFileHandler)
        )
        assert files == ["storefront.log", "storefront_error.log"]
        assert root.handlers[2].level == logging.ERROR
        assert logging.getLogger("protean").level == logging.WARNING
