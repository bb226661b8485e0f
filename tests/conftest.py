"""Pytest configuration and shared fixtures for tests."""

import logging

import pytest

from envconfig.settings import reset_loader_settings

CONSUMED_VARS = (
    "ENV_FILE",
    "DATABASE_URL",
    "AUTH_SERVICE_URL",
    "DEBUG",
    "PORT",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Start every test without any variable the loader reads."""
    for var in CONSUMED_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_loader_settings()
    yield
    reset_loader_settings()


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler/level changes made by setup_logging()."""
    package_logger = logging.getLogger("envconfig")
    level = package_logger.level
    handlers = list(package_logger.handlers)
    yield
    package_logger.setLevel(level)
    package_logger.handlers[:] = handlers


@pytest.fixture
def write_env(tmp_path):
    """Write a .env file into tmp_path and return its path."""
    def _write(content: str, name: str = ".env"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def missing_env(tmp_path):
    """Path of a .env file that does not exist."""
    return tmp_path / "missing.env"
