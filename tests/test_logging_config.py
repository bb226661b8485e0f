"""Tests for envconfig.logging_config and the loader settings behind it."""

import json
import logging

import pytest

from envconfig.logging_config import setup_logging
from envconfig.settings import LoaderSettings, get_loader_settings


class TestLoaderSettings:

    def test_defaults(self):
        settings = LoaderSettings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"

    def test_reads_environment_case_insensitively(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "JSON")

        settings = get_loader_settings()

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_cached_instance(self):
        assert get_loader_settings() is get_loader_settings()


class TestSetupLogging:

    def test_json_format(self, capsys):
        setup_logging(level="INFO", fmt="json")
        logging.getLogger("envconfig.loader").warning("something odd")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        entry = json.loads(line)

        assert entry["message"] == "something odd"
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "envconfig.loader"

    def test_text_format(self, capsys):
        setup_logging(level="INFO", fmt="text")
        logging.getLogger("envconfig.loader").info("loaded")

        out = capsys.readouterr().out
        assert "envconfig.loader - INFO - loaded" in out

    def test_level_filters_records(self, capsys):
        setup_logging(level="ERROR", fmt="text")
        logging.getLogger("envconfig.loader").warning("quiet")

        assert "quiet" not in capsys.readouterr().out

    def test_defaults_come_from_settings(self, monkeypatch, capsys):
        monkeypatch.setenv("LOG_FORMAT", "json")
        setup_logging()
        logging.getLogger("envconfig").info("from settings")

        entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert entry["message"] == "from settings"

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging(fmt="text")
        package_logger = setup_logging(fmt="json")

        own = [h for h in package_logger.handlers if type(h).__name__ == "_EnvconfigHandler"]
        assert len(own) == 1

    def test_unknown_format_rejected(self):
        with pytest.raises(ValueError):
            setup_logging(fmt="xml")
