"""Tests for envconfig.exceptions."""

from envconfig.exceptions import (
    ConfigurationError,
    EnvConfigException,
    EnvFileError,
    FatalException,
)


def test_configuration_error_format():
    err = ConfigurationError("DATABASE_URL is not set")
    assert str(err) == "[CONFIG_ERROR] DATABASE_URL is not set"
    assert err.message == "DATABASE_URL is not set"
    assert err.context == {}


def test_env_file_error_to_dict():
    err = EnvFileError("error reading .env file: boom", context={"path": "/srv/.env"})
    assert err.to_dict() == {
        "error": "EnvFileError",
        "error_code": "ENV_FILE_ERROR",
        "message": "error reading .env file: boom",
        "context": {"path": "/srv/.env"},
    }


def test_hierarchy():
    for cls in (ConfigurationError, EnvFileError):
        assert issubclass(cls, FatalException)
        assert issubclass(cls, EnvConfigException)
    assert not issubclass(EnvFileError, ConfigurationError)
