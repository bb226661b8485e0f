"""
================================================================================
ENVCONFIG PACKAGE - Service configuration from .env + environment
================================================================================

EXPORTS
-------
    new_config()        - Build a validated ServiceConfig (main entry point)
    ConfigLoader        - Loader with injectable env file / base dir / environ
    ServiceConfig       - Frozen configuration model
    with_*()            - Override constructors
    ConfigurationError  - Raised when configuration cannot be built
    setup_logging()     - Optional console logging for envconfig

ARCHITECTURE
------------
envconfig/
├── __init__.py        ← This file (exports everything)
├── config.py          ← ServiceConfig + overrides
├── loader.py          ← .env parsing, resolution, validation
├── settings.py        ← Loader's own logging settings
├── logging_config.py  ← setup_logging()
├── exceptions.py      ← Exception hierarchy
└── constants.py       ← Variable names and defaults

USAGE
-----
from envconfig import new_config, with_port, ConfigurationError

try:
    config = new_config(with_port(args.port))
except ConfigurationError as e:
    raise SystemExit(str(e))

================================================================================
"""

from envconfig.config import (
    Override,
    ServiceConfig,
    with_auth_service_url,
    with_database_url,
    with_debug,
    with_port,
)
from envconfig.exceptions import (
    ConfigurationError,
    EnvConfigException,
    EnvFileError,
    FatalException,
)
from envconfig.loader import ConfigLoader, new_config
from envconfig.logging_config import setup_logging
from envconfig.settings import LoaderSettings, get_loader_settings, reset_loader_settings

__version__ = "1.0.0"

__all__ = [
    'new_config',
    'ConfigLoader',
    'ServiceConfig',
    'Override',
    'with_database_url',
    'with_auth_service_url',
    'with_debug',
    'with_port',
    'EnvConfigException',
    'FatalException',
    'ConfigurationError',
    'EnvFileError',
    'LoaderSettings',
    'get_loader_settings',
    'reset_loader_settings',
    'setup_logging',
]
