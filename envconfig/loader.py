# ============================================================================
# CONFIGURATION LOADER - .env file + process environment + overrides
# ============================================================================

"""
Build a validated ServiceConfig from a .env file and the process environment.

RESPONSIBILITY:
- Locate the .env file (ENV_FILE, else <base_dir>/.env)
- Parse it with python-dotenv (missing file is fine, broken file is not)
- Resolve each field: .env value -> environment value -> default
- Apply caller overrides in order
- Validate required fields

RESOLUTION PRIORITY (highest to lowest):
1. Overrides passed to new_config()
2. Non-empty value from the .env file
3. Non-empty value from the process environment
4. Hardcoded default

An empty value at any level counts as absent.

ERRORS:
- .env missing             -> warning, continue with environment only
- .env unreadable/broken   -> EnvFileError, wrapped in ConfigurationError
- DEBUG not a bool literal -> warning, default used
- DATABASE_URL / AUTH_SERVICE_URL empty -> ConfigurationError
"""

import io
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import dotenv_values
from dotenv.parser import parse_stream
from dotenv.variables import parse_variables
from pydantic import ValidationError

from envconfig.config import Override, ServiceConfig
from envconfig.constants import (
    AUTH_SERVICE_URL_VAR,
    DATABASE_URL_VAR,
    DEBUG_VAR,
    DEFAULT_AUTH_SERVICE_URL,
    DEFAULT_DATABASE_URL,
    DEFAULT_DEBUG,
    DEFAULT_ENV_FILENAME,
    DEFAULT_PORT,
    ENV_FILE_VAR,
    FALSE_LITERALS,
    PORT_VAR,
    TRUE_LITERALS,
)
from envconfig.exceptions import ConfigurationError, EnvFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class ConfigLoader:
    """Resolve ServiceConfig from a .env file and the process environment."""

    def __init__(
        self,
        env_file: Optional[PathLike] = None,
        base_dir: Optional[PathLike] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize config loader.

        Args:
            env_file: Explicit .env path (wins over ENV_FILE)
            base_dir: Directory holding the default .env
                (default: two levels above this module, the source tree root)
            environ: Mapping used as the process environment, also the source
                for ${VAR} expansion in the .env file (default: os.environ)
        """
        self.env_file = Path(env_file) if env_file else None
        self.base_dir = Path(base_dir) if base_dir else Path(__file__).resolve().parents[1]
        self.environ = os.environ if environ is None else environ

    # ========================================================================
    # .env FILE
    # ========================================================================

    def env_file_path(self) -> Path:
        """Path of the .env file this loader reads."""
        if self.env_file is not None:
            return self.env_file

        override = self.environ.get(ENV_FILE_VAR, "")
        if override:
            return Path(override)

        return self.base_dir / DEFAULT_ENV_FILENAME

    def load_file_definitions(self) -> Dict[str, str]:
        """
        Read KEY=VALUE definitions from the .env file.

        Returns:
            Mapping of key to value; empty if the file does not exist

        Raises:
            EnvFileError: file exists but cannot be read or parsed
        """
        path = self.env_file_path()

        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except FileNotFoundError:
            logger.warning(
                f"⚠️  .env file not found at {path}, using only OS environment variables"
            )
            return {}
        except (OSError, UnicodeDecodeError) as e:
            raise EnvFileError(
                f"error reading .env file: {e}",
                context={"path": str(path)},
            ) from e

        for binding in parse_stream(io.StringIO(content)):
            if binding.error or (binding.key is not None and binding.value is None):
                line = binding.original.line
                raise EnvFileError(
                    f"error reading .env file: cannot parse line {line} of {path}",
                    context={"path": str(path), "line": line},
                )

        values = dotenv_values(stream=io.StringIO(content), interpolate=False)
        definitions = self._interpolate(values)
        logger.debug(f"✓ Loaded {len(definitions)} definitions from {path}")
        return definitions

    def _interpolate(self, values: Mapping[str, Optional[str]]) -> Dict[str, str]:
        """
        Expand ${VAR} and ${VAR:-default} references in file values.

        Keys defined earlier in the file win over the loader's environ,
        as python-dotenv does against os.environ.
        """
        resolved: Dict[str, str] = {}
        for key, value in values.items():
            if value is None:
                continue
            env: Dict[str, Optional[str]] = {**self.environ, **resolved}
            resolved[key] = "".join(atom.resolve(env) for atom in parse_variables(value))
        return resolved

    # ========================================================================
    # RESOLUTION
    # ========================================================================

    def resolve_string(self, mapping: Mapping[str, str], key: str, fallback: str) -> str:
        """.env value, else environment value, else fallback (empty counts as absent)."""
        value = mapping.get(key)
        if value:
            return value

        value = self.environ.get(key)
        if value:
            return value

        return fallback

    def resolve_bool(self, mapping: Mapping[str, str], key: str, fallback: bool) -> bool:
        """
        Resolve key as a boolean.

        Accepts 1/t/T/TRUE/true/True and 0/f/F/FALSE/false/False. Any other
        literal logs a warning and yields fallback instead of failing the load.
        """
        raw = self.resolve_string(mapping, key, str(fallback).lower())

        if raw in TRUE_LITERALS:
            return True
        if raw in FALSE_LITERALS:
            return False

        logger.warning(f"⚠️  invalid boolean value for {key}, using fallback")
        return fallback

    # ========================================================================
    # FACTORY
    # ========================================================================

    def new_config(self, *overrides: Override) -> ServiceConfig:
        """
        Build a validated ServiceConfig.

        Args:
            *overrides: Applied in order after resolution; later ones win

        Returns:
            Fresh, frozen ServiceConfig

        Raises:
            ConfigurationError: .env unreadable, required field missing,
                or an override produced an invalid value
        """
        try:
            definitions = self.load_file_definitions()
        except EnvFileError as e:
            logger.error(f"❌ Failed to load environment: {e.message}")
            raise ConfigurationError(
                f"failed to load environment: {e.message}",
                context=e.context,
            ) from e

        fields: Dict[str, Any] = {
            "database_url": self.resolve_string(definitions, DATABASE_URL_VAR, DEFAULT_DATABASE_URL),
            "auth_service_url": self.resolve_string(definitions, AUTH_SERVICE_URL_VAR, DEFAULT_AUTH_SERVICE_URL),
            "debug": self.resolve_bool(definitions, DEBUG_VAR, DEFAULT_DEBUG),
            "port": self.resolve_string(definitions, PORT_VAR, DEFAULT_PORT),
        }

        for override in overrides:
            override(fields)

        try:
            config = ServiceConfig(**fields)
        except ValidationError as e:
            for err in e.errors():
                # Required-field check lives on the model; surface its message as-is
                if not err["loc"] and err["type"] == "value_error":
                    raise ConfigurationError(str(err["ctx"]["error"])) from e
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(
                f"invalid configuration: {problems}",
                context={"fields": sorted(fields)},
            ) from e

        logger.info(f"✅ Configuration loaded: {config.to_dict()}")
        return config


def new_config(
    *overrides: Override,
    env_file: Optional[PathLike] = None,
    base_dir: Optional[PathLike] = None,
) -> ServiceConfig:
    """
    Build a ServiceConfig from the process environment.

    Each call reads the .env file again and returns a new object; callers
    that want a process-wide instance should build it once at startup and
    pass it along.
    """
    return ConfigLoader(env_file=env_file, base_dir=base_dir).new_config(*overrides)


__all__ = ["ConfigLoader", "new_config"]
