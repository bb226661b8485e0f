"""
Service configuration model and override constructors.

ServiceConfig is the immutable result handed to the rest of the application.
Overrides are plain callables that adjust the in-progress field mapping after
file/environment resolution and before validation:

    config = new_config(
        with_database_url(cli_args.database_url),   # skipped if empty
        with_debug(True),
    )
"""

from typing import Any, Callable, Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field, model_validator

from envconfig.constants import (
    AUTH_SERVICE_URL_VAR,
    DATABASE_URL_VAR,
    DEFAULT_AUTH_SERVICE_URL,
    DEFAULT_DEBUG,
    DEFAULT_PORT,
    REDACTED,
)

# An override receives the mutable field mapping keyed by field name.
Override = Callable[[Dict[str, Any]], None]


class ServiceConfig(BaseModel):
    """
    Resolved configuration for the service process.

    Frozen after construction; database_url and auth_service_url are
    guaranteed non-empty.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    database_url: str = Field(
        description="Connection string for the persistence backend",
    )
    auth_service_url: str = Field(
        default=DEFAULT_AUTH_SERVICE_URL,
        description="URL of the auth service",
    )
    debug: bool = Field(
        default=DEFAULT_DEBUG,
        description="Verbose/debug behaviour in the consuming application",
    )
    port: str = Field(
        default=DEFAULT_PORT,
        description="Port the consuming service binds",
    )

    @model_validator(mode="after")
    def _check_required(self) -> "ServiceConfig":
        if not self.database_url:
            raise ValueError(f"{DATABASE_URL_VAR} is not set")
        if not self.auth_service_url:
            raise ValueError(f"{AUTH_SERVICE_URL_VAR} is not set")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary with credentials redacted.

        Returns:
            Field values with the database password masked
        """
        d = self.model_dump()
        d["database_url"] = redact_url(self.database_url)
        return d

    def __repr_args__(self):
        # Keep raw credentials out of repr()/str() and therefore out of logs
        return list(self.to_dict().items())


def redact_url(url: str) -> str:
    """Mask the password portion of a URL, leaving everything else intact."""
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return url

    if parts.password is None:
        return url

    userinfo = f"{parts.username}:{REDACTED}" if parts.username else REDACTED
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    if port is not None:
        host = f"{host}:{port}"
    return urlunsplit(parts._replace(netloc=f"{userinfo}@{host}"))


# ============================================================================
# OVERRIDE CONSTRUCTORS
# ============================================================================

def with_database_url(url: Optional[str]) -> Override:
    """Set database_url unless url is empty."""
    def _apply(fields: Dict[str, Any]) -> None:
        if url:
            fields["database_url"] = url
    return _apply


def with_auth_service_url(url: Optional[str]) -> Override:
    """Set auth_service_url unless url is empty."""
    def _apply(fields: Dict[str, Any]) -> None:
        if url:
            fields["auth_service_url"] = url
    return _apply


def with_debug(debug: bool) -> Override:
    """Set debug unconditionally."""
    def _apply(fields: Dict[str, Any]) -> None:
        fields["debug"] = debug
    return _apply


def with_port(port: Optional[str]) -> Override:
    """Set port unless port is empty."""
    def _apply(fields: Dict[str, Any]) -> None:
        if port:
            fields["port"] = port
    return _apply


__all__ = [
    "ServiceConfig",
    "Override",
    "redact_url",
    "with_database_url",
    "with_auth_service_url",
    "with_debug",
    "with_port",
]
