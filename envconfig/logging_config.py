# ============================================================================
# Logging setup - console handler for the envconfig logger tree
# ============================================================================

"""
Attach a single stdout handler to the ``envconfig`` logger.

Two formats:
1. text - "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
2. json - one JSON object per line, same fields as a structured log entry

Library code only ever calls logging.getLogger(__name__); this module is
for applications that want envconfig's warnings visible without configuring
logging themselves.
"""

import json
import logging
import sys
from datetime import datetime
from typing import Optional

from envconfig.constants import LOG_FORMAT_TEXT
from envconfig.settings import get_loader_settings

PACKAGE_LOGGER = "envconfig"

# ============================================================================
# FORMATTERS
# ============================================================================

class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


class _EnvconfigHandler(logging.StreamHandler):
    """Marker subclass so setup_logging() can find and replace its own handler."""


# ============================================================================
# SETUP
# ============================================================================

def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """
    Configure the envconfig logger.

    Args:
        level: DEBUG/INFO/WARNING/ERROR (default: LOG_LEVEL setting)
        fmt: "text" or "json" (default: LOG_FORMAT setting)

    Returns:
        The configured package logger
    """
    settings = get_loader_settings()
    level = (level or settings.log_level).upper()
    fmt = (fmt or settings.log_format).lower()

    if fmt not in ("text", "json"):
        raise ValueError(f"Unsupported log format: {fmt}")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level, logging.INFO))

    # Replace rather than stack on repeated calls
    for existing in list(package_logger.handlers):
        if isinstance(existing, _EnvconfigHandler):
            package_logger.removeHandler(existing)

    handler = _EnvconfigHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT_TEXT))
    package_logger.addHandler(handler)

    return package_logger
