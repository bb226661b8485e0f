"""
================================================================================
FILE: envconfig/constants.py
================================================================================

PURPOSE:
    Environment variable names and default values used by the loader.
    Literal values only, no computation and no imports from other modules.

CONSTANT CATEGORIES:
    1. Loader variables
       - ENV_FILE_VAR: "ENV_FILE" (path override for the .env file)
       - DEFAULT_ENV_FILENAME: ".env"

    2. Service variables
       - DATABASE_URL, AUTH_SERVICE_URL, DEBUG, PORT

    3. Defaults
       - DEFAULT_AUTH_SERVICE_URL: "http://localhost:8080"
       - DEFAULT_DEBUG: False
       - DEFAULT_PORT: "8092"

    4. Boolean literals accepted for DEBUG
"""

# ================================================================================
# LOADER VARIABLES
# ================================================================================

ENV_FILE_VAR = "ENV_FILE"
DEFAULT_ENV_FILENAME = ".env"

# ================================================================================
# SERVICE VARIABLES
# ================================================================================

DATABASE_URL_VAR = "DATABASE_URL"
AUTH_SERVICE_URL_VAR = "AUTH_SERVICE_URL"
DEBUG_VAR = "DEBUG"
PORT_VAR = "PORT"

# ================================================================================
# DEFAULTS
# ================================================================================

# DATABASE_URL has no default: it is required
DEFAULT_DATABASE_URL = ""
DEFAULT_AUTH_SERVICE_URL = "http://localhost:8080"
DEFAULT_DEBUG = False
DEFAULT_PORT = "8092"

# ================================================================================
# BOOLEAN LITERALS
# ================================================================================

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

# ================================================================================
# LOGGING
# ================================================================================

LOG_FORMAT_TEXT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
REDACTED = "***"
