"""
================================================================================
FILE: envconfig/exceptions.py
================================================================================

PURPOSE:
    Exception hierarchy for the configuration loader. Every error raised by
    envconfig carries a machine-readable error code and an optional context
    dict so callers can log or serialize it consistently.

EXCEPTION CATEGORIES:
    - FATAL (configuration cannot be built, caller decides whether to abort):
        * ConfigurationError: required value missing or override produced
          an invalid value
        * EnvFileError: .env file exists but could not be read or parsed

    Non-fatal conditions (missing .env file, invalid boolean literal) are
    logged as warnings and never raised.

KEY FACTS:
    - NO imports from other envconfig modules (prevents circular imports)
    - All exceptions inherit from EnvConfigException
    - The library never calls sys.exit(); every fatal error propagates
"""

from typing import Optional, Dict, Any

# ================================================================================
# BASE EXCEPTIONS
# ================================================================================

class EnvConfigException(Exception):
    """
    Root exception for all envconfig errors.

    Attributes:
        message (str): Human-readable error message
        error_code (str): Machine-readable error code for categorization
        context (dict): Additional context (optional)
    """

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dict for structured logging"""
        return {
            "error": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context
        }


class FatalException(EnvConfigException):
    """
    Error that aborts configuration construction.

    Raised out of the loader's entry point; nothing inside envconfig
    retries or swallows it.
    """
    pass

# ================================================================================
# CONFIGURATION EXCEPTIONS
# ================================================================================

class ConfigurationError(FatalException):
    """Invalid or incomplete configuration (fatal)"""

    def __init__(self, message: str, context: Optional[Dict] = None):
        super().__init__(message, error_code="CONFIG_ERROR", context=context)


class EnvFileError(FatalException):
    """The .env file exists but is unreadable or malformed (fatal)"""

    def __init__(self, message: str, context: Optional[Dict] = None):
        super().__init__(message, error_code="ENV_FILE_ERROR", context=context)
