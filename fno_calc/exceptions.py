"""
Calculator exception classes
"""
from typing import Optional


class TradingError(Exception):
    """Base exception for application and boundary errors"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        Args:
            message: Error message
            error_code: Error code (optional)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ParseError(TradingError):
    """Raised when a raw input field cannot be coerced into a trade input"""

    def __init__(self, field: str, reason: str):
        """
        Args:
            field: Name of the offending input field
            reason: Why the value was rejected
        """
        message = f"Invalid value for '{field}': {reason}"
        super().__init__(message, error_code="PARSE_FAILED")
        self.field = field
        self.reason = reason


class ConfigurationError(TradingError):
    """Raised when a configuration value is malformed or out of range"""

    def __init__(self, config_key: str, reason: str):
        """
        Args:
            config_key: Configuration key
            reason: Why the value was rejected
        """
        message = f"Configuration error ({config_key}): {reason}"
        super().__init__(message, error_code="CONFIG_ERROR")
        self.config_key = config_key
        self.reason = reason
