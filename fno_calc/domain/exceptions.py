"""
Domain Exceptions

Custom exceptions for domain layer errors.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class ValidationError(DomainError):
    """Raised when trade prices or quantities are not strictly positive."""

    DEFAULT_MESSAGE = "Please enter valid prices and quantities."

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)
        self.message = message
