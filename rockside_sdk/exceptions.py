"""
Exceptions for the Rockside SDK.
"""
from typing import Optional


class RocksideError(Exception):
    """Base exception for Rockside SDK errors."""
    pass


class ConfigurationError(RocksideError, ValueError):
    """Raised when the client is built with invalid options."""
    pass


class RocksideApiError(RocksideError):
    """Raised when the Rockside API answers with an unexpected status."""

    def __init__(self, message: Optional[str], status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class HexDecodeError(RocksideError, ValueError):
    """Raised when a hex string cannot be decoded to bytes."""
    pass
