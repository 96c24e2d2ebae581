"""Custom exceptions for prefmap.

Each exception type represents a category of error.
I/O failures are not wrapped: ``OSError`` reaches the caller unchanged.
"""


class PrefMapError(Exception):
    """Base exception for all prefmap errors."""

    pass


class ConfigError(PrefMapError):
    """Raised when the CLI configuration file is invalid or unreadable."""

    pass


class PlatformError(PrefMapError, ValueError):
    """Raised when a platform name is not recognized."""

    pass


class PreferencesDecodeError(PrefMapError, ValueError):
    """Raised when a preferences stream is not valid UTF-8."""

    pass
