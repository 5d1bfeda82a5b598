"""Titan Security exceptions"""


class TitanSecurityError(Exception):
    """Base class for all errors raised by this package."""


class InvalidModeError(TitanSecurityError, ValueError):
    """Requested house mode is not Day, Night or Away."""

    def __init__(self, requested):
        self.requested = requested
        super().__init__(f"Unknown mode: {requested!r}")


class ConfigError(TitanSecurityError):
    """Configuration file missing or invalid."""
