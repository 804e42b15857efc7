"""Custom exceptions for Progress Logger."""


class ProgressLoggerError(Exception):
    """Base exception for Progress Logger errors."""
    pass


class ConfigurationError(ProgressLoggerError, ValueError):
    """Invalid trigger criteria, or a value that needs missing configuration."""
    pass
