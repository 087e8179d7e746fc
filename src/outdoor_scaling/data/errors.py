"""Custom exceptions for configuration loading and validation."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when JSON files are missing or unreadable."""


class DataValidationError(DataError):
    """Raised when JSON content fails structural validation."""
