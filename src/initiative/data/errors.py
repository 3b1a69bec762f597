"""Custom exceptions for loading the persisted document."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when the data file cannot be read or is not valid YAML."""


class DataValidationError(DataError):
    """Raised when the YAML content does not have the expected structure."""
