"""Service-layer exceptions."""


class SaveLoadError(Exception):
    """Raised when the document cannot be written to disk."""
