"""Service layer exports."""

from .errors import SaveLoadError
from .document_service import DocumentService

__all__ = [
    "DocumentService",
    "SaveLoadError",
]
