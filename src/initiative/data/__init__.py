"""Data layer utilities for locating and reading the YAML document."""

from .errors import DataError, DataLoadError, DataValidationError
from .paths import get_default_data_path, get_log_path, get_user_data_dir

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "get_default_data_path",
    "get_log_path",
    "get_user_data_dir",
]
