"""Data layer utilities for loading JSON configuration."""

from .errors import DataError, DataLoadError, DataValidationError
from .paths import get_definitions_path, get_package_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "get_definitions_path",
    "get_package_root",
]
