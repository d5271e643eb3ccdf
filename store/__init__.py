"""
Store Module

Score persistence layer.

This module provides:
- JSON-file-backed score mappings (line text -> integer score)
- Initialize-if-absent and whole-file overwrite semantics
- Cache directory resolution per named instance
"""

__version__ = "0.1.0"

from .errors import StoreError, StoreFormatError, StoreIOError, StoreValueError
from .paths import resolve_cache_file
from .scores import ScoreStore

__all__ = [
    "ScoreStore",
    "StoreError",
    "StoreFormatError",
    "StoreIOError",
    "StoreValueError",
    "resolve_cache_file",
]
