"""
Store Errors

Error taxonomy for score persistence.
"""

from __future__ import annotations


class StoreError(Exception):
    """Base class for score store failures."""


class StoreIOError(StoreError):
    """Raised when the cache directory or file cannot be created, read or written."""


class StoreFormatError(StoreError):
    """Raised when the cache file does not hold a valid score mapping."""


class StoreValueError(StoreError):
    """Raised when a score cannot be stored as a signed 64-bit integer."""
