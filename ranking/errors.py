"""
Ranking Errors
"""

from __future__ import annotations


class ClockError(RuntimeError):
    """Raised when the system clock reports a time before the Unix epoch.

    Not a StoreError: this signals a broken host environment and aborts the run.
    """
