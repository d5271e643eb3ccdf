"""
Ranking Module

Usage-based ordering of input lines.

This module implements:
- Stable score-ordered ranking with optional descending reversal
- Update policies (usage count or last-used timestamp)
- Cleanup policy that evicts lines no longer offered
"""

__version__ = "0.1.0"

from .engine import rank
from .errors import ClockError
from .policies import ValueKind, cleanup, trim_line_ending, update_first

__all__ = [
    "ClockError",
    "ValueKind",
    "cleanup",
    "rank",
    "trim_line_ending",
    "update_first",
]
