"""
Baus Module

Command-line front end for usage-ranked line sorting.

This module provides:
- YAML-backed defaults and a validated run configuration
- The sort/save orchestrator over the score store
- The ``baus`` typer CLI
"""

__version__ = "0.1.0"
