"""
Cache file location for named score stores.
"""

from __future__ import annotations

from pathlib import Path

import platformdirs

from .errors import StoreIOError

APP_NAME = "baus"
CACHE_SUFFIX = ".json"


def default_cache_dir() -> Path:
    """Return the per-user cache directory for the application."""
    return Path(platformdirs.user_cache_dir(APP_NAME))


def resolve_cache_file(name: str, cache_dir: str | Path | None = None) -> Path:
    """Return the cache file path for ``name``, creating its directory if needed."""
    base_dir = Path(cache_dir).expanduser() if cache_dir else default_cache_dir()
    try:
        base_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreIOError(f"Cannot create cache directory {base_dir}: {e}") from e
    return base_dir / f"{name}{CACHE_SUFFIX}"
