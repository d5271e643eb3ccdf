"""
JSON-file-backed score store.

A score store maps line text to a signed 64-bit integer. The whole mapping is
loaded into memory at the start of a run and written back by full overwrite.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated

from pydantic import Field, TypeAdapter, ValidationError

from .errors import StoreFormatError, StoreIOError, StoreValueError

logger = logging.getLogger(__name__)

ScoreValue = Annotated[int, Field(strict=True, ge=-(2**63), le=2**63 - 1)]

_SCORES_ADAPTER: TypeAdapter[dict[str, int]] = TypeAdapter(dict[str, ScoreValue])


def _serialize_scores(scores: dict[str, int]) -> str:
    try:
        _ = _SCORES_ADAPTER.validate_python(scores)
    except ValidationError as e:
        raise StoreValueError(f"Score out of signed 64-bit range: {e}") from e
    return json.dumps(scores, sort_keys=True, ensure_ascii=False)


def _deserialize_scores(payload: str, path: Path) -> dict[str, int]:
    try:
        return _SCORES_ADAPTER.validate_json(payload)
    except ValidationError as e:
        raise StoreFormatError(f"Invalid score mapping in {path}: {e}") from e


class ScoreStore:
    """In-memory score mapping bound to the cache file it was loaded from."""

    path: Path | None

    def __init__(
        self,
        scores: dict[str, int] | None = None,
        path: str | Path | None = None,
    ) -> None:
        self._scores: dict[str, int] = dict(scores) if scores else {}
        self.path = Path(path) if path is not None else None

    @staticmethod
    def initialize(path: str | Path) -> None:
        """Create an empty score file at ``path`` unless one already exists."""
        path = Path(path)
        if path.exists():
            return
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "x", encoding="utf-8") as f:
                f.write(_serialize_scores({}))
        except FileExistsError:
            return
        except OSError as e:
            raise StoreIOError(f"Cannot create cache file {path}: {e}") from e
        logger.debug("Initialized empty score store at %s", path)

    @classmethod
    def load(cls, path: str | Path) -> "ScoreStore":
        """Read the score file at ``path``.

        Raises:
            StoreIOError: If the file cannot be opened or read
            StoreFormatError: If the contents are not UTF-8 or not a string -> int mapping
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = f.read()
        except UnicodeDecodeError as e:
            raise StoreFormatError(f"Cache file {path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise StoreIOError(f"Cannot read cache file {path}: {e}") from e
        scores = _deserialize_scores(payload, path)
        logger.debug("Loaded %d score(s) from %s", len(scores), path)
        return cls(scores, path=path)

    @classmethod
    def open(cls, path: str | Path) -> "ScoreStore":
        """Load the store at ``path``, creating an empty one first if absent."""
        path = Path(path)
        if not path.exists():
            cls.initialize(path)
        return cls.load(path)

    def get(self, key: str) -> int:
        return self._scores.get(key, 0)

    def set(self, key: str, value: int) -> None:
        self._scores[key] = value

    def remove(self, key: str) -> None:
        self._scores.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._scores)

    def to_dict(self) -> dict[str, int]:
        return dict(self._scores)

    def __contains__(self, key: object) -> bool:
        return key in self._scores

    def __len__(self) -> int:
        return len(self._scores)

    def __iter__(self) -> Iterator[str]:
        return iter(self._scores)

    def save(self, path: str | Path | None = None) -> None:
        """Overwrite the score file with the full in-memory mapping.

        The payload goes to a temporary file in the target directory first and
        is then moved over the old file, so the file on disk is either the old
        mapping or the new one.

        Raises:
            StoreValueError: If a score does not fit in a signed 64-bit integer
            StoreIOError: If the file cannot be written
        """
        target = Path(path) if path is not None else self.path
        if target is None:
            raise StoreIOError("No cache file path bound to this score store")
        payload = _serialize_scores(self._scores)
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(payload)
            os.replace(tmp_name, target)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreIOError(f"Cannot write cache file {target}: {e}") from e
        logger.debug("Saved %d score(s) to %s", len(self._scores), target)
