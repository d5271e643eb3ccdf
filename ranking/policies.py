"""Update and cleanup policies applied to a score store."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Sequence
from enum import Enum

from store import ScoreStore

from .errors import ClockError

logger = logging.getLogger(__name__)


class ValueKind(str, Enum):
    """How a save event updates the score of the chosen line."""

    COUNT = "count"
    TIMESTAMP = "timestamp"


def trim_line_ending(line: str) -> str:
    """Strip one trailing ``\\n`` or ``\\r\\n``."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def _epoch_seconds(clock: Callable[[], float]) -> int:
    now = clock()
    if now < 0:
        raise ClockError(f"System clock is before the Unix epoch ({now})")
    return int(now)


def update_first(
    lines: Sequence[str],
    store: ScoreStore,
    value_kind: ValueKind = ValueKind.COUNT,
    clock: Callable[[], float] = time.time,
) -> str | None:
    """Record a usage event for the first line and return it.

    Returns None and leaves the store untouched when ``lines`` is empty.

    Raises:
        ClockError: If ``value_kind`` is TIMESTAMP and the clock is before the epoch
    """
    if not lines:
        logger.debug("No input lines, nothing to update")
        return None
    line = trim_line_ending(lines[0])
    if value_kind is ValueKind.COUNT:
        score = store.get(line) + 1
    else:
        score = _epoch_seconds(clock)
    store.set(line, score)
    logger.debug("Updated %r to %d (%s)", line, score, value_kind.value)
    return line


def cleanup(store: ScoreStore, retained_lines: Iterable[str]) -> None:
    """Restrict ``store`` to ``retained_lines`` and persist it.

    Tracked lines not in ``retained_lines`` are dropped; retained lines that
    are not tracked yet get a score of 0.
    """
    retained = set(retained_lines)
    evicted = [key for key in store.keys() if key not in retained]
    for key in evicted:
        store.remove(key)
    added = 0
    for line in retained:
        if line not in store:
            store.set(line, 0)
            added += 1
    if evicted:
        logger.info("Cleanup evicted %d stale line(s)", len(evicted))
    logger.debug("Cleanup added %d new line(s)", added)
    store.save()
