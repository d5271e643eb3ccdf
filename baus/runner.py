"""Sort/save orchestration over a named score store."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from ranking import cleanup, rank, update_first
from store import ScoreStore, resolve_cache_file

from baus.config import Action, SelectorConfig
from baus.lines import read_lines

logger = logging.getLogger(__name__)


class SelectorRunner:
    """Runs one sort or save cycle: load store, read lines, process, persist."""

    def __init__(
        self,
        config: SelectorConfig,
        cache_file: str | Path | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.config = config
        self.cache_file = (
            Path(cache_file)
            if cache_file is not None
            else resolve_cache_file(config.name, config.cache_dir)
        )
        self.clock = clock if clock is not None else time.time

    def load_store(self) -> ScoreStore:
        return ScoreStore.open(self.cache_file)

    def run(self, source: TextIO) -> list[str]:
        """Load the store, then consume ``source`` and return the output lines."""
        store = self.load_store()
        lines = read_lines(source)
        logger.debug("Read %d input line(s)", len(lines))
        return self.process(lines, store)

    def process(self, lines: Sequence[str], store: ScoreStore) -> list[str]:
        if self.config.action is Action.SORT:
            return self._sort(lines, store)
        return self._save(lines, store)

    def _sort(self, lines: Sequence[str], store: ScoreStore) -> list[str]:
        ranked = rank(lines, store, descending=self.config.desc)
        if self.config.cleanup:
            cleanup(store, ranked)
        return ranked

    def _save(self, lines: Sequence[str], store: ScoreStore) -> list[str]:
        line = update_first(lines, store, self.config.value, clock=self.clock)
        store.save()
        return [line] if line is not None else []
