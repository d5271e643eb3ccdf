"""Score-ordered ranking of input lines."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from store import ScoreStore

logger = logging.getLogger(__name__)


def rank(lines: Sequence[str], store: ScoreStore, descending: bool = False) -> list[str]:
    """Order ``lines`` by ascending stored score.

    Lines with equal scores keep their input order; unseen lines score 0.
    With ``descending`` the ascending result is reversed as a whole, which also
    reverses the order of tied lines. Repeated lines are ranked independently.
    The store is only read.
    """
    ranked = sorted(lines, key=store.get)
    if descending:
        ranked.reverse()
    logger.debug("Ranked %d line(s) (descending=%s)", len(ranked), descending)
    return ranked
