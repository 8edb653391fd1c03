from __future__ import annotations

import logging
import random
from typing import Optional

from .config import SearchConfig
from .model import Puzzle
from .search import search
from .strategy import LineStrategy, Outcome, Strategy

logger = logging.getLogger(__name__)


def solve(
    puzzle: Puzzle,
    strategy: Optional[Strategy] = None,
    config: Optional[SearchConfig] = None,
    randomize: bool = False,
    rng: Optional[random.Random] = None,
) -> Optional[Puzzle]:
    """Propagate, then fall back to guess-and-conquer if propagation stalls.

    Works on a copy; ``puzzle`` is left untouched. Returns the solved copy or
    None.
    """
    strategy = strategy or LineStrategy(rng)
    config = config or SearchConfig()
    work = puzzle.copy()

    outcome = strategy.solve(work, randomize)
    logger.info("propagation on %dx%d grid: %s", work.height, work.width, outcome.value)
    if outcome == Outcome.CONTRADICTION:
        return None
    if work.is_finished:
        return work if work.is_solved else None

    unknown = len(work.unknown_indices())
    logger.info(
        "%d cells undetermined, searching (depth %d, %d trials per level)",
        unknown, config.max_recursion_level, config.max_trials,
    )
    result = search(strategy, work, randomize, config, rng=rng)
    if result is None:
        logger.info("search found no solution")
    return result
