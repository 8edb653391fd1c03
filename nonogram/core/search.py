"""Guess-and-conquer search.

Used when line propagation stalls. A cell is guessed filled and the
strategy is run on the result:

* contradiction: the cell is proven empty, and stays empty for the rest of
  this frame;
* solved: the trial is the answer;
* stalled: recurse one level deeper if the depth budget allows, otherwise
  (or if the deeper search fails) the guess is dropped and the cell goes
  back to unknown.

Every trial gets its own copy of the snapshot, so the only state carried
from one candidate to the next is the set of cells proven empty.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from .config import SearchConfig
from .model import Cell, Puzzle
from .strategy import Outcome, Strategy

logger = logging.getLogger(__name__)


def candidate_indices(snapshot: Sequence[int]) -> List[int]:
    """Indices of unknown cells, ascending."""
    return [i for i, value in enumerate(snapshot) if value == Cell.UNKNOWN]


def order_candidates(candidates: List[int], randomize: bool, rng: Optional[random.Random] = None) -> List[int]:
    """Sequential order, or a uniform shuffle (draw without replacement)."""
    if not randomize:
        return list(candidates)
    shuffled = list(candidates)
    (rng or random).shuffle(shuffled)
    return shuffled


def search(
    strategy: Strategy,
    puzzle: Puzzle,
    randomize: bool = False,
    config: Optional[SearchConfig] = None,
    level: int = 0,
    rng: Optional[random.Random] = None,
) -> Optional[Puzzle]:
    """Return a solved puzzle, or None if none was found within the bounds.

    ``puzzle`` itself is never mutated. A finished puzzle is returned as is
    when solved.
    """
    config = config or SearchConfig()
    if puzzle.is_finished:
        return puzzle if puzzle.is_solved else None

    candidates = candidate_indices(puzzle.snapshot)
    if not candidates:
        raise AssertionError("unfinished puzzle has no unknown cells")

    snapshot = list(puzzle.snapshot)
    order = order_candidates(candidates, randomize, rng)
    for attempt, index in enumerate(order[:config.max_trials]):
        if config.checkpoint is not None:
            config.checkpoint()
        if config.debug:
            logger.debug("[%d] trial %d: guessing cell %d filled", level, attempt, index)

        snapshot[index] = Cell.FILLED
        trial = puzzle.copy(snapshot)
        outcome = strategy.solve(trial, False)

        if outcome == Outcome.CONTRADICTION:
            if config.debug:
                logger.debug("[%d] cell %d is empty by contradiction", level, index)
            snapshot[index] = Cell.EMPTY
            continue

        if trial.is_finished:
            if trial.is_solved:
                if config.debug:
                    logger.debug("[%d] guessed cell %d filled: solved", level, index)
                return trial
        elif level < config.max_recursion_level:
            if config.debug:
                logger.debug(">>> recursing to level %d", level + 1)
            result = search(strategy, trial.copy(), randomize, config, level + 1, rng)
            if config.debug:
                logger.debug("<<< back from level %d", level + 1)
            if result is not None:
                if config.debug:
                    logger.debug("[%d] guessed cell %d filled: solved below", level, index)
                return result

        snapshot[index] = Cell.UNKNOWN

    return None
