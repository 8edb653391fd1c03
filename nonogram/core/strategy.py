"""Deterministic line propagation.

Each row and column is solved in isolation by a left-to-right pass over
(cell, run) states: a cell is fixed when every placement of the runs that
agrees with the cells already known gives it the same value. Changed
cells put the crossing lines back on the work queue until nothing changes.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Tuple

from .model import Cell, Hint, Puzzle

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    """Result of one propagation run."""
    SOLVED = "solved"
    CONTRADICTION = "contradiction"
    STALLED = "stalled"


class Strategy(Protocol):
    def solve(self, puzzle: Puzzle, randomize: bool = False) -> Outcome:
        ...


Line = Tuple[str, int]


def _run_end(cells: Sequence[int], empties: List[int], pos: int, run: int) -> Optional[int]:
    """Position after a run of ``run`` cells starting at ``pos`` plus its
    trailing gap, or None if the run cannot go there."""
    n = len(cells)
    end = pos + run
    if end > n or empties[end] != empties[pos]:
        return None
    if end == n:
        return n
    if cells[end] == Cell.FILLED:
        return None
    return end + 1


def solve_line(cells: Sequence[int], hint: Hint) -> Optional[List[int]]:
    """Return the line with every forced cell fixed, or None if no placement
    of ``hint`` is compatible with ``cells``."""
    n = len(cells)
    runs = len(hint)
    empties = [0]
    for value in cells:
        empties.append(empties[-1] + (value == Cell.EMPTY))

    # fits[pos][i]: runs i.. can be laid out in cells[pos:]
    fits = [[False] * (runs + 1) for _ in range(n + 1)]
    fits[n][runs] = True
    for pos in range(n - 1, -1, -1):
        for i in range(runs + 1):
            if cells[pos] != Cell.FILLED and fits[pos + 1][i]:
                fits[pos][i] = True
            elif i < runs:
                nxt = _run_end(cells, empties, pos, hint[i])
                fits[pos][i] = nxt is not None and fits[nxt][i + 1]
    if not fits[0][0]:
        return None

    can_fill = [False] * n
    can_empty = [False] * n
    reach = [[False] * (runs + 1) for _ in range(n + 1)]
    reach[0][0] = True
    for pos in range(n):
        for i in range(runs + 1):
            if not reach[pos][i]:
                continue
            if cells[pos] != Cell.FILLED and fits[pos + 1][i]:
                can_empty[pos] = True
                reach[pos + 1][i] = True
            if i == runs:
                continue
            nxt = _run_end(cells, empties, pos, hint[i])
            if nxt is None or not fits[nxt][i + 1]:
                continue
            end = pos + hint[i]
            for k in range(pos, end):
                can_fill[k] = True
            if end < n:
                can_empty[end] = True
            reach[nxt][i + 1] = True

    return [
        Cell.UNKNOWN if f and e else Cell.FILLED if f else Cell.EMPTY
        for f, e in zip(can_fill, can_empty)
    ]


class LineStrategy:
    """Propagate row and column hints to a fixpoint."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def solve(self, puzzle: Puzzle, randomize: bool = False) -> Outcome:
        """Mutate ``puzzle`` in place. On CONTRADICTION the puzzle is left
        partially updated and should be discarded."""
        lines: List[Line] = [("row", r) for r in range(puzzle.height)]
        lines += [("column", c) for c in range(puzzle.width)]
        if randomize:
            self.rng.shuffle(lines)
        queue = deque(lines)
        queued = set(lines)
        snapshot = puzzle.snapshot
        width = puzzle.width

        while queue:
            line = queue.popleft()
            queued.discard(line)
            kind, index = line
            if kind == "row":
                positions = range(index * width, (index + 1) * width)
                hint = puzzle.row_hints[index]
            else:
                positions = range(index, len(snapshot), width)
                hint = puzzle.column_hints[index]

            cells = [snapshot[p] for p in positions]
            solved = solve_line(cells, hint)
            if solved is None:
                logger.debug("no placement of %s fits %s %d", list(hint), kind, index)
                return Outcome.CONTRADICTION

            for p, old, new in zip(positions, cells, solved):
                if old != Cell.UNKNOWN or new == Cell.UNKNOWN:
                    continue
                snapshot[p] = Cell(new)
                cross = ("column", p % width) if kind == "row" else ("row", p // width)
                if cross not in queued:
                    queue.append(cross)
                    queued.add(cross)

        return Outcome.SOLVED if puzzle.is_solved else Outcome.STALLED
