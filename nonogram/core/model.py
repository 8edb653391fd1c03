from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

from ..errors import PuzzleError


class Cell(IntEnum):
    """Tri-state value of a single grid cell."""
    UNKNOWN = 0
    FILLED = 1
    EMPTY = -1


Hint = Tuple[int, ...]
Snapshot = List[int]

_GLYPHS = {Cell.UNKNOWN: "?", Cell.FILLED: "#", Cell.EMPTY: "."}
_VALID_VALUES = frozenset(int(c) for c in Cell)


def line_hint(cells: Iterable[int]) -> Hint:
    """Run lengths of filled cells in a line, left to right."""
    runs = []
    run = 0
    for value in cells:
        if value == Cell.FILLED:
            run += 1
        elif run:
            runs.append(run)
            run = 0
    if run:
        runs.append(run)
    return tuple(runs)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _normalize_hints(hints: Iterable[Iterable[int]], length: int, kind: str) -> Tuple[Hint, ...]:
    result = []
    for i, raw in enumerate(hints):
        if not isinstance(raw, (list, tuple)) or not all(_is_int(n) for n in raw):
            raise PuzzleError(f"{kind} {i}: hint must be a list of integers, got {raw!r}")
        hint = tuple(raw)
        if any(n <= 0 for n in hint):
            raise PuzzleError(f"{kind} {i}: run lengths must be positive, got {list(hint)}")
        if sum(hint) + len(hint) - 1 > length:
            raise PuzzleError(f"{kind} {i}: hint {list(hint)} does not fit in {length} cells")
        result.append(hint)
    return tuple(result)


@dataclass
class Puzzle:
    """Row hints, column hints and the current row-major cell snapshot.

    The content passed in is always copied, so two puzzles never share a
    snapshot buffer.
    """
    row_hints: Tuple[Hint, ...]
    column_hints: Tuple[Hint, ...]
    content: Snapshot = field(default_factory=list)

    def __post_init__(self) -> None:
        rows = list(self.row_hints)
        columns = list(self.column_hints)
        if not rows or not columns:
            raise PuzzleError("puzzle needs at least one row and one column")
        self.row_hints = _normalize_hints(rows, len(columns), "row")
        self.column_hints = _normalize_hints(columns, len(rows), "column")

        size = self.height * self.width
        content = list(self.content) if self.content else [Cell.UNKNOWN] * size
        if len(content) != size:
            raise PuzzleError(f"content has {len(content)} cells, expected {size}")
        bad = [v for v in content if not _is_int(v) or v not in _VALID_VALUES]
        if bad:
            raise PuzzleError(f"invalid cell value {bad[0]!r}, expected one of -1, 0, 1")
        self.content = [Cell(v) for v in content]

    @classmethod
    def from_picture(cls, lines: Sequence[str]) -> "Puzzle":
        """Derive hints from a picture of ``#`` (filled) and ``.`` (empty).

        The returned puzzle has an all-unknown snapshot.
        """
        if not all(isinstance(line, str) for line in lines):
            raise PuzzleError("picture must be a list of strings")
        grid = [line.strip() for line in lines if line.strip()]
        if not grid:
            raise PuzzleError("picture is empty")
        width = len(grid[0])
        if any(len(line) != width for line in grid):
            raise PuzzleError("picture lines must all have the same length")
        if any(ch not in "#." for line in grid for ch in line):
            raise PuzzleError("picture may only contain '#' and '.'")
        cells = [[Cell.FILLED if ch == "#" else Cell.EMPTY for ch in line] for line in grid]
        rows = [line_hint(row) for row in cells]
        columns = [line_hint(row[c] for row in cells) for c in range(width)]
        return cls(rows, columns)

    @property
    def height(self) -> int:
        return len(self.row_hints)

    @property
    def width(self) -> int:
        return len(self.column_hints)

    @property
    def snapshot(self) -> Snapshot:
        """The live cell buffer. Mutating it mutates the puzzle."""
        return self.content

    @property
    def is_finished(self) -> bool:
        return Cell.UNKNOWN not in self.content

    @property
    def is_solved(self) -> bool:
        if not self.is_finished:
            return False
        if any(line_hint(self.row(r)) != hint for r, hint in enumerate(self.row_hints)):
            return False
        return all(line_hint(self.column(c)) == hint for c, hint in enumerate(self.column_hints))

    def row(self, index: int) -> List[int]:
        start = index * self.width
        return self.content[start:start + self.width]

    def column(self, index: int) -> List[int]:
        return self.content[index::self.width]

    def unknown_indices(self) -> List[int]:
        return [i for i, value in enumerate(self.content) if value == Cell.UNKNOWN]

    def copy(self, content: Optional[Sequence[int]] = None) -> "Puzzle":
        """A new puzzle with the same hints and a copy of ``content``
        (defaults to this puzzle's snapshot)."""
        return Puzzle(self.row_hints, self.column_hints, list(self.content if content is None else content))

    def render(self) -> str:
        lines = []
        for r in range(self.height):
            lines.append("".join(_GLYPHS[Cell(v)] for v in self.row(r)))
        return "\n".join(lines)
