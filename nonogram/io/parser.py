from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..core.config import SearchConfig
from ..core.model import Puzzle
from ..errors import ConfigError, PuzzleError


@dataclass
class PuzzleDocument:
    puzzle: Puzzle
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def config(self) -> SearchConfig:
        return SearchConfig.from_options(self.options)

    @property
    def randomize(self) -> bool:
        randomize = self.options.get("randomize", False)
        if not isinstance(randomize, bool):
            raise ConfigError(f"randomize must be true or false, got {randomize!r}")
        return randomize

    @property
    def seed(self) -> Optional[int]:
        seed = self.options.get("seed")
        if seed is None:
            return None
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise ConfigError(f"seed must be an integer, got {seed!r}")
        return seed


def parse_puzzle(data: Any) -> PuzzleDocument:
    """Build a PuzzleDocument from already-decoded YAML data."""
    if not isinstance(data, dict):
        raise PuzzleError("puzzle document must be a mapping")

    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise PuzzleError("options must be a mapping")

    if "picture" in data:
        picture = data["picture"]
        if isinstance(picture, str):
            picture = picture.splitlines()
        if not isinstance(picture, list):
            raise PuzzleError("picture must be a string or a list of strings")
        puzzle = Puzzle.from_picture(picture)
        return PuzzleDocument(puzzle=puzzle, options=options)

    missing = [key for key in ("rows", "columns") if key not in data]
    if missing:
        raise PuzzleError(f"puzzle document is missing {', '.join(missing)}")

    for key in ("rows", "columns"):
        if not isinstance(data[key], list):
            raise PuzzleError(f"{key} must be a list of hints")
    rows = [row or [] for row in data["rows"]]
    columns = [col or [] for col in data["columns"]]
    content = data.get("content") or []
    if not isinstance(content, list):
        raise PuzzleError("content must be a flat list of cell values")
    puzzle = Puzzle(rows, columns, content)
    return PuzzleDocument(puzzle=puzzle, options=options)


def load_puzzle(path: str | Path) -> PuzzleDocument:
    """Load a YAML puzzle description into a PuzzleDocument."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise PuzzleError(f"{path}: invalid YAML: {exc}") from exc
    return parse_puzzle(data)
