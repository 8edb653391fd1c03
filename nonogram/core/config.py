from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from ..errors import ConfigError

# Per-frame cap on guessed candidates. A safety valve against fan-out on
# large grids, not a property of the puzzle.
DEFAULT_MAX_TRIALS = 100
DEFAULT_RECURSION_DEPTH = 1


@dataclass(frozen=True)
class SearchConfig:
    """Bounds and tracing for the guess-and-conquer search."""
    max_recursion_level: int = DEFAULT_RECURSION_DEPTH
    max_trials: int = DEFAULT_MAX_TRIALS
    debug: bool = False
    checkpoint: Optional[Callable[[], None]] = None

    def __post_init__(self) -> None:
        if isinstance(self.max_recursion_level, bool) or not isinstance(self.max_recursion_level, int):
            raise ConfigError(f"recursion depth must be an integer, got {self.max_recursion_level!r}")
        if self.max_recursion_level < 0:
            raise ConfigError(f"recursion depth must be >= 0, got {self.max_recursion_level}")
        if isinstance(self.max_trials, bool) or not isinstance(self.max_trials, int):
            raise ConfigError(f"max trials must be an integer, got {self.max_trials!r}")
        if self.max_trials < 1:
            raise ConfigError(f"max trials must be >= 1, got {self.max_trials}")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]]) -> "SearchConfig":
        """Build a config from the ``options`` section of a puzzle document.

        Unknown keys are ignored.
        """
        options = options or {}
        if not isinstance(options, Mapping):
            raise ConfigError(f"options must be a mapping, got {type(options).__name__}")
        debug = options.get("debug", False)
        if not isinstance(debug, bool):
            raise ConfigError(f"debug must be true or false, got {debug!r}")
        return cls(
            max_recursion_level=options.get("recursion_depth", DEFAULT_RECURSION_DEPTH),
            max_trials=options.get("max_trials", DEFAULT_MAX_TRIALS),
            debug=debug,
        )

    def replace(self, **overrides: Any) -> "SearchConfig":
        """Copy with the given fields replaced; ``None`` values are skipped."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)
