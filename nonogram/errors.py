"""Exception hierarchy for the nonogram solver."""

from __future__ import annotations


class NonogramError(Exception):
    """Base class for every error raised by this package."""


class PuzzleError(NonogramError, ValueError):
    """Puzzle data is malformed: bad hints, bad content or a bad document."""


class ConfigError(NonogramError, ValueError):
    """A search option has an invalid value."""


class SearchCancelled(NonogramError):
    """Raised from a search checkpoint to abandon the whole search."""
