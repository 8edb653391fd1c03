"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from . import parser
from ..core.solver import solve
from ..errors import NonogramError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Nonogram solver with guess-and-conquer fallback")
    ap.add_argument("puzzle", type=Path, help="Path to puzzle YAML")
    ap.add_argument("--recursion-depth", type=int, default=None, help="Maximum nested guesses (overrides the file)")
    ap.add_argument("--max-trials", type=int, default=None, help="Guessed cells per level (overrides the file)")
    ap.add_argument("--random", action="store_true", help="Try candidate cells in random order")
    ap.add_argument("--seed", type=int, default=None, help="Seed for --random")
    ap.add_argument("--debug", action="store_true", help="Trace the search")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        doc = parser.load_puzzle(args.puzzle)
        config = doc.config.replace(
            max_recursion_level=args.recursion_depth,
            max_trials=args.max_trials,
            debug=True if args.debug else None,
        )
        seed = args.seed if args.seed is not None else doc.seed
        randomize = args.random or doc.randomize
    except OSError as exc:
        print(f"error: cannot read {args.puzzle}: {exc.strerror}", file=sys.stderr)
        return 2
    except NonogramError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    rng = random.Random(seed)
    logger.debug("loaded %dx%d puzzle from %s", doc.puzzle.height, doc.puzzle.width, args.puzzle)

    result = solve(doc.puzzle, config=config, randomize=randomize, rng=rng)
    if result is None:
        print("No solution found.")
        return 1
    print(result.render())
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
