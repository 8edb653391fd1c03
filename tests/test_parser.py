from pathlib import Path

import pytest

from nonogram.core.config import SearchConfig
from nonogram.io.parser import load_puzzle, parse_puzzle
from nonogram.errors import ConfigError, PuzzleError

PUZZLES = Path(__file__).resolve().parent.parent / "puzzles"


def test_load_two_blocks():
    doc = load_puzzle(PUZZLES / "two_blocks.yaml")
    assert doc.puzzle.row_hints == ((1, 1), (1, 1))
    assert doc.puzzle.column_hints[2] == ()
    assert doc.config == SearchConfig(max_recursion_level=1, max_trials=100)
    assert doc.randomize is False
    assert doc.seed is None


def test_load_picture():
    doc = load_puzzle(PUZZLES / "heart.yaml")
    assert doc.puzzle.height == 6
    assert doc.puzzle.width == 7
    assert doc.puzzle.row_hints[0] == (2, 2)


def test_content_and_options(tmp_path):
    path = tmp_path / "p.yaml"
    path.write_text(
        "rows: [[1]]\n"
        "columns: [[1], []]\n"
        "content: [0, -1]\n"
        "options: {randomize: true, seed: 4}\n",
        encoding="utf-8",
    )
    doc = load_puzzle(path)
    assert doc.puzzle.snapshot == [0, -1]
    assert doc.randomize is True
    assert doc.seed == 4


def test_null_hints_mean_empty_lines():
    doc = parse_puzzle({"rows": [None, [1]], "columns": [[1]]})
    assert doc.puzzle.row_hints == ((), (1,))


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"rows": [[1]]},
        {"rows": 3, "columns": [[1]]},
        {"rows": [[1]], "columns": [[1]], "options": [1]},
        {"picture": ["#", "##"]},
        {"rows": [[1]], "columns": [[1]], "content": 5},
        {"rows": [[1]], "columns": [[1]], "content": [[1]]},
        {"picture": 5},
        {"picture": [1, 2]},
        {"rows": [["12"]], "columns": [[1], [1]]},
    ],
)
def test_bad_documents_raise(data):
    with pytest.raises(PuzzleError):
        parse_puzzle(data)


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("rows: [[1]\n", encoding="utf-8")
    with pytest.raises(PuzzleError):
        load_puzzle(path)


def test_bad_seed_raises():
    doc = parse_puzzle({"rows": [[1]], "columns": [[1]], "options": {"seed": "x"}})
    with pytest.raises(ConfigError):
        doc.seed


def test_randomize_must_be_boolean():
    doc = parse_puzzle({"rows": [[1]], "columns": [[1]], "options": {"randomize": "false"}})
    with pytest.raises(ConfigError):
        doc.randomize
