from pathlib import Path

from nonogram.io.cli import main

PUZZLES = Path(__file__).resolve().parent.parent / "puzzles"


def test_solves_heart(capsys):
    assert main([str(PUZZLES / "heart.yaml")]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == ".##.##."
    assert out.splitlines()[-1] == "...#..."


def test_solves_two_blocks(capsys):
    assert main([str(PUZZLES / "two_blocks.yaml")]) == 0
    assert capsys.readouterr().out == "#..#.\n.#..#\n"


def test_depth_flag_overrides_file(capsys):
    assert main([str(PUZZLES / "two_blocks.yaml"), "--recursion-depth", "0"]) == 1
    assert "No solution found." in capsys.readouterr().out


def test_random_flag_still_solves(capsys):
    assert main([str(PUZZLES / "two_blocks.yaml"), "--random", "--seed", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2 and all(len(line) == 5 for line in lines)


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.yaml")]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_invalid_option(tmp_path, capsys):
    path = tmp_path / "p.yaml"
    path.write_text("rows: [[1]]\ncolumns: [[1]]\noptions: {recursion_depth: -2}\n", encoding="utf-8")
    assert main([str(path)]) == 2
    assert "recursion depth" in capsys.readouterr().err


def test_malformed_content_exits_cleanly(tmp_path, capsys):
    path = tmp_path / "p.yaml"
    path.write_text("rows: [[1]]\ncolumns: [[1]]\ncontent: 5\n", encoding="utf-8")
    assert main([str(path)]) == 2
    assert "content" in capsys.readouterr().err


def test_non_boolean_randomize_exits_cleanly(tmp_path, capsys):
    path = tmp_path / "p.yaml"
    path.write_text("rows: [[1]]\ncolumns: [[1]]\noptions: {randomize: 'false'}\n", encoding="utf-8")
    assert main([str(path)]) == 2
    assert "randomize" in capsys.readouterr().err
