"""
Command line tests.
"""

import json

import pytest

from main import Application, parse_args
from pour_sort.engine import decode_letters, Move


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def run(*argv):
    return Application(parse_args(list(argv))).run()


def test_decode_letters():
    assert decode_letters("acBA") == [Move(0, 2), Move(1, 0)]
    assert decode_letters("  ") == []
    with pytest.raises(ValueError):
        decode_letters("abc")
    with pytest.raises(ValueError):
        decode_letters("a-")


def test_solve_replays_moves_first(workdir, capsys):
    assert run("--height", "4", "--levels-dir", str(workdir), "solve", "0", "--moves", "ab") == 0
    assert "(already solved)" in capsys.readouterr().out


def test_solve_without_moves(workdir, capsys):
    assert run("--height", "4", "--levels-dir", str(workdir), "solve", "0") == 0
    out = capsys.readouterr().out
    assert "Solution: ab " in out
    assert "1 moves" in out


@pytest.mark.parametrize("moves", ["aa", "ac", "abc", "a b", "a1"])
def test_solve_rejects_bad_moves(workdir, moves):
    assert run("--height", "4", "--levels-dir", str(workdir), "solve", "0", "--moves", moves) == 1


def test_generate_remembers_level(workdir, capsys):
    assert run("--height", "3", "--levels-dir", str(workdir), "generate", "0") == 0
    assert "Level 0 (glass height 3)" in capsys.readouterr().out

    saved = json.loads((workdir / "config.json").read_text(encoding="utf-8"))
    assert saved["level_number"] == 0
    assert saved["glass_height"] == 3


def test_generate_defaults_to_last_level(workdir, capsys):
    (workdir / "config.json").write_text(
        json.dumps({"level_number": 0, "glass_height": 2, "levels_dir": str(workdir)}),
        encoding="utf-8",
    )
    assert run("generate") == 0
    assert "Level 0 (glass height 2)" in capsys.readouterr().out
