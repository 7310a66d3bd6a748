from pathlib import Path

import pytest

from wordle_solve.datasets import Dictionary

# Every feedback class of both opening words ("sugar", "lasso") holds at most
# three of these, so each answer is reachable well within six turns.
WORDS = {
    "bumpy": 1530,
    "crane": 12803,
    "grate": 8804,
    "hoard": 9415,
    "knoll": 702,
    "lasso": 2710,
    "lodge": 20116,
    "mania": 11542,
    "moist": 17201,
    "sugar": 108355,
    "tiger": 60172,
    "which": 25093468,
}


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return p


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary(WORDS)


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    return _write(tmp_path / "dictionary.txt", [f"{w} {n}" for w, n in WORDS.items()])


@pytest.fixture
def answers_file(tmp_path: Path) -> Path:
    return _write(tmp_path / "answers.txt", ["crane", "hoard", "which"])


@pytest.fixture
def write(tmp_path: Path):
    """write("name.txt", [lines]) -> path inside tmp_path"""
    return lambda name, lines: _write(tmp_path / name, lines)
