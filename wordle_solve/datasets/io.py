"""
Word-list resources.

Formats:
  - dictionary : one "<word> <frequency>" entry per line
  - answers    : one word per line

Both loaders are strict: the first malformed line raises DatasetError and
nothing partially loaded is returned.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

from wordle_solve.engine import InvalidWordError, Word

from .dictionary import Dictionary

log = logging.getLogger(__name__)


class DatasetError(ValueError):
    """A resource file contains a malformed line."""

    def __init__(self, path, lineno: int, line: str, reason: str):
        super().__init__(f"{path}:{lineno}: {reason}: {line!r}")
        self.path = str(path)
        self.lineno = lineno
        self.line = line
        self.reason = reason


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist, DatasetError if it
    is not valid UTF-8.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    data = p.read_bytes()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        start = data.rfind(b"\n", 0, e.start) + 1
        end = data.find(b"\n", e.start)
        line = data[start:end if end != -1 else len(data)].decode("utf-8", "replace")
        raise DatasetError(p, data.count(b"\n", 0, e.start) + 1, line.rstrip("\r"),
                           "not valid UTF-8") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def _resource_word(token: str) -> Word:
    # Resources must already be lowercase; only user input is normalised
    if token != token.lower():
        raise InvalidWordError(f"{token!r} is not lowercase")
    return Word(token)


def parse_answer_line(line: str) -> Word:
    """One word per line: "crane" -> Word("crane"). Raises InvalidWordError otherwise."""
    return _resource_word(line)


def parse_dictionary_line(line: str) -> Tuple[Word, int]:
    """
    "crane 123" -> (Word("crane"), 123)

    Raises ValueError (InvalidWordError for a bad or uppercase word) on anything else.
    """
    parts = line.split()
    if len(parts) != 2:
        raise ValueError("expected `word frequency`")
    word, freq = parts
    if not freq.isdigit():
        raise ValueError("frequency must be a non-negative integer")
    return _resource_word(word), int(freq)


def load_dictionary(p: Path | str) -> Dictionary:
    """Parse a dictionary resource. Raises DatasetError on the first bad line."""
    entries = {}
    for lineno, line in enumerate(read_lines(p), start=1):
        try:
            word, freq = parse_dictionary_line(line)
        except ValueError as e:
            raise DatasetError(p, lineno, line, str(e)) from e
        if word in entries:
            raise DatasetError(p, lineno, line, "duplicate word")
        entries[word] = freq

    log.info("Loaded %d dictionary words from %s", len(entries), p)
    return Dictionary(entries)


def load_answers(p: Path | str) -> List[Word]:
    """Parse an answer list (file order kept). Raises DatasetError on the first bad line."""
    answers: List[Word] = []
    for lineno, line in enumerate(read_lines(p), start=1):
        try:
            answers.append(parse_answer_line(line))
        except InvalidWordError as e:
            raise DatasetError(p, lineno, line, str(e)) from e

    log.info("Loaded %d answers from %s", len(answers), p)
    return answers
