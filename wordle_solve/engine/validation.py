"""
Lightweight guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is valid iff:
  - it is a string
  - it is a well-formed Word (five ASCII letters, case-insensitive)
  - it exists in the provided dictionary / allowed collection

Used by the game harness before a guess is accepted into the history.
"""

from typing import Collection

from .words import InvalidWordError, Word


def validate_guess(word: object, allowed: Collection[str]) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word    : proposed guess
      allowed : dictionary, set or other container of allowed words

    Notes:
      - Pass a set or mapping; membership on a list is O(n).
    """
    if not isinstance(word, str):
        return False

    try:
        w = Word(word)
    except InvalidWordError:
        return False

    return w in allowed
