"""
Wordle-style scoring (feedback) for a single (answer, guess) pair.

Conventions:
  - 'C' : Correct   = letter in the correct position
  - 'M' : Misplaced = letter occurs elsewhere in the answer
  - 'W' : Wrong     = letter absent (or present fewer times than guessed)

A Mask is a 5-tuple of Correctness values; its text notation is the five
letters joined, e.g. "CMWMC".

Algorithm (two-pass, duplicate-safe):
  1) First pass marks every exact positional match Correct and consumes
     that answer position.
  2) Second pass walks the remaining guess positions left to right and
     credits each to the first unconsumed answer position holding the same
     letter (Misplaced), or leaves it Wrong.
  Each answer letter is therefore credited to at most one guess letter.
"""

from __future__ import annotations

from enum import Enum
from itertools import product
from typing import Iterator, Optional, Tuple

from .words import WORD_LENGTH, as_word


class Correctness(str, Enum):
    CORRECT = "C"
    MISPLACED = "M"
    WRONG = "W"

    def __str__(self) -> str:
        return self.value


# Type alias for clarity; always WORD_LENGTH entries long
Mask = Tuple[Correctness, ...]

ALL_CORRECT: Mask = (Correctness.CORRECT,) * WORD_LENGTH

_NOTATION = {
    "c": Correctness.CORRECT,
    "m": Correctness.MISPLACED,
    "w": Correctness.WRONG,
}


def check(answer: str, guess: str) -> Mask:
    """
    Compute the feedback mask for `guess` against `answer`.

    Examples:
      check("aaabb", "abbab") -> (C, M, W, M, C)
      check("crane", "crane") -> ALL_CORRECT
    """
    answer = as_word(answer)
    guess = as_word(guess)

    mask = [Correctness.WRONG] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    # Pass 1: exact matches consume their answer position
    for i in range(WORD_LENGTH):
        if guess[i] == answer[i]:
            mask[i] = Correctness.CORRECT
            used[i] = True

    # Pass 2: first unconsumed occurrence, left to right
    for i in range(WORD_LENGTH):
        if mask[i] is Correctness.CORRECT:
            continue
        g = guess[i]
        for j in range(WORD_LENGTH):
            if not used[j] and answer[j] == g:
                used[j] = True
                mask[i] = Correctness.MISPLACED
                break

    return tuple(mask)


def permutations() -> Iterator[Mask]:
    """
    Yield all 3**5 = 243 possible masks.

    Stateless: every call starts a fresh, identically ordered iteration.
    """
    return product(Correctness, repeat=WORD_LENGTH)


def parse_mask(text: str) -> Optional[Mask]:
    """
    Parse feedback notation: c/C, m/M, w/W. Any other character is ignored.

    Returns None unless exactly WORD_LENGTH recognised characters are found.
    """
    mask = tuple(_NOTATION[ch] for ch in text.lower() if ch in _NOTATION)
    if len(mask) != WORD_LENGTH:
        return None
    return mask


def format_mask(mask: Mask) -> str:
    """(C, M, W, W, C) -> "CMWWC"."""
    return "".join(c.value for c in mask)
