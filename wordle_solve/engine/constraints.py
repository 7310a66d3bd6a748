"""
Candidate filtering given game history.

A Guess records one attempt: the word played and the mask it received.
`Guess.matches(candidate)` answers the inverse question of `check`: could
`candidate` be the hidden answer, given that this guess produced this mask?

It reproduces the multiplicity rules of `check` exactly, so that
    Guess(g, m).matches(w)  <=>  check(w, g) == m
which keeps a filtered pool identical to ground truth.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, TypeVar

from .scoring import ALL_CORRECT, Correctness, Mask, format_mask, parse_mask
from .words import WORD_LENGTH, Word, as_word

T = TypeVar("T")


@dataclass(frozen=True)
class Guess:
    word: Word
    mask: Mask

    def __post_init__(self):
        object.__setattr__(self, "word", as_word(self.word))
        mask = tuple(Correctness(c) for c in self.mask)
        if len(mask) != WORD_LENGTH:
            raise ValueError(f"mask must have {WORD_LENGTH} entries, got {len(mask)}")
        object.__setattr__(self, "mask", mask)

    @classmethod
    def parse(cls, word: str, feedback: str) -> Optional["Guess"]:
        """Build from feedback notation ("wcmww"); None if the notation is invalid."""
        mask = parse_mask(feedback)
        if mask is None:
            return None
        return cls(as_word(word), mask)

    def is_correct(self) -> bool:
        return self.mask == ALL_CORRECT

    def matches(self, candidate: str) -> bool:
        """True if `candidate` is still a possible answer after this guess."""
        w = as_word(candidate)
        g = self.word
        used = [False] * WORD_LENGTH

        # First scan: positions flagged Correct must coincide, all others must not
        for i, m in enumerate(self.mask):
            if m is Correctness.CORRECT:
                if w[i] != g[i]:
                    return False
                used[i] = True
            elif w[i] == g[i]:
                return False

        # Second scan: Misplaced consumes the first unused occurrence;
        # Wrong requires no unused occurrence left.
        for i, m in enumerate(self.mask):
            if m is Correctness.MISPLACED:
                for j in range(WORD_LENGTH):
                    if not used[j] and w[j] == g[i]:
                        used[j] = True
                        break
                else:
                    return False
            elif m is Correctness.WRONG:
                for j in range(WORD_LENGTH):
                    if not used[j] and w[j] == g[i]:
                        return False

        return True

    def __str__(self) -> str:
        return f"{self.word} [{' '.join(format_mask(self.mask))}]"


def filter_candidates(words: Mapping[str, T], guesses: Iterable[Guess]) -> Dict[Word, T]:
    """
    Keep only words consistent with EVERY guess in `guesses`.

    Args:
      words   : mapping word -> weight (e.g. a candidate pool)
      guesses : history of Guess records

    Returns:
      A new dict with the surviving words and their values, order preserved.
    """
    guesses = list(guesses)
    return {as_word(w): v for w, v in words.items()
            if all(g.matches(w) for g in guesses)}
