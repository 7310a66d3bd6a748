"""
Word value type.

A Word is exactly five ASCII letters, stored lowercase. It subclasses `str`
so it hashes, compares and sorts like the plain string (lexicographic order),
but a malformed value can never be constructed:

    Word("Crane")  -> "crane"
    Word("cranes") -> InvalidWordError
"""

from __future__ import annotations

from string import ascii_lowercase

# Wordle words are always five letters.
WORD_LENGTH = 5

_LETTERS = frozenset(ascii_lowercase)


class InvalidWordError(ValueError):
    """Raised when a value is not exactly WORD_LENGTH ASCII letters."""


class Word(str):
    __slots__ = ()

    def __new__(cls, value: str) -> "Word":
        if isinstance(value, Word):
            return value
        if not isinstance(value, str):
            raise InvalidWordError(f"expected a string, got {type(value).__name__}")

        w = value.strip().lower()
        if len(w) != WORD_LENGTH or not _LETTERS.issuperset(w):
            raise InvalidWordError(
                f"{value!r} is not a {WORD_LENGTH}-letter ASCII word")
        return super().__new__(cls, w)

    def __repr__(self) -> str:
        return f"Word({str(self)!r})"


def as_word(value: str) -> Word:
    """Return `value` unchanged if it is already a Word, else validate it."""
    return value if isinstance(value, Word) else Word(value)
