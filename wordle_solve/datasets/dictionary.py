from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Tuple, Union

from wordle_solve.engine import Word, as_word


class Dictionary(Mapping[Word, int]):
    """
    Immutable word -> frequency table, iterated in lexicographic order.

    Built once from a resource (see `load_dictionary`) and passed explicitly
    to whatever needs it; solvers clone their candidate pools from it.
    """

    def __init__(self, entries: Union[Mapping[str, int], Iterable[Tuple[str, int]]]):
        if isinstance(entries, Mapping):
            entries = entries.items()
        table = {}
        for w, freq in entries:
            w = as_word(w)
            if w in table:
                raise ValueError(f"duplicate word: {w}")
            if int(freq) < 0:
                raise ValueError(f"negative frequency for {w}: {freq}")
            table[w] = int(freq)
        self._table = MappingProxyType(dict(sorted(table.items())))

    def __getitem__(self, word: str) -> int:
        return self._table[word]

    def __iter__(self) -> Iterator[Word]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, word: object) -> bool:
        return word in self._table

    def __repr__(self) -> str:
        return f"Dictionary({len(self._table)} words)"

