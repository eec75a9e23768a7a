from __future__ import annotations

from collections.abc import Iterable, Iterator

NOT_FOUND = -1


class Vocabulary:
    """Ordered, immutable word list with constant-time word -> row lookup."""

    __slots__ = ("_words", "_index")

    def __init__(self, words: Iterable[str]) -> None:
        self._words: tuple[str, ...] = tuple(words)
        index: dict[str, int] = {}
        for i, word in enumerate(self._words):
            # Duplicates are the caller's problem; keep the first row like a list scan would.
            index.setdefault(word, i)
        self._index = index

    def index_of(self, word: str) -> int:
        """Return the row index of ``word``, or ``NOT_FOUND`` if absent."""
        return self._index.get(word, NOT_FOUND)

    def word_at(self, index: int) -> str:
        return self._words[index]

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self._words)})"
