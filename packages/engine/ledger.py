from __future__ import annotations

from typing import Dict, Iterator, List


class AlreadyFound(ValueError):
    """Raised by FoundWordsLedger.record() for a word it already holds."""


class FoundWordsLedger:
    """
    Append-only record of the words credited to the player.

    Words are stored lowercase in the order they were found. The ledger
    enforces uniqueness on its own, even though validate_guess() already
    rejects repeats before a caller gets here.
    """

    def __init__(self):
        self._words: List[str] = []
        self._index: Dict[str, int] = {}

    def record(self, word: str) -> None:
        w = word.strip().lower()
        if w in self._index:
            raise AlreadyFound(f"already found: {w}")
        self._index[w] = len(self._words)
        self._words.append(w)

    def contains(self, word: str) -> bool:
        return word.strip().lower() in self._index

    def count(self) -> int:
        return len(self._words)

    def iter(self) -> Iterator[str]:
        """Words in insertion order. Each call starts a fresh pass."""
        return iter(tuple(self._words))

    __contains__ = contains
    __len__ = count
    __iter__ = iter

    def __repr__(self) -> str:
        return f"FoundWordsLedger({self._words!r})"


def record_found_word(ledger: FoundWordsLedger, word: str) -> None:
    ledger.record(word)
