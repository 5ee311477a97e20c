"""
Dictionary for the puzzle: usable words and pangram candidates.

Loading rules (applied per whitespace-separated token):
  - usable   : length >= 4 and ASCII letters only
  - stored   : lowercased, deduplicated
  - pangram  : usable AND exactly 7 distinct letters

The dictionary is built once at startup and never changes afterwards.
A source that yields no usable words, or no pangram candidates, cannot
produce a playable puzzle and is rejected at construction time.
"""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Iterable, List, Set, Tuple

from packages.engine.letterset import PANGRAM_SIZE, count, encode

MIN_WORD_LENGTH = 4


class DictionaryError(ValueError):
    """Base class for dictionaries that cannot host a puzzle."""


class EmptySource(DictionaryError):
    """No usable words in the source."""


class NoPangramCandidates(DictionaryError):
    """Usable words exist, but none has exactly 7 distinct letters."""


def is_usable(word: str) -> bool:
    """length >= 4 and made only of A-Z / a-z."""
    return len(word) >= MIN_WORD_LENGTH and word.isascii() and word.isalpha()


class Dictionary:
    """
    Immutable word store.

    Attributes:
      all_valid_words    : frozenset of lowercase usable words
      pangram_candidates : tuple of words with 7 distinct letters, in the order
                           they first appeared in the source (stable for
                           seeded random selection)
    """

    __slots__ = ("_words", "_pangrams")

    def __init__(self, words: Iterable[str], pangrams: Iterable[str]):
        self._words: FrozenSet[str] = frozenset(words)
        self._pangrams: Tuple[str, ...] = tuple(pangrams)
        assert set(self._pangrams) <= self._words, "pangram candidates must be valid words"

    @classmethod
    def load(cls, word_source: str | Iterable[str]) -> "Dictionary":
        """
        Build a dictionary from raw text (or an iterable of text chunks).

        Raises:
          EmptySource          if no token passes is_usable()
          NoPangramCandidates  if no usable word has 7 distinct letters
        """
        if isinstance(word_source, str):
            word_source = [word_source]

        words: Set[str] = set()
        pangrams: List[str] = []

        for chunk in word_source:
            for token in chunk.split():
                if not is_usable(token):
                    continue
                w = token.lower()
                if w in words:
                    continue
                words.add(w)
                if count(encode(w)) == PANGRAM_SIZE:
                    pangrams.append(w)

        if not words:
            raise EmptySource("word source contains no usable words")
        if not pangrams:
            raise NoPangramCandidates(
                f"none of {len(words)} usable words has exactly {PANGRAM_SIZE} distinct letters")

        return cls(words, pangrams)

    @property
    def all_valid_words(self) -> FrozenSet[str]:
        return self._words

    @property
    def pangram_candidates(self) -> Tuple[str, ...]:
        return self._pangrams

    def contains(self, word: str) -> bool:
        """Case-insensitive membership."""
        return word.lower() in self._words

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Dictionary(words={len(self._words)}, pangrams={len(self._pangrams)})"


def new_dictionary(raw_text: str) -> Dictionary:
    return Dictionary.load(raw_text)


def load_dictionary(path: str | Path) -> Dictionary:
    """
    Read a UTF-8 word list from disk and build a Dictionary.

    Raises:
      FileNotFoundError if the path doesn't exist
      DictionaryError   (EmptySource / NoPangramCandidates) on unusable content
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return Dictionary.load(f)
