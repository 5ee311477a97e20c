"""
Guess validation.

This module answers the question: "Does this guess earn credit right now?"
A guess is checked in a fixed order and the FIRST failing check decides the
outcome:

  1. shorter than 4 letters            -> TOO_SHORT
  2. contains a non-letter character   -> INVALID_CHARACTERS
  3. lacks the required letter         -> MISSING_REQUIRED_LETTER
  4. uses a letter outside the puzzle  -> USES_DISALLOWED_LETTER
  5. not a dictionary word             -> NOT_IN_DICTIONARY
  6. already in the ledger             -> ALREADY_FOUND
  otherwise accepted; a pangram iff the word uses 7 distinct letters.

The pangram test needs no comparison with the target: an accepted
word is a subset of the 7-letter target, so 7 distinct letters means it
uses all of them.

Rejections are ordinary return values. validate_guess() never touches the
ledger; recording an accepted word is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from .letterset import PANGRAM_SIZE, count, encode, is_subset_of
from .ledger import FoundWordsLedger
from .puzzle import PuzzleState

if TYPE_CHECKING:
    from packages.datasets.dictionary import Dictionary

MIN_GUESS_LENGTH = 4


class RejectionReason(Enum):
    TOO_SHORT = "is too short!"
    INVALID_CHARACTERS = "contains non-letter characters"
    MISSING_REQUIRED_LETTER = "does not use the required letter"
    USES_DISALLOWED_LETTER = "uses letters outside the puzzle"
    NOT_IN_DICTIONARY = "is not in word list"
    ALREADY_FOUND = "was already found"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class GuessOutcome:
    """Result of one validate_guess() call. Either accepted or rejected."""
    word: str
    accepted: bool
    is_pangram: bool = False
    reason: Optional[RejectionReason] = None

    @classmethod
    def accept(cls, word: str, *, is_pangram: bool) -> "GuessOutcome":
        return cls(word=word, accepted=True, is_pangram=is_pangram)

    @classmethod
    def reject(cls, word: str, reason: RejectionReason) -> "GuessOutcome":
        return cls(word=word, accepted=False, reason=reason)

    @property
    def message(self) -> str:
        """Human-readable line, e.g. 'xyz is too short!' or 'plastic (pangram!)'."""
        if self.accepted:
            return f"{self.word} (pangram!)" if self.is_pangram else self.word
        return f"{self.word} {self.reason.message}"


def validate_guess(guess: str,
                   puzzle: PuzzleState,
                   dictionary: "Dictionary",
                   ledger: FoundWordsLedger) -> GuessOutcome:
    """
    Classify `guess` against the puzzle, the dictionary and the found words.

    Args:
      guess      : raw guess text (surrounding whitespace is ignored)
      puzzle     : current PuzzleState
      dictionary : loaded Dictionary
      ledger     : words already credited

    Returns:
      GuessOutcome; the same inputs always give the same outcome.
    """
    w = guess.strip().lower()

    if len(w) < MIN_GUESS_LENGTH:
        return GuessOutcome.reject(w, RejectionReason.TOO_SHORT)

    # Upstream input normally only offers the puzzle's tiles; free text may not.
    if not (w.isascii() and w.isalpha()):
        return GuessOutcome.reject(w, RejectionReason.INVALID_CHARACTERS)

    word_bits = encode(w)

    if word_bits & puzzle.required_bit == 0:
        return GuessOutcome.reject(w, RejectionReason.MISSING_REQUIRED_LETTER)

    if not is_subset_of(word_bits, puzzle.target_bits):
        return GuessOutcome.reject(w, RejectionReason.USES_DISALLOWED_LETTER)

    if not dictionary.contains(w):
        return GuessOutcome.reject(w, RejectionReason.NOT_IN_DICTIONARY)

    if ledger.contains(w):
        return GuessOutcome.reject(w, RejectionReason.ALREADY_FOUND)

    return GuessOutcome.accept(w, is_pangram=count(word_bits) == PANGRAM_SIZE)
