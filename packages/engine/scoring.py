"""
Points for found words.

Conventions:
  - 4-letter word : 1 point
  - longer word   : 1 point per letter
  - pangram       : +7 bonus on top of its length

Ranks are fractions of the puzzle's maximum score (every answer found).
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from .letterset import PANGRAM_SIZE, count, encode
from .puzzle import PuzzleState

PANGRAM_BONUS = 7

# (name, minimum fraction of max score), ascending.
RANKS: Sequence[Tuple[str, float]] = (
    ("Beginner", 0.00),
    ("Good Start", 0.02),
    ("Moving Up", 0.05),
    ("Good", 0.08),
    ("Solid", 0.15),
    ("Nice", 0.25),
    ("Great", 0.40),
    ("Amazing", 0.50),
    ("Genius", 0.70),
)


def score_word(word: str, is_pangram: bool = False) -> int:
    """
    Examples:
      score_word("clip")           -> 1
      score_word("clips")          -> 5
      score_word("plastic", True)  -> 14
    """
    n = len(word)
    points = 1 if n == 4 else n
    if is_pangram:
        points += PANGRAM_BONUS
    return points


def total_score(words: Iterable[str], puzzle: PuzzleState) -> int:
    """
    Sum of score_word() over `words` (e.g. a FoundWordsLedger).

    Pangram status is recomputed from each word's letters so the ledger
    does not need to remember it.
    """
    total = 0
    for w in words:
        bits = encode(w)
        total += score_word(w, count(bits) == PANGRAM_SIZE and bits == puzzle.target_bits)
    return total


def rank(points: int, max_points: int) -> str:
    """Highest rank whose threshold `points` reaches."""
    if max_points <= 0:
        return RANKS[0][0]
    frac = points / max_points
    name = RANKS[0][0]
    for r, threshold in RANKS:
        if frac >= threshold:
            name = r
    return name
