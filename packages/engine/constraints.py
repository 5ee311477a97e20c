"""
Answer enumeration for a puzzle.

Given:
  - a loaded Dictionary
  - a PuzzleState

Return:
  - every dictionary word the puzzle accepts (required letter present,
    no letter outside the target set), ignoring what has been found so far.

This is the full answer key: max score, pangram totals and the survey CLI
are all computed from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .letterset import PANGRAM_SIZE, count, encode, is_subset_of
from .puzzle import PuzzleState

if TYPE_CHECKING:
    from packages.datasets.dictionary import Dictionary


def solutions(dictionary: "Dictionary", puzzle: PuzzleState) -> List[str]:
    """All accepted words for `puzzle`, sorted alphabetically."""
    out: List[str] = []
    for w in dictionary.all_valid_words:
        bits = encode(w)
        if bits & puzzle.required_bit and is_subset_of(bits, puzzle.target_bits):
            out.append(w)
    out.sort()
    return out


def pangrams(words: List[str]) -> List[str]:
    """Subset of `words` (already puzzle answers) that use all 7 letters."""
    return [w for w in words if count(encode(w)) == PANGRAM_SIZE]
