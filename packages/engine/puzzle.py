"""
Puzzle state and puzzle generation.

Generation (given a dictionary and an injected RNG):
  1) pick one pangram candidate uniformly            -> rng.choice
  2) target_bits = encode(pangram)
  3) canonical letters = decode_sorted(target_bits)  (A..Z)
  4) shuffle a fresh list of those 7 letters         -> rng.shuffle
  5) required letter = first letter after the shuffle

The RNG is always passed in (never the module-level `random`), so the same
dictionary and the same seed reproduce the same puzzle.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from .letterset import PANGRAM_SIZE, count, decode_sorted, encode, is_subset_of

if TYPE_CHECKING:
    from packages.datasets.dictionary import Dictionary


@dataclass(frozen=True)
class PuzzleState:
    """The active puzzle. Immutable for the whole session."""
    target_bits: int                 # the 7 allowed letters
    target_letters: Tuple[str, ...]  # display order; [0] is the required letter
    required_letter: str             # uppercase
    required_bit: int                # single bit inside target_bits
    pangram: str                     # source word (lowercase)

    def __post_init__(self):
        if count(self.target_bits) != PANGRAM_SIZE:
            raise ValueError(f"target must have {PANGRAM_SIZE} letters, got {self.target_bits:#x}")
        if len(self.target_letters) != PANGRAM_SIZE or encode("".join(self.target_letters)) != self.target_bits:
            raise ValueError(f"target_letters {self.target_letters} do not match target_bits")
        if count(self.required_bit) != 1 or not is_subset_of(self.required_bit, self.target_bits):
            raise ValueError(f"required letter {self.required_letter!r} is not one of the target letters")
        if encode(self.required_letter) != self.required_bit:
            raise ValueError(f"required_bit does not encode {self.required_letter!r}")

    @property
    def letters(self) -> str:
        """Display string, required letter first (e.g. 'CPLAITS')."""
        return "".join(self.target_letters)

    @property
    def outer_letters(self) -> Tuple[str, ...]:
        return self.target_letters[1:]


def generate(dictionary: "Dictionary", rng: random.Random) -> PuzzleState:
    """
    Derive a puzzle from a random pangram candidate.

    Args:
      dictionary : a loaded Dictionary (has at least one pangram candidate)
      rng        : random.Random (or anything with .choice/.shuffle)

    Returns:
      PuzzleState with letters in shuffled order; letters[0] is required.
    """
    pangram = rng.choice(dictionary.pangram_candidates)
    target_bits = encode(pangram)

    # New list; the canonical A..Z order is only the shuffle's starting point.
    letters = decode_sorted(target_bits)
    rng.shuffle(letters)

    required = letters[0]
    return PuzzleState(
        target_bits=target_bits,
        target_letters=tuple(letters),
        required_letter=required,
        required_bit=encode(required),
        pangram=pangram,
    )


new_puzzle = generate
