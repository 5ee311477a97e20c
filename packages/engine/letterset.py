"""
Letter sets as 26-bit masks.

A LetterSet answers "which letters appear in this word?" and nothing else:
  - bit i is set iff chr(ord('A') + i) occurs at least once
  - order and multiplicity are discarded ("HAPPY" and "HAP" differ only by Y)
  - case is ignored

Everything the puzzle needs reduces to bit arithmetic on these masks:
  - pangram test      -> count(bits) == 7
  - required letter   -> bits & required_bit != 0
  - allowed letters   -> bits & ~target_bits == 0
"""

from __future__ import annotations

from typing import List

# Bits 0..25; anything outside this range is a programming error.
ALPHABET_MASK = (1 << 26) - 1

# Number of distinct letters that makes a word a pangram in this puzzle.
PANGRAM_SIZE = 7


class InvalidCharacter(ValueError):
    """Raised when encode() sees something other than an ASCII letter."""


def _bit(ch: str) -> int:
    if "a" <= ch <= "z":
        return 1 << (ord(ch) - ord("a"))
    if "A" <= ch <= "Z":
        return 1 << (ord(ch) - ord("A"))
    raise InvalidCharacter(f"not a letter: {ch!r}")


def _check(bits: int) -> int:
    if bits < 0 or bits & ~ALPHABET_MASK:
        raise ValueError(f"letter set has bits outside A-Z: {bits:#x}")
    return bits


def encode(text: str) -> int:
    """
    Encode the distinct letters of `text` as a bitmask.

    Examples:
      encode("HAPPY") == encode("yphap")
      encode("ab")    -> 0b11

    Raises:
      InvalidCharacter if `text` contains anything but A-Z / a-z.
      Callers holding mixed input should filter first.
    """
    bits = 0
    for ch in text:
        bits |= _bit(ch)
    return bits


def decode_sorted(bits: int) -> List[str]:
    """Uppercase letters present in `bits`, in A..Z order."""
    _check(bits)
    return [chr(ord("A") + i) for i in range(26) if bits & (1 << i)]


def count(bits: int) -> int:
    """Population count (number of distinct letters)."""
    return bin(_check(bits)).count("1")


def is_subset_of(word_bits: int, target_bits: int) -> bool:
    """True iff every letter of `word_bits` is also in `target_bits`."""
    return word_bits & ~target_bits == 0
