import pytest

from packages.datasets import new_dictionary
from packages.engine import PuzzleState, encode

WORDS = """
plastic capitals clips clip pails panic attic tactic clasp claps
tips spit slit jukebox
"""


@pytest.fixture
def dictionary():
    return new_dictionary(WORDS)


@pytest.fixture
def plastic_puzzle():
    # letters of "plastic", required letter C shown first
    letters = ("C", "P", "L", "A", "S", "T", "I")
    return PuzzleState(
        target_bits=encode("plastic"),
        target_letters=letters,
        required_letter="C",
        required_bit=encode("C"),
        pangram="plastic",
    )
