import pytest
from packages.engine.letterset import (
    ALPHABET_MASK, InvalidCharacter, count, decode_sorted, encode, is_subset_of,
)


@pytest.mark.parametrize("a,b", [
    ("HAPPY", "happy"),
    ("HAPPY", "YPHAP"),
    ("Plastic", "citsalp"),
])
def test_encode_ignores_case_order_and_repeats(a, b):
    assert encode(a) == encode(b)


def test_encode_bits():
    assert encode("a") == 1
    assert encode("ab") == 0b11
    assert encode("z") == 1 << 25
    assert encode("") == 0


@pytest.mark.parametrize("text", ["ab1", "a b", "café", "x-ray"])
def test_encode_rejects_non_letters(text):
    with pytest.raises(InvalidCharacter):
        encode(text)


@pytest.mark.parametrize("word,expected", [
    ("zebra", ["A", "B", "E", "R", "Z"]),
    ("HAPPY", ["A", "H", "P", "Y"]),
    ("plastic", ["A", "C", "I", "L", "P", "S", "T"]),
])
def test_decode_sorted(word, expected):
    assert decode_sorted(encode(word)) == expected


def test_decode_full_alphabet():
    letters = decode_sorted(ALPHABET_MASK)
    assert "".join(letters) == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def test_count():
    assert count(encode("HAP")) == 3
    assert count(encode("happy")) == 4
    assert count(encode("plastic")) == 7
    assert count(ALPHABET_MASK) == 26


def test_bits_outside_alphabet_are_errors():
    with pytest.raises(ValueError):
        count(1 << 26)
    with pytest.raises(ValueError):
        decode_sorted(1 << 31)


def test_is_subset_of():
    target = encode("plastic")
    assert is_subset_of(encode("clips"), target)
    assert is_subset_of(target, target)
    assert not is_subset_of(encode("panic"), target)
    assert is_subset_of(0, target)
