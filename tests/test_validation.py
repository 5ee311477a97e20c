import pytest
from packages.engine import FoundWordsLedger, RejectionReason, record_found_word, validate_guess

R = RejectionReason


@pytest.mark.parametrize("guess,reason", [
    ("xyz", R.TOO_SHORT),
    ("cli", R.TOO_SHORT),
    ("", R.TOO_SHORT),
    ("cl1ps", R.INVALID_CHARACTERS),
    ("cl ps", R.INVALID_CHARACTERS),
    ("pails", R.MISSING_REQUIRED_LETTER),
    ("tips", R.MISSING_REQUIRED_LETTER),
    ("panic", R.USES_DISALLOWED_LETTER),
    ("jukebox", R.MISSING_REQUIRED_LETTER),
    ("clipt", R.NOT_IN_DICTIONARY),
    ("pacts", R.NOT_IN_DICTIONARY),
])
def test_rejections(guess, reason, plastic_puzzle, dictionary):
    o = validate_guess(guess, plastic_puzzle, dictionary, FoundWordsLedger())
    assert o.accepted is False
    assert o.is_pangram is False
    assert o.reason is reason


@pytest.mark.parametrize("guess,pangram", [
    ("clips", False),
    ("CLIPS", False),
    ("attic", False),
    ("plastic", True),
    ("capitals", True),
    ("  clasp ", False),
])
def test_acceptances(guess, pangram, plastic_puzzle, dictionary):
    o = validate_guess(guess, plastic_puzzle, dictionary, FoundWordsLedger())
    assert o.accepted is True
    assert o.reason is None
    assert o.is_pangram is pangram
    assert o.word == guess.strip().lower()


def test_length_checked_before_letters(plastic_puzzle, dictionary):
    # "zzz" misses the required letter too, but length wins
    o = validate_guess("zzz", plastic_puzzle, dictionary, FoundWordsLedger())
    assert o.reason is R.TOO_SHORT


def test_required_letter_checked_before_disallowed(plastic_puzzle, dictionary):
    # "pins" fails both checks; the required-letter check runs first
    o = validate_guess("pins", plastic_puzzle, dictionary, FoundWordsLedger())
    assert o.reason is R.MISSING_REQUIRED_LETTER


def test_validation_is_idempotent_and_pure(plastic_puzzle, dictionary):
    ledger = FoundWordsLedger()
    first = validate_guess("clips", plastic_puzzle, dictionary, ledger)
    second = validate_guess("clips", plastic_puzzle, dictionary, ledger)
    assert first == second
    assert ledger.count() == 0


def test_duplicate_law(plastic_puzzle, dictionary):
    ledger = FoundWordsLedger()
    record_found_word(ledger, "clips")
    o = validate_guess("CLIPS", plastic_puzzle, dictionary, ledger)
    assert o.reason is R.ALREADY_FOUND


def test_messages(plastic_puzzle, dictionary):
    ledger = FoundWordsLedger()
    assert validate_guess("xyz", plastic_puzzle, dictionary, ledger).message == "xyz is too short!"
    assert validate_guess("clipt", plastic_puzzle, dictionary, ledger).message == \
        "clipt is not in word list"
    assert validate_guess("plastic", plastic_puzzle, dictionary, ledger).message == \
        "plastic (pangram!)"
    for reason in RejectionReason:
        assert reason.message
