from .letterset import InvalidCharacter, encode, decode_sorted, count, is_subset_of
from .puzzle import PuzzleState, generate, new_puzzle
from .ledger import AlreadyFound, FoundWordsLedger, record_found_word
from .validation import GuessOutcome, RejectionReason, validate_guess
from .scoring import score_word, total_score, rank
from .constraints import solutions

__all__ = [
    "InvalidCharacter", "encode", "decode_sorted", "count", "is_subset_of",
    "PuzzleState", "generate", "new_puzzle",
    "AlreadyFound", "FoundWordsLedger", "record_found_word",
    "GuessOutcome", "RejectionReason", "validate_guess",
    "score_word", "total_score", "rank",
    "solutions",
]
