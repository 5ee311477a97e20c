"""
Game session primitives.

- GameSession: one player's puzzle, dictionary and found words, with a
  submit() that validates and records as a single step.
- run_case:    replay a list of guesses against a fresh seeded puzzle.

These are UI-agnostic so they can back a CLI, a notebook or a
request-per-thread server without changes.
"""

from __future__ import annotations
import random
import threading
import time
from typing import Dict, Iterable, List

from packages.datasets.dictionary import Dictionary
from packages.engine import (
    FoundWordsLedger, GuessOutcome, PuzzleState,
    generate, rank, score_word, solutions, total_score, validate_guess,
)


class GameSession:
    """
    Owns the mutable state of one game.

    submit() holds a per-session lock across validate + record: two
    identical guesses arriving together must not both be credited.
    """

    def __init__(self, dictionary: Dictionary, puzzle: PuzzleState,
                 ledger: FoundWordsLedger | None = None):
        self.dictionary = dictionary
        self.puzzle = puzzle
        self.ledger = ledger if ledger is not None else FoundWordsLedger()
        self._lock = threading.Lock()
        self._answers: List[str] | None = None

    @classmethod
    def new(cls, dictionary: Dictionary, seed: int | None = None) -> "GameSession":
        """Start a game on a puzzle drawn with random.Random(seed)."""
        return cls(dictionary, generate(dictionary, random.Random(seed)))

    def submit(self, guess: str) -> GuessOutcome:
        with self._lock:
            outcome = validate_guess(guess, self.puzzle, self.dictionary, self.ledger)
            if outcome.accepted:
                self.ledger.record(outcome.word)
            return outcome

    @property
    def answers(self) -> List[str]:
        # Computed lazily; the dictionary and puzzle never change.
        if self._answers is None:
            self._answers = solutions(self.dictionary, self.puzzle)
        return self._answers

    @property
    def found(self) -> List[str]:
        return list(self.ledger.iter())

    @property
    def score(self) -> int:
        return total_score(self.ledger.iter(), self.puzzle)

    @property
    def max_score(self) -> int:
        return total_score(self.answers, self.puzzle)

    @property
    def rank(self) -> str:
        return rank(self.score, self.max_score)


def run_case(
        dictionary: Dictionary,
        guesses: Iterable[str],
        *,
        seed: int | None = None,
) -> Dict:
    """
    Play `guesses` in order against the puzzle generated from `seed`.

    Returns:
        dict with keys:
            letters (str), required (str), pangram (str),
            outcomes (list of per-guess dicts), found (list[str]),
            score (int), max_score (int), rank (str), time_ms (float)
    """
    session = GameSession.new(dictionary, seed=seed)

    outcomes: List[Dict] = []
    t0 = time.perf_counter()
    for g in guesses:
        o = session.submit(g)
        outcomes.append({
            "guess": o.word,
            "accepted": o.accepted,
            "pangram": o.is_pangram,
            "reason": o.reason.name if o.reason else "",
            "points": score_word(o.word, o.is_pangram) if o.accepted else 0,
        })
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "letters": session.puzzle.letters,
        "required": session.puzzle.required_letter,
        "pangram": session.puzzle.pangram,
        "outcomes": outcomes,
        "found": session.found,
        "score": session.score,
        "max_score": session.max_score,
        "rank": session.rank,
        "time_ms": dt,
    }
