# apps/cli/run.py
"""
CLI entry point for playing a puzzle in the terminal.

This script:
  1) Validates the word list (prints counts + SHA, pangram candidates).
  2) Loads the dictionary and generates a puzzle from the given seed.
  3) Reads guesses line by line from stdin and prints each outcome.
     Commands: :found (list found words), :score, :quit
  4) Optionally writes:
       - CSV:  one row per guess (accepted/reason/points)
       - JSON: manifest with config, word-list hash, puzzle, git commit
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Dict, List

from packages.datasets import validate_wordlist, pretty_summary, load_dictionary
from packages.engine import generate, score_word
from packages.harness import GameSession
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

DEFAULT_WORDS = "packages/datasets/data/sample_words.txt"
CSV_FIELDS = ["turn", "guess", "accepted", "pangram", "reason", "points", "found_total"]


def _show_letters(session: GameSession) -> str:
    """'[C] P L A I T S' - required letter first, bracketed."""
    p = session.puzzle
    return " ".join([f"[{p.required_letter}]"] + list(p.outer_letters))


def _play(session: GameSession, lines) -> List[Dict]:
    """Feed lines to the session until EOF or :quit. Returns per-guess rows."""
    rows: List[Dict] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if line == ":quit":
            break
        if line == ":found":
            for w in session.ledger.iter():
                print(f"  {w}")
            continue
        if line == ":score":
            print(f"Score: {session.score}/{session.max_score} ({session.rank})")
            continue

        outcome = session.submit(line)
        if outcome.accepted:
            marker = " *" if outcome.is_pangram else ""
            print(f"{outcome.word}{marker}   Found Words: {session.ledger.count()}")
        else:
            print(outcome.message)

        rows.append({
            "turn": len(rows) + 1,
            "guess": outcome.word,
            "accepted": outcome.accepted,
            "pangram": outcome.is_pangram,
            "reason": outcome.reason.name if outcome.reason else "",
            "points": score_word(outcome.word, outcome.is_pangram) if outcome.accepted else 0,
            "found_total": session.ledger.count(),
        })
    return rows


def main():
    """
    Parse CLI args, validate the word list, run the game loop, write outputs.
    """
    ap = argparse.ArgumentParser(description="Spelling bee: play one puzzle in the terminal")
    ap.add_argument("--words", default=DEFAULT_WORDS,
                    help="path to the dictionary (whitespace-separated words)")
    ap.add_argument("--seed", type=int, help="RNG seed for the puzzle (omit for a random one)")
    ap.add_argument("--outdir", help="if given, write a CSV of guesses and a JSON manifest here")
    ap.add_argument("--reveal", action="store_true",
                    help="print the answer list when the game ends")
    args = ap.parse_args()

    # 1) Validate word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))

    # 2) Load dictionary; EmptySource / NoPangramCandidates end the run here
    dictionary = load_dictionary(args.words)

    seed = args.seed if args.seed is not None else random.randrange(2 ** 31)
    session = GameSession(dictionary, generate(dictionary, random.Random(seed)))

    print(f"Seed: {seed}")
    print(f"Letters: {_show_letters(session)}")
    print(f"Answers: {len(session.answers)} | max score: {session.max_score}")

    # 3) Game loop
    rows = _play(session, sys.stdin)

    print(f"Found Words: {session.ledger.count()} | Score: {session.score} ({session.rank})")
    if args.reveal:
        print(f"Pangram: {session.puzzle.pangram}")
        missed = [w for w in session.answers if not session.ledger.contains(w)]
        print(f"Missed ({len(missed)}): {' '.join(missed)}")

    # 4) Outputs
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = outdir / f"game_{run_id}.csv"
        manifest_path = outdir / f"game_{run_id}_manifest.json"

        write_csv(rows, str(csv_path), CSV_FIELDS)
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": {**vars(args), "seed": seed},
            "wordlist": rep,
            "puzzle": {
                "letters": session.puzzle.letters,
                "required": session.puzzle.required_letter,
                "pangram": session.puzzle.pangram,
            },
            "found": session.found,
            "score": session.score,
            "max_score": session.max_score,
        }
        write_manifest(manifest, str(manifest_path))

        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
