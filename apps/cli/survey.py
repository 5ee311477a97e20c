# apps/cli/survey.py
"""
Generate many puzzles from one word list and measure how playable they are.

For each puzzle: letters, required letter, source pangram, number of
answers, number of pangrams, max score.

Writes: <outdir>/survey_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations
import argparse, sys, time, random
from pathlib import Path
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from packages.datasets import validate_wordlist, pretty_summary, load_dictionary
from packages.datasets.dictionary import Dictionary
from packages.engine import generate, total_score
from packages.engine.constraints import pangrams, solutions
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

CSV_FIELDS = ["index", "seed", "letters", "required", "pangram",
              "answers", "pangrams", "max_score"]


def _survey_one(dictionary: Dictionary, *, index: int, seed: int) -> Dict:
    puzzle = generate(dictionary, random.Random(seed))
    answers = solutions(dictionary, puzzle)
    return {
        "index": index,
        "seed": seed,
        "letters": puzzle.letters,
        "required": puzzle.required_letter,
        "pangram": puzzle.pangram,
        "answers": len(answers),
        "pangrams": len(pangrams(answers)),
        "max_score": total_score(answers, puzzle),
    }


def _summary(rows: List[Dict]) -> Dict:
    """Mean / median / p10 / p90 of answer counts and max scores."""
    out = {}
    for key in ("answers", "max_score"):
        arr = np.array([r[key] for r in rows], dtype=float)
        out[key] = {
            "mean": float(arr.mean()),
            "median": float(np.median(arr)),
            "p10": float(np.percentile(arr, 10)),
            "p90": float(np.percentile(arr, 90)),
            "min": int(arr.min()),
            "max": int(arr.max()),
        }
    return out


def main():
    ap = argparse.ArgumentParser(description="Survey puzzles generated from a word list")
    ap.add_argument("--words", default="packages/datasets/data/sample_words.txt")
    ap.add_argument("--puzzles", type=int, default=100, help="number of puzzles to generate")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    dictionary = load_dictionary(args.words)

    total = args.puzzles
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    iterator = tqdm(range(1, total + 1), ncols=80, desc="Surveying", unit="puzzle") \
        if mode == "bar" else range(1, total + 1)

    rows: List[Dict] = []
    start = time.time()
    last_print = 0.0
    for idx in iterator:
        # Per-puzzle seed: reproducible and distinct across indices
        per_seed = args.seed + idx * 1013904223
        rows.append(_survey_one(dictionary, index=idx, seed=per_seed))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    summary = _summary(rows) if rows else {}
    for key, stats in summary.items():
        print(f"{key}: mean={stats['mean']:.1f} median={stats['median']:.1f} "
              f"p10={stats['p10']:.1f} p90={stats['p90']:.1f} "
              f"range=[{stats['min']}, {stats['max']}]")

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"survey_{run_id}.csv"
    manifest_path = outdir / f"survey_{run_id}_manifest.json"

    write_csv(rows, str(csv_path), CSV_FIELDS)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_puzzles": len(rows),
        "summary": summary,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
