"""
I/O utilities for game and survey runs.

Responsibilities:
- write_csv:      write rows (one dict per guess or per puzzle) to a CSV.
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence
import csv
import json
import subprocess
import datetime as dt


def write_csv(rows: List[Dict], path: str, fields: Sequence[str]) -> str:
    """
    Serialize rows to CSV with a fixed column order.

    Args:
      rows   : list of dicts; keys outside `fields` are ignored,
               missing keys are written as empty cells.
      path   : output CSV path.
      fields : column names, in order.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(fields), extrasaction="ignore", restval="")
        w.writeheader()
        for r in rows:
            w.writerow(r)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words path, seed, outdir, ...)
      - wordlist: output of datasets.validate_wordlist(...)
      - puzzle / num_puzzles
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
