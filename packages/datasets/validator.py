"""
Word-list validator.

What this module does:
- Inspect a raw word list (whitespace-separated tokens, usually one per line).
- Count tokens, usable words (>= 4 ASCII letters), duplicates and skipped tokens.
- Count pangram candidates (exactly 7 distinct letters).
- Compute SHA-256 of the raw file for run manifests.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/datasets/data/sample_words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Set, Tuple
import hashlib

from packages.engine.letterset import PANGRAM_SIZE, count, encode
from .dictionary import is_usable


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list."""
    path: str                 # file path (as given)
    exists: bool              # did the file exist on disk?
    sha256: str               # SHA-256 of raw file bytes (empty string if missing)
    tokens: int               # whitespace-separated tokens seen
    usable: int               # usable tokens (duplicates included)
    unique_count: int         # distinct usable words after lowercasing
    skipped: int              # tokens that failed is_usable()
    pangram_candidates: int   # distinct usable words with 7 distinct letters
    passed: bool
    issues: List[str]         # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path) -> Tuple[int, int, Set[str], int]:
    """
    Tokenize a word list and classify every token.

    Returns:
      (token_count, usable_count, unique_words, skipped_count)
    """
    tokens = 0
    usable = 0
    skipped = 0
    unique: Set[str] = set()

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            for tok in raw.split():
                tokens += 1
                if is_usable(tok):
                    usable += 1
                    unique.add(tok.lower())
                else:
                    skipped += 1

    return tokens, usable, unique, skipped


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate a word list for puzzle use.

    Parameters
    ----------
    path : str
        Path to the raw dictionary file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport schema). `passed`
        is True iff the list would load as a Dictionary: at least one usable
        word and at least one pangram candidate. Skipped tokens and
        duplicates are reported as issues but do not fail the check, since
        the loader filters them.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = WordListReport(path, False, "", 0, 0, 0, 0, 0, False, issues)
        return asdict(rep)

    tokens, usable, unique, skipped = _scan(p)
    n_pangrams = sum(1 for w in unique if count(encode(w)) == PANGRAM_SIZE)

    if not unique:
        issues.append("word list contains 0 usable words")
    elif n_pangrams == 0:
        issues.append(f"no word has exactly {PANGRAM_SIZE} distinct letters")

    if skipped:
        issues.append(f"{skipped} token(s) skipped (short or non-alphabetic)")
    if usable != len(unique):
        issues.append(f"{usable - len(unique)} duplicate word(s)")

    rep = WordListReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        tokens=tokens,
        usable=usable,
        unique_count=len(unique),
        skipped=skipped,
        pangram_candidates=n_pangrams,
        passed=bool(unique) and n_pangrams > 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=3021 (uniq=2980, skipped=12, sha=abc123...) | pangrams=415 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['usable']} (uniq={report['unique_count']}, "
        f"skipped={report['skipped']}, sha={sha}) "
        f"| pangrams={report['pangram_candidates']} | {status}"
    )
