"""
Build a clean puzzle dictionary from a raw word list (local file or URL).

What it does:
- Reads whitespace-separated tokens from --in, or downloads --url.
- Keeps usable words only (>= 4 ASCII letters), lowercased.
- De-duplicates while preserving source order (or sorts with --sort).
- Writes one word per line and reports the pangram candidate count.

Usage:
    python -m script.build_wordlist --in /usr/share/dict/words \
        --out packages/datasets/data/words.txt
    python -m script.build_wordlist --url https://example.org/words.txt --sort \
        --out packages/datasets/data/words.txt
"""

import argparse
from pathlib import Path

import requests

from packages.datasets.io import usable_tokens, write_lines
from packages.engine.letterset import PANGRAM_SIZE, count, encode


def fetch_text(url: str) -> str:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text


def main():
    ap = argparse.ArgumentParser(description="Build a clean word list for the puzzle")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--in", dest="inp", help="input text file")
    src.add_argument("--url", help="download the raw list from this URL")
    ap.add_argument("--out", required=True, help="output file (one word per line)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    if args.inp:
        inp = Path(args.inp)
        if not inp.exists():
            raise FileNotFoundError(inp)
        text = inp.read_text(encoding="utf-8", errors="ignore")
    else:
        text = fetch_text(args.url)

    words = usable_tokens(text)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    n_pangrams = sum(1 for w in words if count(encode(w)) == PANGRAM_SIZE)
    print(f"Wrote {len(words)} words ({n_pangrams} pangram candidates) -> {args.out}")


if __name__ == "__main__":
    main()
