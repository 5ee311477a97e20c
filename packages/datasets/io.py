from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from .dictionary import is_usable


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def usable_tokens(text: str) -> List[str]:
    """
    Whitespace-split `text`, keep usable words (lowercased), drop repeats.
    First-seen order is preserved.
    """
    seen, out = set(), []
    for token in text.split():
        if not is_usable(token):
            continue
        w = token.lower()
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out
