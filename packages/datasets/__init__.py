from .dictionary import (
    Dictionary, DictionaryError, EmptySource, NoPangramCandidates,
    is_usable, new_dictionary, load_dictionary,
)
from .validator import validate_wordlist, pretty_summary
from .io import write_lines, usable_tokens

__all__ = [
    "Dictionary", "DictionaryError", "EmptySource", "NoPangramCandidates",
    "is_usable", "new_dictionary", "load_dictionary",
    "validate_wordlist", "pretty_summary",
    "write_lines", "usable_tokens",
]
