"""
Text utilities for duplicate detection: diacritic folding, trigram
similarity, and the normalized artist/title key of a report line.
"""

import re
import unicodedata
from typing import List

from ..exceptions import ValidationError

# Letters that carry no combining mark under NFKD
_UNDECOMPOSABLE = str.maketrans(
    {
        "Æ": "AE",
        "æ": "ae",
        "Œ": "OE",
        "œ": "oe",
        "Ø": "O",
        "ø": "o",
        "Ł": "L",
        "ł": "l",
        "Đ": "D",
        "đ": "d",
        "Ħ": "H",
        "ħ": "h",
        "Ŧ": "T",
        "ŧ": "t",
        "Ɨ": "I",
        "ı": "i",
        "ß": "s",
        "Ŋ": "N",
        "ŋ": "n",
    }
)

_NON_LETTER_RE = re.compile(r"[^A-Za-z]")

_RATE_MARKER = "rp "
_NAME_SEPARATOR = " - "
_PEAKS_MARKER = " Peaks:"
_CUT_CHARS = ("-", "[", "(")
_CUT_TOKENS = ("feat", "ft")


def remove_diacritics(text: str) -> str:
    text = unicodedata.normalize("NFKD", text)
    # table runs last: ǽ and Ǿ only decompose to æ and Ø
    return "".join(c for c in text if not unicodedata.combining(c)).translate(
        _UNDECOMPOSABLE
    )


def trigrams(text: str) -> List[str]:
    return [text[i : i + 3] for i in range(len(text) - 2)]


def trigram_similarity(a: str, b: str) -> float:
    """Dice-style overlap of the 3-character substrings of two strings."""
    a_tri = trigrams(a)
    b_tri = trigrams(b)
    total = len(a_tri) + len(b_tri)
    if total == 0:
        return 0.0
    b_set = set(b_tri)
    common = sum(1 for t in a_tri if t in b_set)
    return (2 * common) / total


def are_similar(a: str, b: str, threshold: float = 0.7) -> bool:
    """Check similarity (threshold between 0 and 1)."""
    return trigram_similarity(a, b) >= threshold


def _name_part(text: str) -> str:
    part = text.replace(" ", "")
    for char in _CUT_CHARS:
        part = part.split(char, 1)[0]
    part = part.lower()
    for token in _CUT_TOKENS:
        part = part.split(token, 1)[0]
    return part


def split_report_name(line: str) -> tuple:
    """Return (artist, name) from a report line."""
    _, marker, rest = line.partition(_RATE_MARKER)
    if not marker:
        raise ValidationError(f"No rate marker in report line: {line!r}")
    if _PEAKS_MARKER in rest:
        rest = rest.rpartition(_PEAKS_MARKER)[0]
    artist, separator, name = rest.partition(_NAME_SEPARATOR)
    if not separator:
        raise ValidationError(f"No artist/name separator in report line: {line!r}")
    return artist, name


def normalize_name_key(line: str) -> str:
    """Letters-only key of a report line's title and artist.

    Drops spaces, bracketed and parenthetical suffixes, anything after a
    hyphen or a feat/ft credit, then folds diacritics.
    """
    artist, name = split_report_name(line)
    key = remove_diacritics(_name_part(name) + _name_part(artist))
    return _NON_LETTER_RE.sub("", key)
