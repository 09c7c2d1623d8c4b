"""Single-segment token classification."""

import unicodedata
from typing import Optional

import regex

from .abc import CategoryOracle
from .types import TokenKind

_ALPHABETIC = regex.compile(r"\p{Alphabetic}")

PUNCTUATION_CATEGORIES = frozenset({"Ps", "Pe", "Pi", "Pf", "Pd", "Pc", "Po"})


def is_ascii_number(segment: str) -> bool:
    return bool(segment) and all("0" <= c <= "9" for c in segment)


def is_alphabetic(char: str) -> bool:
    """Unicode Alphabetic property: letters of any script plus alphabetic marks."""
    return _ALPHABETIC.match(char) is not None


def classify_token(segment: str, category: Optional[CategoryOracle] = None) -> TokenKind:
    """
    Classify one word-boundary segment.

    Only the first character decides between Word, Punctuation and Other;
    the rest of the segment is not inspected.

    Args:
        segment: Segment text
        category: Optional category oracle (defaults to ``unicodedata``)

    Returns:
        TokenKind: NUMBER, WORD, PUNCTUATION or OTHER
    """
    if is_ascii_number(segment):
        return TokenKind.NUMBER
    if not segment:
        return TokenKind.OTHER

    first = segment[0]
    if is_alphabetic(first):
        return TokenKind.WORD

    lookup = category.category if category is not None else unicodedata.category
    if lookup(first) in PUNCTUATION_CATEGORIES:
        return TokenKind.PUNCTUATION
    return TokenKind.OTHER
