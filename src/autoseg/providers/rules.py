"""Deterministic rule-based boundary oracles with no dictionary or UAX #29 tables."""

from typing import Iterator, Tuple

import regex

# Terminators: Latin . ? ! and Myanmar section/little-section signs
_SENTENCE_BREAK = regex.compile(r"(?<=[.?!၊။])\s+")
_WORD = regex.compile(r"\s+|[\p{L}\p{M}\p{N}]+|\X")


class RuleSentenceBoundaries:
    """
    Split after sentence-ending punctuation followed by whitespace.

    The whitespace stays attached to the preceding span, so spans cover the
    input with no gaps.
    """

    def spans(self, text: str) -> Iterator[Tuple[int, str]]:
        start = 0
        for m in _SENTENCE_BREAK.finditer(text):
            end = m.end()
            if end >= len(text):
                break
            yield start, text[start:end]
            start = end
        if start < len(text):
            yield start, text[start:]


class RuleWordBoundaries:
    """Runs of letters/marks/digits, runs of whitespace, or single grapheme clusters."""

    def spans(self, text: str) -> Iterator[Tuple[int, str]]:
        for m in _WORD.finditer(text):
            yield m.start(), m.group(0)
