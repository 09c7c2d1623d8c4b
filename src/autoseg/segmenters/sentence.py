"""Groups boundary-oracle sentence spans into logical sentences."""

import unicodedata
from typing import Iterable, Iterator, Optional, Tuple

from ..config.schema import SegmenterConfig
from ..core.abc import BoundaryOracle, CategoryOracle
from ..core.balance import BalanceTracker
from ..core.types import IdCounter, Sentence
from .tokenizer import tokenize_sentence

_DEFAULT_CONFIG = SegmenterConfig()

NUMERIC_CATEGORIES = frozenset({"Nd", "Nl", "No"})


def is_list_marker(text: str, config: Optional[SegmenterConfig] = None) -> bool:
    """
    Whether text looks like an enumerator such as "1.", "(1)" or "၁။".

    The trimmed text must be short, start with a numeric digit of any
    script (or a configured opener) and end with a configured terminator.
    """
    settings = (config or _DEFAULT_CONFIG).list_markers
    trimmed = text.strip()
    if not trimmed or len(trimmed) > settings.max_length:
        return False

    first = trimmed[0]
    if unicodedata.category(first) not in NUMERIC_CATEGORIES and first not in settings.openers:
        return False

    return trimmed[-1] in settings.terminators


def is_abbreviation(text: str, config: Optional[SegmenterConfig] = None) -> bool:
    """Short dotted text that is not a list marker. List markers take precedence."""
    settings = (config or _DEFAULT_CONFIG).abbreviations
    trimmed = text.strip()
    return (len(trimmed) <= settings.max_length
            and trimmed.endswith(settings.terminator)
            and not is_list_marker(text, config))


def group_sentences(document: str, spans: Iterable[Tuple[int, str]], *,
                    tracker: BalanceTracker,
                    config: Optional[SegmenterConfig] = None) -> Iterator[Tuple[int, int]]:
    """
    Merge adjacent sentence spans into logical sentences.

    A following span is absorbed while the tracker reports an open bracket,
    or while the text accumulated so far is a list marker or abbreviation.
    Leading blank spans are skipped.

    Args:
        document: Full source text the spans index into
        spans: Ordered (offset, substring) spans covering ``document``
        tracker: Document-scoped balance tracker, updated in place
        config: Heuristic settings

    Yields:
        (start, end) ranges of each logical sentence
    """
    it = iter(spans)
    pending = next(it, None)

    while pending is not None:
        start, part = pending
        pending = next(it, None)
        if not part.strip():
            continue

        end = start + len(part)
        tracker.update(part)

        while pending is not None:
            current = document[start:end]
            if not (tracker.is_merging()
                    or is_list_marker(current, config)
                    or is_abbreviation(current, config)):
                break
            peek_offset, peek_part = pending
            tracker.update(peek_part)
            end = peek_offset + len(peek_part)
            pending = next(it, None)

        yield start, end


class SentenceGrouper:
    """
    Iterates the logical sentences of one document, tokenized.

    Owns the document-wide state: one balance tracker for grouping and one
    id counter shared by every sentence's tokenizer. Build a new grouper per
    document.
    """

    def __init__(self, document: str, *, sentence_oracle: BoundaryOracle,
                 word_oracle: BoundaryOracle, config: Optional[SegmenterConfig] = None,
                 category: Optional[CategoryOracle] = None):
        self.document = document
        self.sentence_oracle = sentence_oracle
        self.word_oracle = word_oracle
        self.config = config or _DEFAULT_CONFIG
        self.category = category
        self.tracker = BalanceTracker(category)
        self.counter = IdCounter()

    def ranges(self) -> Iterator[Tuple[int, int]]:
        return group_sentences(self.document, self.sentence_oracle.spans(self.document),
                               tracker=self.tracker, config=self.config)

    def __iter__(self) -> Iterator[Sentence]:
        for start, end in self.ranges():
            text = self.document[start:end]
            tokens = tokenize_sentence(text, start, self.counter,
                                       word_oracle=self.word_oracle, category=self.category)
            yield Sentence(text=text, tokens=tuple(tokens), offset=start)
