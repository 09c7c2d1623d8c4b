"""UAX #29 sentence and word boundaries from the uniseg library."""

from typing import Iterator, Tuple

from uniseg.sentencebreak import sentences
from uniseg.wordbreak import words


def _with_offsets(parts) -> Iterator[Tuple[int, str]]:
    offset = 0
    for part in parts:
        yield offset, part
        offset += len(part)


class UnisegSentenceBoundaries:
    """Default Unicode sentence segmentation (no locale tailoring)."""

    def spans(self, text: str) -> Iterator[Tuple[int, str]]:
        return _with_offsets(sentences(text))


class UnisegWordBoundaries:
    """
    Default Unicode word segmentation.

    Whitespace runs come back as their own spans. Scripts without spaces
    (Thai, Myanmar) are split per cluster; the tokenizer coalesces those.
    """

    def spans(self, text: str) -> Iterator[Tuple[int, str]]:
        return _with_offsets(words(text))
