"""Per-sentence tokenizer with bracket-run merging and word coalescing."""

from typing import List, Optional

from ..core.abc import BoundaryOracle, CategoryOracle
from ..core.balance import BalanceTracker
from ..core.classify import classify_token
from ..core.types import IdCounter, Token, TokenKind


def tokenize_sentence(text: str, base_offset: int, counter: IdCounter, *,
                      word_oracle: BoundaryOracle,
                      category: Optional[CategoryOracle] = None) -> List[Token]:
    """
    Tokenize one sentence.

    Word-boundary spans are folded into tokens as follows:

    - A span entered or left with an open bracket belongs to a MERGED run;
      the run is emitted as one token as soon as the brackets close.
    - Whitespace ends the pending token and is never emitted.
    - Consecutive WORD spans extend one token, which rejoins scripts whose
      word-boundary oracle splits per cluster.
    - Any other span starts a new token with its own classification.

    Args:
        text: Exact sentence text
        base_offset: Offset of ``text`` within the document
        counter: Document-wide id counter, advanced once per emitted token
        word_oracle: Word boundary oracle (whitespace spans included)
        category: Optional category oracle

    Returns:
        List[Token]: Tokens in left-to-right order
    """
    tokens: List[Token] = []
    tracker = BalanceTracker(category)

    pending_start: Optional[int] = None
    pending_end = 0
    pending_kind: Optional[TokenKind] = None

    def flush() -> None:
        nonlocal pending_start, pending_kind
        if pending_start is None:
            return
        tokens.append(Token(
            id=counter.next(),
            offset=base_offset + pending_start,
            text=text[pending_start:pending_end],
            kind=pending_kind,
        ))
        pending_start = None
        pending_kind = None

    for local_offset, part in word_oracle.spans(text):
        is_whitespace = not part.strip()

        start_merging = tracker.is_merging()
        if not is_whitespace:
            tracker.update(part)
        end_merging = tracker.is_merging()

        if start_merging or end_merging:
            if pending_kind is not TokenKind.MERGED:
                flush()
                pending_start = local_offset
                pending_kind = TokenKind.MERGED
            pending_end = local_offset + len(part)
            if not end_merging:
                flush()
            continue

        if is_whitespace:
            flush()
            continue

        kind = classify_token(part, category)
        if pending_kind is TokenKind.WORD and kind is TokenKind.WORD:
            pending_end = local_offset + len(part)
            continue

        flush()
        pending_start = local_offset
        pending_end = local_offset + len(part)
        pending_kind = kind

    flush()
    return tokens
