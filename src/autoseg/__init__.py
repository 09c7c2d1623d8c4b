"""
autoseg - Multi-script sentence and token segmentation engine.

Groups boundary-oracle sentence spans into logical sentences (bracket
balance, list markers, abbreviations) and tokenizes each sentence into
classified tokens with document-wide ids and absolute offsets.
"""

__version__ = "0.1.0"

from .core.types import DocumentResult, Sentence, Token, TokenKind
from .runtime.engine import Segmenter, segment

__all__ = ["DocumentResult", "Sentence", "Token", "TokenKind", "Segmenter", "segment"]
