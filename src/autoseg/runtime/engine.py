"""Segmentation engine: oracles + grouping + tokenization behind one call."""

import threading
from pathlib import Path
from typing import Optional, Union

from ..config.loader import load_config
from ..config.schema import SegmenterConfig
from ..core.abc import BoundaryOracle, CategoryOracle, Logger, Meter
from ..core.types import DocumentResult, TokenKind
from ..core.util import hash_text
from ..providers import build_boundary_oracles
from ..providers.checked import BoundaryContractError, CheckedBoundaries
from ..segmenters.sentence import SentenceGrouper

class Segmenter:
    """
    Turns a raw multi-script text buffer into sentences and classified tokens.

    Holds only immutable collaborators; the balance tracker and token id
    counter are created per ``segment`` call, so one instance can serve
    independent documents from several threads.
    """
    
    def __init__(self, *, config: Optional[SegmenterConfig] = None,
                 sentence_oracle: Optional[BoundaryOracle] = None,
                 word_oracle: Optional[BoundaryOracle] = None,
                 category: Optional[CategoryOracle] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize the engine with configuration and collaborators.
        
        Args:
            config: Heuristic and backend settings (defaults if omitted)
            sentence_oracle: Sentence boundary oracle (backend default if omitted)
            word_oracle: Word boundary oracle (backend default if omitted)
            category: Unicode category oracle (``unicodedata`` if omitted)
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.config = config or SegmenterConfig()
        self.category = category
        self.log = logger
        self.meter = meter

        if sentence_oracle is None or word_oracle is None:
            default_sentence, default_word = build_boundary_oracles(self.config.backend)
            sentence_oracle = sentence_oracle or default_sentence
            word_oracle = word_oracle or default_word

        if self.config.validate_boundaries:
            sentence_oracle = CheckedBoundaries(sentence_oracle, name="sentence", logger=logger)
            word_oracle = CheckedBoundaries(word_oracle, name="word", logger=logger)

        self.sentence_oracle = sentence_oracle
        self.word_oracle = word_oracle

    @classmethod
    def from_config_file(cls, path: Union[str, Path], **kwargs) -> "Segmenter":
        """Build an engine from a YAML config file (raises ConfigLoadError)."""
        return cls(config=load_config(path), **kwargs)

    def segment(self, document: str) -> DocumentResult:
        """
        Segment a document into sentences and tokens.
        
        Args:
            document: Raw text buffer
            
        Returns:
            DocumentResult: Empty when the document is blank
            
        Raises:
            TypeError: If document is not a str
            BoundaryContractError: Only when boundary validation is enabled
                and an oracle misbehaves
        """
        if not isinstance(document, str):
            raise TypeError(f"document must be str, got {type(document).__name__}")

        if not document.strip():
            if self.meter:
                self.meter.inc("autoseg.documents", empty="true")
            return DocumentResult()

        grouper = SentenceGrouper(document,
                                  sentence_oracle=self.sentence_oracle,
                                  word_oracle=self.word_oracle,
                                  config=self.config,
                                  category=self.category)
        try:
            sentences = tuple(grouper)
        except BoundaryContractError as e:
            if self.log:
                self.log.error("segmentation_failed", error=str(e),
                               doc_hash=hash_text(document))
            raise

        result = DocumentResult(sentences=sentences)
        token_count = grouper.counter.issued

        if grouper.tracker.is_merging() and self.log:
            self.log.warn("unbalanced_brackets",
                          doc_hash=hash_text(document),
                          open_brackets=grouper.tracker.brackets)

        if self.meter:
            merged = sum(1 for t in result.tokens() if t.kind is TokenKind.MERGED)
            self.meter.inc("autoseg.documents", empty="false")
            self.meter.inc("autoseg.sentences", len(sentences))
            self.meter.inc("autoseg.tokens", token_count)
            self.meter.inc("autoseg.merged_tokens", merged)
            for sentence in sentences:
                self.meter.observe("autoseg.tokens_per_sentence", float(len(sentence.tokens)))

        if self.log:
            self.log.info("document_segmented",
                          doc_hash=hash_text(document),
                          length=len(document),
                          sentences=len(sentences),
                          tokens=token_count)

        return result


_default_segmenter: Optional[Segmenter] = None
_default_lock = threading.Lock()


def segment(document: str) -> DocumentResult:
    """Segment ``document`` with a shared default-configured engine."""
    global _default_segmenter
    if _default_segmenter is None:
        with _default_lock:
            if _default_segmenter is None:
                _default_segmenter = Segmenter()
    return _default_segmenter.segment(document)
