"""Sentence grouping and per-sentence tokenization."""

from .sentence import SentenceGrouper, group_sentences, is_list_marker, is_abbreviation
from .tokenizer import tokenize_sentence

__all__ = ['SentenceGrouper', 'group_sentences', 'is_list_marker', 'is_abbreviation',
           'tokenize_sentence']
