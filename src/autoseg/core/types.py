"""Result model: document -> sentences -> tokens."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Tuple


class TokenKind(str, Enum):
    """Classification of an emitted token."""
    WORD = "Word"
    NUMBER = "Number"
    PUNCTUATION = "Punctuation"
    MERGED = "Merged"
    OTHER = "Other"

    @property
    def label(self) -> str:
        """Display label for presentation layers."""
        if self is TokenKind.MERGED:
            return "Merged Segment"
        return self.value


class IdCounter:
    """Document-scoped token id source. Ids start at 1 and never repeat."""

    def __init__(self, start: int = 1):
        self._next = start

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    @property
    def issued(self) -> int:
        """Number of ids handed out so far."""
        return self._next - 1


@dataclass(frozen=True)
class Token:
    """A classified token with its absolute offset into the document."""
    id: int
    offset: int                  # code point index into the source document
    text: str
    kind: TokenKind

    @property
    def end(self) -> int:
        return self.offset + len(self.text)

    def byte_offset(self, document: str) -> int:
        """UTF-8 byte offset of this token within ``document``."""
        return len(document[:self.offset].encode("utf-8"))

    def detach(self) -> "Token":
        return Token(id=self.id, offset=self.offset, text=self.text, kind=self.kind)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "offset": self.offset, "text": self.text, "kind": self.kind.value}


@dataclass(frozen=True)
class Sentence:
    """One logical sentence: the exact source substring and its tokens."""
    text: str
    tokens: Tuple[Token, ...] = ()
    offset: int = 0

    @property
    def end(self) -> int:
        return self.offset + len(self.text)

    def detach(self) -> "Sentence":
        return Sentence(text=self.text,
                        tokens=tuple(t.detach() for t in self.tokens),
                        offset=self.offset)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "offset": self.offset,
            "text": self.text,
            "tokens": [t.to_dict() for t in self.tokens],
        }


@dataclass(frozen=True)
class DocumentResult:
    """Ordered sentences of one segmented document. Empty for blank input."""
    sentences: Tuple[Sentence, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.sentences)

    def __iter__(self) -> Iterator[Sentence]:
        return iter(self.sentences)

    def tokens(self) -> Iterator[Token]:
        """All tokens of the document in emission (id) order."""
        for sentence in self.sentences:
            yield from sentence.tokens

    def detach(self) -> "DocumentResult":
        """
        Rebuild the tree so it can outlive the call that produced it.

        Sliced ``str`` values already own their storage, so only the node
        objects are copied. Content, ids and offsets are preserved exactly.
        """
        return DocumentResult(sentences=tuple(s.detach() for s in self.sentences))

    def to_dict(self) -> Dict[str, Any]:
        return {"sentences": [s.to_dict() for s in self.sentences]}
