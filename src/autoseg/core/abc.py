"""Protocol interfaces for the collaborators injected into the engine."""

from typing import Protocol, Iterable, Tuple, Any

Span = Tuple[int, str]


class CategoryOracle(Protocol):
    """Maps a single character to its Unicode general category (e.g. "Ps", "Lo")."""

    def category(self, char: str) -> str:
        ...


class BoundaryOracle(Protocol):
    """Script-aware boundary segmenter (sentence or word level)."""

    def spans(self, text: str) -> Iterable[Span]:
        """
        Split text into ordered, non-overlapping spans.

        Args:
            text: Text to split

        Returns:
            Iterable of (offset, substring) pairs covering the whole input,
            whitespace-only spans included.
        """
        ...


class Logger(Protocol):
    """Optional structured logging interface."""
    
    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...
        
    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...
        
    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...


class Meter(Protocol):
    """Optional metrics collection interface."""
    
    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...
        
    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
