"""Contract validation for boundary oracle output."""

from typing import Iterator, Optional, Tuple

from ..core.abc import BoundaryOracle, Logger


class BoundaryContractError(Exception):
    """Raised when an oracle's spans do not tile the input text exactly."""
    pass


class CheckedBoundaries:
    """
    Wraps a boundary oracle and verifies its output while streaming it.

    Spans must be non-empty, contiguous, match the text at their offsets and
    end exactly at the end of the input.
    """

    def __init__(self, oracle: BoundaryOracle, *, name: str = "boundary",
                 logger: Optional[Logger] = None):
        self.oracle = oracle
        self.name = name
        self.log = logger

    def spans(self, text: str) -> Iterator[Tuple[int, str]]:
        expected = 0
        for offset, part in self.oracle.spans(text):
            if offset != expected:
                kind = "overlap" if offset < expected else "gap"
                self._fail(f"{self.name} oracle produced a {kind} at offset {offset} "
                           f"(expected {expected})")
            if not part:
                self._fail(f"{self.name} oracle produced an empty span at offset {offset}")
            if text[offset:offset + len(part)] != part:
                self._fail(f"{self.name} oracle span at offset {offset} does not match input text")
            yield offset, part
            expected = offset + len(part)

        if expected != len(text):
            self._fail(f"{self.name} oracle covered {expected} of {len(text)} characters")

    def _fail(self, message: str) -> None:
        if self.log:
            self.log.error("boundary_contract_violation", oracle=self.name, detail=message)
        raise BoundaryContractError(message)
