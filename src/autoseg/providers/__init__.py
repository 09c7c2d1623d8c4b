"""
autoseg Providers Package

Concrete oracles the engine consumes: Unicode category lookup and sentence /
word boundary segmenters. All providers follow the engine's dependency
injection pattern and can be swapped for host-supplied implementations.
"""

from typing import Tuple

from ..core.abc import BoundaryOracle
from .unicode_category import UnicodeCategory
from .uniseg_boundaries import UnisegSentenceBoundaries, UnisegWordBoundaries
from .rules import RuleSentenceBoundaries, RuleWordBoundaries
from .checked import CheckedBoundaries, BoundaryContractError


def build_boundary_oracles(backend: str = "uax29") -> Tuple[BoundaryOracle, BoundaryOracle]:
    """Create the (sentence, word) oracle pair for a configured backend name."""
    if backend == "uax29":
        return UnisegSentenceBoundaries(), UnisegWordBoundaries()
    if backend == "rules":
        return RuleSentenceBoundaries(), RuleWordBoundaries()
    raise ValueError(f"Unknown boundary backend: {backend}")


__all__ = [
    'UnicodeCategory',
    'UnisegSentenceBoundaries', 'UnisegWordBoundaries',
    'RuleSentenceBoundaries', 'RuleWordBoundaries',
    'CheckedBoundaries', 'BoundaryContractError',
    'build_boundary_oracles',
]
