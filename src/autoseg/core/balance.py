"""Bracket/quote nesting state machine."""

import unicodedata
from typing import Optional

from .abc import CategoryOracle

STRAIGHT_QUOTES = frozenset({'"', "'"})


class BalanceTracker:
    """
    Running nesting depth of brackets and quotes over a stream of text.

    Only open brackets drive ``is_merging``. Curly quote depth and the
    straight-quote toggle are tracked but not consulted by any caller.
    """

    def __init__(self, category: Optional[CategoryOracle] = None):
        self.brackets = 0
        self.quotes = 0
        self.in_straight_quote = False
        self._category = category.category if category is not None else unicodedata.category

    def is_merging(self) -> bool:
        return self.brackets > 0

    def update(self, text: str) -> None:
        for c in text:
            cat = self._category(c)
            if cat == "Ps":
                self.brackets += 1
            elif cat == "Pe":
                if self.brackets > 0:
                    self.brackets -= 1
            elif cat == "Pi":
                self.quotes += 1
            elif cat == "Pf":
                if self.quotes > 0:
                    self.quotes -= 1
            elif c in STRAIGHT_QUOTES:
                self.in_straight_quote = not self.in_straight_quote

    def copy(self) -> "BalanceTracker":
        clone = BalanceTracker.__new__(BalanceTracker)
        clone.brackets = self.brackets
        clone.quotes = self.quotes
        clone.in_straight_quote = self.in_straight_quote
        clone._category = self._category
        return clone

    def __repr__(self) -> str:
        return (f"BalanceTracker(brackets={self.brackets}, quotes={self.quotes}, "
                f"in_straight_quote={self.in_straight_quote})")
