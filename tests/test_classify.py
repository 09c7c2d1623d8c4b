"""Test single-segment token classification."""

import pytest

from autoseg.core.classify import classify_token, is_alphabetic, is_ascii_number
from autoseg.core.types import TokenKind
from autoseg.providers.unicode_category import UnicodeCategory


class TestClassifyToken:
    """Test the first-character classification heuristic."""
    
    @pytest.mark.parametrize("segment", ["1157", "0", "2024"])
    def test_ascii_digits_are_numbers(self, segment):
        assert classify_token(segment) == TokenKind.NUMBER
    
    def test_digits_mixed_with_letters_are_not_numbers(self):
        assert classify_token("12abc") != TokenKind.NUMBER
        assert classify_token("abc12") == TokenKind.WORD
    
    def test_non_ascii_digits_are_not_numbers(self):
        """Myanmar and Thai digits are not ASCII, so they fall through to the category check."""
        assert classify_token("၁၂") == TokenKind.OTHER
        assert classify_token("๑") == TokenKind.OTHER
    
    @pytest.mark.parametrize("segment", ["bhagavā", "itipi", "อุ", "တေန", "धम्म", "Ωmega"])
    def test_alphabetic_first_character_is_word(self, segment):
        assert classify_token(segment) == TokenKind.WORD
    
    @pytest.mark.parametrize("segment", ["[", "]", "‘", "’", "–", "_", ".", ",", "။"])
    def test_punctuation_categories(self, segment):
        assert classify_token(segment) == TokenKind.PUNCTUATION
    
    @pytest.mark.parametrize("segment", ["$", "+", "©", "😀"])
    def test_symbols_are_other(self, segment):
        assert classify_token(segment) == TokenKind.OTHER
    
    def test_only_first_character_is_inspected(self):
        assert classify_token("a.!?") == TokenKind.WORD
        assert classify_token(".abc") == TokenKind.PUNCTUATION
        assert classify_token("$word") == TokenKind.OTHER
    
    def test_empty_segment(self):
        assert classify_token("") == TokenKind.OTHER
    
    def test_injected_category_oracle(self):
        """A custom oracle decides the punctuation branch."""
        class EverythingIsPunct:
            def category(self, char):
                return "Po"
        
        assert classify_token("$", EverythingIsPunct()) == TokenKind.PUNCTUATION
        assert classify_token("$", UnicodeCategory()) == TokenKind.OTHER


class TestHelpers:
    
    def test_is_ascii_number(self):
        assert is_ascii_number("123")
        assert not is_ascii_number("")
        assert not is_ascii_number("1.5")
        assert not is_ascii_number("١٢")
    
    def test_is_alphabetic_includes_marks(self):
        assert is_alphabetic("a")
        assert is_alphabetic("ุ")  # THAI CHARACTER SARA U, Other_Alphabetic
        assert not is_alphabetic("1")
        assert not is_alphabetic(" ")
