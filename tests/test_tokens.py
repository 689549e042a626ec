"""
Tests for rpmver.versioning.tokens module.

Tests tokenization including:
- Letter, digit and tilde runs
- Separator skipping
- Leading zeros preserved
- Restartable iteration
"""

from __future__ import annotations

import pytest

from rpmver.versioning.tokens import Token, iter_tokens, normalized_tokens, tokenize

pytestmark = pytest.mark.unit


def _pairs(text: str) -> list[tuple[str, str]]:
    return [(t.kind, t.text) for t in tokenize(text)]


class TestTokenize:
    """Tests for tokenize and iter_tokens."""

    def test_dotted_numeric(self):
        """Test that dots split digit runs."""
        assert _pairs("1.2.3") == [("digits", "1"), ("digits", "2"), ("digits", "3")]

    def test_mixed_runs(self):
        """Test that letters and digits split without a separator."""
        assert _pairs("5.5p10") == [
            ("digits", "5"),
            ("digits", "5"),
            ("letters", "p"),
            ("digits", "10"),
        ]

    def test_tilde_is_its_own_token(self):
        """Test that each tilde is a separate token."""
        assert _pairs("1.0~~rc1") == [
            ("digits", "1"),
            ("digits", "0"),
            ("tilde", "~"),
            ("tilde", "~"),
            ("letters", "rc"),
            ("digits", "1"),
        ]

    def test_leading_zeros_kept(self):
        """Test that digit runs keep leading zeros."""
        assert _pairs("10.0001") == [("digits", "10"), ("digits", "0001")]

    def test_case_preserved(self):
        """Test that letter runs keep their case."""
        assert _pairs("el7_FC") == [
            ("letters", "el"),
            ("digits", "7"),
            ("letters", "FC"),
        ]

    @pytest.mark.parametrize("text", ["", "...", "+_-:", "  ", "^"])
    def test_separator_only_input(self, text):
        """Test that input without alphanumerics yields no tokens."""
        assert tokenize(text) == ()

    def test_non_ascii_is_separator(self):
        """Test that non-ASCII letters and digits are skipped."""
        assert _pairs("1é2") == [("digits", "1"), ("digits", "2")]
        assert _pairs("١٢") == []

    def test_iter_tokens_is_lazy(self):
        """Test that iter_tokens returns an iterator, not a list."""
        it = iter_tokens("1.2")
        assert next(it) == Token("digits", "1")
        assert next(it) == Token("digits", "2")
        assert next(it, None) is None

    def test_restartable(self):
        """Test that a second scan yields the same tokens."""
        assert list(iter_tokens("2:1.0-rc1")) == list(iter_tokens("2:1.0-rc1"))

    def test_is_tilde(self):
        """Test the is_tilde convenience property."""
        assert Token("tilde", "~").is_tilde
        assert not Token("letters", "rc").is_tilde


class TestNormalizedTokens:
    """Tests for normalized_tokens."""

    def test_strips_leading_zeros(self):
        """Test that equal numeric values normalize identically."""
        assert normalized_tokens("10.0001") == normalized_tokens("10.1")

    def test_separators_ignored(self):
        """Test that separator choice does not matter."""
        assert normalized_tokens("2.0") == normalized_tokens("2_0")

    def test_all_zero_run(self):
        """Test that a run of zeros normalizes to an empty digit run."""
        assert normalized_tokens("000") == (("digits", ""),)
