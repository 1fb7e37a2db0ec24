"""Tests for the vowels module."""

import pytest

from metaphone3.errors import EncoderInvariantError
from metaphone3.vowels import (
    e_pronounced_at_end,
    e_silent,
    is_vowel,
    skip_vowels,
)


class TestIsVowel:
    """Tests for is_vowel function."""

    def test_ascii_vowels(self):
        """Test AEIOUY are vowels."""
        for char in "AEIOUY":
            assert is_vowel(char)

    def test_accented_vowels(self):
        """Test accented capitals are vowels."""
        for char in "ÀÉÎÕÜÝ":
            assert is_vowel(char)

    def test_consonants(self):
        """Test consonants and lower case are not vowels."""
        for char in "BCWHa":
            assert not is_vowel(char)


class TestSkipVowels:
    """Tests for skip_vowels function."""

    def test_single_vowel(self, make_scan):
        """Test returns the last vowel of the run."""
        scan = make_scan("TOM", idx=1)
        assert skip_vowels(scan, 2) == 1

    def test_run_of_vowels(self, make_scan):
        """Test a whole run is skipped."""
        scan = make_scan("AEIOUB")
        assert skip_vowels(scan, 1) == 4

    def test_run_to_end(self, make_scan):
        """Test a run reaching the end of the word."""
        scan = make_scan("ZHAO", idx=2)
        assert skip_vowels(scan, 3) == 3

    def test_w_in_run(self, make_scan):
        """Test W counts as part of a vowel run."""
        scan = make_scan("BOWL", idx=1)
        assert skip_vowels(scan, 2) == 2

    def test_bounds(self, make_scan):
        """Test out of range start positions."""
        scan = make_scan("TOM", idx=1)
        assert skip_vowels(scan, 3) == 3
        assert skip_vowels(scan, -1) == 0

    def test_no_advance_raises(self, make_scan):
        """Test a run that cannot move forward is an invariant error."""
        scan = make_scan("OWSKI", idx=1)
        with pytest.raises(EncoderInvariantError):
            skip_vowels(scan, 1)


class TestSilentE:
    """Tests for the silent E classifier."""

    def test_final_e_silent(self, make_scan):
        """Test a plain final E is silent."""
        scan = make_scan("FIFE", idx=3)
        assert not e_pronounced_at_end(scan)
        assert e_silent(scan)

    def test_plural_e_silent(self, make_scan):
        """Test E before a final S is silent."""
        assert e_silent(make_scan("GRAPES", idx=4))

    def test_ness_suffix(self, make_scan):
        """Test E before -NESS is silent."""
        assert e_silent(make_scan("LATENESS", idx=3))

    def test_two_letter_word(self, make_scan):
        """Test the E of a two letter word is pronounced."""
        scan = make_scan("BE", idx=1)
        assert e_pronounced_at_end(scan)
        assert not e_silent(scan)

    def test_internal_e_not_silent(self, make_scan):
        """Test an internal E is not silent by default."""
        assert not e_silent(make_scan("SUPERNODE", idx=3))
