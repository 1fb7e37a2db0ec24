"""Tests for the matcher module."""

from metaphone3.matcher import (
    char_at,
    root_or_inflections,
    string_at,
    string_at_end,
    string_at_start,
    string_contains,
    string_end,
    string_exact,
    string_start,
)


class TestCharAt:
    """Tests for char_at function."""

    def test_match(self):
        """Test matching a character."""
        assert char_at("ACHE", 1, "C")
        assert not char_at("ACHE", 1, "H")

    def test_out_of_range(self):
        """Test positions outside the word never match."""
        assert not char_at("ACHE", -1, "E")
        assert not char_at("ACHE", 4, "E")


class TestStringAt:
    """Tests for string_at and its anchored variants."""

    def test_any_candidate(self):
        """Test any candidate may match."""
        assert string_at("ACHE", 1, "CK", "CH")
        assert not string_at("ACHE", 1, "CK", "CG")

    def test_candidate_past_end(self):
        """Test a candidate running past the end does not match."""
        assert not string_at("ACHE", 2, "HEL")

    def test_later_candidate_after_long_one(self):
        """Test a candidate past the end does not hide later, shorter ones."""
        assert string_at("ACHE", 2, "HEL", "HE")
        assert string_start("JAKOB", "JAKOBSEN", "JAKOB")
        assert string_exact("JAKOB", "JAKOBSEN", "JAKOB")

    def test_negative_position(self):
        """Test a position before the word does not wrap around."""
        assert not string_at("ACHE", -1, "E")
        assert not string_at("ACHE", -2, "ACHE")

    def test_at_start(self):
        """Test string_at_start only matches at position 0."""
        assert string_at_start("WRITE", 0, "WR")
        assert not string_at_start("AWRY", 1, "WR")

    def test_at_end(self):
        """Test string_at_end requires the candidate to reach the end."""
        assert string_at_end("ACHE", 2, "HE")
        assert not string_at_end("ACHE", 1, "CH")
        assert not string_at_end("ACHE", 1, "CHES")


class TestWholeWord:
    """Tests for whole-word predicates."""

    def test_start_end(self):
        """Test prefix and suffix checks."""
        assert string_start("SCHMIDT", "SCH", "SW")
        assert string_end("SCHMIDT", "DT")
        assert not string_end("SCHMIDT", "TD")

    def test_exact(self):
        """Test exact match."""
        assert string_exact("MR", "MR", "MRS")
        assert not string_exact("MRS", "MR")

    def test_contains(self):
        """Test substring check."""
        assert string_contains("KIRSCHNER", "SCH")
        assert not string_contains("SMITH", "SCH")


class TestRootOrInflections:
    """Tests for root_or_inflections function."""

    def test_root_ending_in_e(self):
        """Test inflections of a root with a final E."""
        for word in ("ACHE", "ACHES", "ACHED", "ACHING", "ACHINGLY", "ACHY"):
            assert root_or_inflections(word, "ACHE"), word

    def test_root_without_e(self):
        """Test inflections of a root without a final E."""
        for word in ("ARCH", "ARCHS", "ARCHES", "ARCHED", "ARCHING", "ARCHY"):
            assert root_or_inflections(word, "ARCH"), word

    def test_non_inflections(self):
        """Test unrelated words do not match."""
        assert not root_or_inflections("ACHEING", "ACHE")
        assert not root_or_inflections("ARCHER", "ARCH")
        assert not root_or_inflections("MARCH", "ARCH")
