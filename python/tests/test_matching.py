"""Tests for the matching module."""

from metaphone3 import Encoder
from metaphone3.matching import (
    NONE,
    NORMAL,
    STRONG,
    WEAK,
    batch_encode,
    group_by_key,
    keys_match,
    match_strength,
    phonetic_key,
)
from metaphone3.schema import PhoneticKey


class TestPhoneticKey:
    """Tests for phonetic_key and batch_encode."""

    def test_phonetic_key(self):
        """Test encoding one word."""
        assert phonetic_key("Smith") == PhoneticKey("Smith", "SM0", "XMT")

    def test_custom_encoder(self):
        """Test a given encoder is used."""
        key = phonetic_key("tom", Encoder(encode_vowels=True))
        assert key.primary == "TAM"

    def test_batch_encode(self):
        """Test duplicates are encoded once."""
        results = batch_encode(["tom", "bob", "tom"])
        assert list(results) == ["tom", "bob"]
        assert results["bob"].primary == "PP"


class TestMatchStrength:
    """Tests for match_strength function."""

    def test_levels(self):
        """Test each strength level."""
        assert match_strength(PhoneticKey("a", "SM0", "XMT"), PhoneticKey("b", "SM0", "XMT")) == STRONG
        assert match_strength(PhoneticKey("a", "SM0", "XMT"), PhoneticKey("b", "XMT", "")) == NORMAL
        assert match_strength(PhoneticKey("a", "AK", "AX"), PhoneticKey("b", "AJ", "AX")) == WEAK
        assert match_strength(PhoneticKey("a", "TM", ""), PhoneticKey("b", "PP", "")) == NONE

    def test_empty_keys_never_match(self):
        """Test empty keys do not count as equal."""
        assert match_strength(PhoneticKey("", "", ""), PhoneticKey("", "", "")) == NONE


class TestKeysMatch:
    """Tests for keys_match function."""

    def test_spelling_variants(self):
        """Test spelling variants of a name match."""
        assert keys_match("Smith", "Smyth")
        assert keys_match("Smith", "Schmidt")

    def test_threshold(self):
        """Test a higher threshold rejects weaker matches."""
        assert not keys_match("Smith", "Schmidt", threshold=STRONG)
        assert keys_match("Smith", "Smyth", threshold=STRONG)

    def test_different_words(self):
        """Test different words do not match."""
        assert not keys_match("tom", "bob")
        assert not keys_match("", "", threshold=NONE)


class TestGroupByKey:
    """Tests for group_by_key function."""

    def test_groups(self):
        """Test words are grouped under each of their keys."""
        groups = group_by_key(["Smith", "Smyth", "Schmidt", "tom"])
        assert groups["SM0"] == ["Smith", "Smyth"]
        assert groups["XMT"] == ["Smith", "Smyth", "Schmidt"]
        assert groups["TM"] == ["tom"]

    def test_empty_word_not_grouped(self):
        """Test words without keys are left out."""
        assert group_by_key([""]) == {}
