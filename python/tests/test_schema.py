"""Tests for the schema module."""

import json

import pytest

from metaphone3.config import EncoderConfig
from metaphone3.schema import CONFIG_COMBINATIONS, FixtureRecord, PhoneticKey


class TestPhoneticKey:
    """Tests for PhoneticKey dataclass."""

    def test_keys(self):
        """Test keys lists the non-empty keys, primary first."""
        assert PhoneticKey("Smith", "SM0", "XMT").keys() == ["SM0", "XMT"]
        assert PhoneticKey("Schmidt", "XMT").keys() == ["XMT"]
        assert PhoneticKey("", "", "").keys() == []

    def test_roundtrip(self):
        """Test to_dict/from_dict survive JSON serialization."""
        key = PhoneticKey("Smith", "SM0", "XMT")
        data = json.loads(json.dumps(key.to_dict()))
        assert PhoneticKey.from_dict(data) == key

    def test_from_dict_missing_secondary(self):
        """Test the secondary key defaults to empty."""
        key = PhoneticKey.from_dict({"word": "tom", "primary": "TM"})
        assert key.secondary == ""


class TestConfigCombinations:
    """Tests for the fixture configuration order."""

    def test_order(self):
        """Test configurations follow the fixture column order."""
        assert list(CONFIG_COMBINATIONS) == [
            "noVowel_noExact",
            "vowel_exact",
            "noVowel_exact",
            "vowel_noExact",
        ]

    def test_flags(self):
        """Test flags of each configuration."""
        assert CONFIG_COMBINATIONS["vowel_exact"] == EncoderConfig(True, True)
        assert CONFIG_COMBINATIONS["noVowel_exact"] == EncoderConfig(False, True)


class TestFixtureRecord:
    """Tests for FixtureRecord dataclass."""

    def test_expected_for(self):
        """Test expected keys per configuration."""
        record = FixtureRecord("tom", {"noVowel_noExact": ("TM", "")}, line_number=3)
        assert record.expected_for("noVowel_noExact") == ("TM", "")

    def test_expected_for_unknown(self):
        """Test unknown configuration names raise ValueError."""
        record = FixtureRecord("tom")
        with pytest.raises(ValueError, match="Unknown configuration"):
            record.expected_for("loud")
