"""Tests for the fixtures module."""

import pytest

from metaphone3.fixtures import (
    FixtureLoad,
    load_fixture,
    parse_fixture,
    parse_line,
    replay,
)


@pytest.fixture
def fixture_file(tmp_path, sample_fixture_content):
    path = tmp_path / "words.csv"
    path.write_text(sample_fixture_content, encoding="utf-8")
    return path


class TestParseLine:
    """Tests for parse_line function."""

    def test_fields(self):
        """Test fields are assigned to configurations in order."""
        record = parse_line("bob,PP,,BAB,,BB,,PAP,", line_number=7)
        assert record.word == "bob"
        assert record.line_number == 7
        assert record.expected == {
            "noVowel_noExact": ("PP", ""),
            "vowel_exact": ("BAB", ""),
            "noVowel_exact": ("BB", ""),
            "vowel_noExact": ("PAP", ""),
        }

    def test_quotes_and_whitespace(self):
        """Test quotes and surrounding whitespace are stripped."""
        record = parse_line(' "tom" , "TM","" ,TAM,,TM,,TAM,')
        assert record.word == "tom"
        assert record.expected["noVowel_noExact"] == ("TM", "")

    def test_delimiter(self):
        """Test a custom delimiter."""
        record = parse_line("tom|TM||TAM||TM||TAM|", delimiter="|")
        assert record.expected["vowel_noExact"] == ("TAM", "")

    def test_wrong_field_count(self):
        """Test malformed lines raise ValueError."""
        with pytest.raises(ValueError, match="expected 9 fields"):
            parse_line("tom,TM")

    def test_empty_word(self):
        """Test an empty word raises ValueError."""
        with pytest.raises(ValueError, match="empty word"):
            parse_line(",TM,,TAM,,TM,,TAM,")


class TestParseFixture:
    """Tests for fixture file parsing."""

    def test_skips_comments_and_blanks(self, fixture_file):
        """Test comments and blank lines are skipped."""
        records = list(parse_fixture(fixture_file, ","))
        assert [r.word for r in records] == ["tom", "bob", "smith"]
        assert records[0].line_number == 2
        assert records[2].line_number == 5

    def test_malformed_raises(self, tmp_path):
        """Test malformed lines raise without an error list."""
        path = tmp_path / "bad.csv"
        path.write_text("tom,TM\n", encoding="utf-8")
        with pytest.raises(ValueError, match="bad.csv:1"):
            list(parse_fixture(path, ","))

    def test_malformed_collected(self, tmp_path):
        """Test malformed lines are collected when an error list is given."""
        path = tmp_path / "bad.csv"
        path.write_text("tom,TM\ntom,TM,,TAM,,TM,,TAM,\n", encoding="utf-8")
        errors = []
        records = list(parse_fixture(path, ",", errors))
        assert len(records) == 1
        assert errors == ["line 1: expected 9 fields, got 2"]


class TestLoadFixture:
    """Tests for load_fixture function."""

    def test_load(self, fixture_file):
        """Test loading records and errors."""
        load = load_fixture(fixture_file)
        assert isinstance(load, FixtureLoad)
        assert len(load.records) == 3
        assert load.errors == []
        assert "3 records" in repr(load)


class TestReplay:
    """Tests for replay function."""

    def test_all_match(self, fixture_file):
        """Test a correct fixture has no mismatches."""
        result = replay(load_fixture(fixture_file).records)
        assert result.total == 3
        assert result.mismatches == []
        assert result.error_rate == 0.0
        assert result.checked_by_config["vowel_exact"] == 3

    def test_mismatch(self):
        """Test a wrong expectation is reported under its configuration."""
        records = [
            parse_line("tom,XX,,TAM,,TM,,TAM,", line_number=1),
            parse_line("bob,PP,,BAB,,BB,,PAP,", line_number=2),
            parse_line("tom,TM,,TAM,,TM,,TAM,", line_number=3),
        ]
        result = replay(records)
        assert len(result.mismatches) == 1
        mismatch = result.mismatches[0]
        assert mismatch.word == "tom"
        assert mismatch.config_name == "noVowel_noExact"
        assert mismatch.expected == ("XX", "")
        assert mismatch.actual == ("TM", "")
        assert "line 1" in str(mismatch)
        assert result.error_rate == pytest.approx(1 / 12)
        assert result.error_rate_for("noVowel_noExact") == pytest.approx(1 / 3)
        assert result.error_rate_for("vowel_exact") == 0.0

    def test_max_length(self):
        """Test replay honors max_length."""
        records = [parse_line("smith,SM,XM,SM,XM,SM,XM,SM,XM")]
        assert replay(records, max_length=2).mismatches == []

    def test_empty(self):
        """Test replaying nothing."""
        result = replay([])
        assert result.total == 0
        assert result.error_rate == 0.0
