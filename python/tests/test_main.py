"""Tests for the CLI."""

import json

import pytest

from metaphone3.main import main, read_words


class TestReadWords:
    """Tests for read_words function."""

    def test_comments(self, tmp_path, sample_wordlist_content):
        """Test comments and inline comments are skipped."""
        path = tmp_path / "words.txt"
        path.write_text(sample_wordlist_content, encoding="utf-8")
        assert read_words(path) == ["Smith", "Smyth", "Schmidt"]


class TestMain:
    """Tests for the main entry point."""

    def test_encode_words(self, capsys):
        """Test encoding positional words."""
        assert main(["tom", "Smith"]) == 0
        out = capsys.readouterr().out
        assert "TM" in out
        assert "SM0" in out
        assert "XMT" in out

    def test_vowels_flag(self, capsys):
        """Test --vowels."""
        assert main(["--vowels", "tom"]) == 0
        assert "TAM" in capsys.readouterr().out

    def test_json(self, capsys):
        """Test --json prints a list of keys."""
        assert main(["--json", "tom", "bob"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [
            {"word": "tom", "primary": "TM", "secondary": ""},
            {"word": "bob", "primary": "PP", "secondary": ""},
        ]

    def test_input_file(self, tmp_path, capsys, sample_wordlist_content):
        """Test --input reads a word list."""
        path = tmp_path / "words.txt"
        path.write_text(sample_wordlist_content, encoding="utf-8")
        assert main(["--input", str(path), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [d["word"] for d in data] == ["Smith", "Smyth", "Schmidt"]

    def test_missing_input(self, tmp_path, capsys):
        """Test a missing input file is an error."""
        assert main(["--input", str(tmp_path / "nope.txt")]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_no_words(self, capsys):
        """Test no words is a usage error."""
        assert main([]) == 2

    def test_trace(self, capsys):
        """Test --trace prints appended symbols."""
        assert main(["--trace", "tom"]) == 0
        out = capsys.readouterr().out
        assert "+T" in out
        assert "+M" in out

    def test_group(self, capsys):
        """Test --group prints words by shared key."""
        assert main(["--group", "Smith", "Schmidt"]) == 0
        out = capsys.readouterr().out
        assert "XMT" in out
        assert "Smith, Schmidt" in out

    def test_fixture_pass(self, tmp_path, capsys, sample_fixture_content):
        """Test --fixture with a matching fixture."""
        path = tmp_path / "words.csv"
        path.write_text(sample_fixture_content, encoding="utf-8")
        assert main(["--fixture", str(path)]) == 0
        assert "Overall error rate: 0.00%" in capsys.readouterr().out

    def test_fixture_fail(self, tmp_path, capsys):
        """Test --fixture reports mismatches."""
        path = tmp_path / "words.csv"
        path.write_text("tom,XX,,TAM,,TM,,TAM,\n", encoding="utf-8")
        assert main(["--fixture", str(path)]) == 1
        assert "expected XX/" in capsys.readouterr().out

    @pytest.mark.parametrize("other", ["--json", "--group"])
    def test_trace_needs_plain_output(self, other, capsys):
        """Test --trace cannot be combined with another output mode."""
        with pytest.raises(SystemExit) as exc:
            main(["--trace", other, "tom"])
        assert exc.value.code == 2
        assert "not allowed with" in capsys.readouterr().err
