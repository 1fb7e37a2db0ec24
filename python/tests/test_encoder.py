"""Tests for the encoder module."""

import threading

import pytest

from metaphone3 import Encoder, EncoderInvariantError, encode, lexicon
from metaphone3.config import EncoderConfig
from metaphone3.rules import DISPATCH
from metaphone3.schema import CONFIG_COMBINATIONS
from metaphone3.encoder import normalize


class TestNormalize:
    """Tests for per-character upper-casing."""

    def test_ascii(self):
        """Test plain letters are upper-cased."""
        assert normalize("smith") == "SMITH"

    def test_accented(self):
        """Test accented letters keep their accent."""
        assert normalize("çare") == "ÇARE"
        assert normalize("ñ") == "Ñ"

    def test_length_preserved(self):
        """Test characters without a single-letter capital are kept."""
        assert normalize("straße") == "STRAßE"
        assert len(normalize("straße")) == len("straße")


class TestBasicWords:
    """Tests for reference words."""

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("A", ("A", "")),
            ("ack", ("AK", "")),
            ("eek", ("AK", "")),
            ("ache", ("AK", "AX")),
        ],
    )
    def test_basic_words(self, word, expected):
        """Test short words with initial vowels."""
        assert Encoder().encode(word) == expected

    def test_empty_word(self):
        """Test the empty word has empty keys."""
        assert Encoder().encode("") == ("", "")

    def test_smith_schmidt(self):
        """Test the anglicised and germanic spellings share a key."""
        encoder = Encoder()
        assert encoder.encode("Smith") == ("SM0", "XMT")
        assert encoder.encode("Smyth") == ("SM0", "XMT")
        assert encoder.encode("Schmidt") == ("XMT", "")

    def test_case_insensitive(self):
        """Test case does not change the keys."""
        encoder = Encoder()
        assert encoder.encode("SMITH") == encoder.encode("smith")

    def test_consonants(self):
        """Test simple consonant words."""
        encoder = Encoder()
        assert encoder.encode("tom") == ("TM", "")
        assert encoder.encode("bob") == ("PP", "")
        assert encoder.encode("box") == ("PKS", "")
        assert encoder.encode("fife") == ("FF", "")

    def test_silent_letters(self):
        """Test silent initial letters and GH."""
        encoder = Encoder()
        assert encoder.encode("gnome") == ("NM", "")
        assert encoder.encode("write") == ("RT", "")
        assert encoder.encode("laugh") == ("LF", "")

    def test_soft_and_hard_g(self):
        """Test initial G before a front vowel gets the other reading as alternate."""
        encoder = Encoder()
        assert encoder.encode("gem") == ("JM", "KM")
        assert encoder.encode("get") == ("KT", "JT")

    def test_folded_letters(self):
        """Test letters folded without context rules."""
        encoder = Encoder()
        assert encoder.encode("ñ") == ("N", "")
        assert encoder.encode("ß") == ("S", "")
        assert encoder.encode("þor") == ("0R", "")

    def test_pinyin_zh(self):
        """Test pinyin "ZH"."""
        assert Encoder().encode("zhao") == ("J", "")

    def test_abbreviations(self):
        """Test 'Mr' and 'Mrs'."""
        encoder = Encoder()
        assert encoder.encode("Mr") == ("MSTR", "")
        assert encoder.encode("Mrs") == ("MSS", "")

    def test_nce(self):
        """Test "-NCE" is encoded like "-NTS"."""
        assert Encoder().encode("nance") == ("NNTS", "")

    def test_listed_exceptions_after_longer_entries(self):
        """Test short exception words listed after longer ones still apply."""
        primary, secondary = Encoder().encode("Jakob")
        assert primary.startswith("J")
        assert secondary.startswith("A")
        # no germanic 'K' for the CH of 'lunchtime'
        primary, secondary = Encoder().encode("lunchtime")
        assert primary.startswith("LNX")
        assert secondary.startswith("LNK")


class TestEncoderOptions:
    """Tests for encode_vowels, encode_exact and max_length."""

    def test_encode_vowels(self):
        """Test non-initial vowels are encoded as 'A'."""
        encoder = Encoder(encode_vowels=True)
        assert encoder.encode("supernode") == ("SAPARNAT", "")
        assert encoder.encode("tom") == ("TAM", "")
        assert encoder.encode("smith") == ("SMA0", "XMAT")

    def test_silent_final_e_with_vowels(self):
        """Test a final silent E adds no vowel."""
        assert Encoder(encode_vowels=True).encode("fife") == ("FAF", "")

    def test_encode_exact(self):
        """Test voiced consonants are kept apart."""
        assert Encoder(encode_exact=True).encode("bob") == ("BB", "")
        assert Encoder(encode_exact=True, encode_vowels=True).encode("bob") == ("BAB", "")
        assert Encoder(encode_vowels=True).encode("bob") == ("PAP", "")

    def test_max_length_truncates(self):
        """Test both keys are cut to max_length."""
        assert Encoder(max_length=2).encode("Smith") == ("SM", "XM")
        assert Encoder(max_length=1).encode("Schmidt") == ("X", "")

    def test_default_max_length(self):
        """Test a non-positive max_length falls back to the configured default."""
        assert Encoder().max_length == 8
        assert Encoder(max_length=-1).max_length == 8

    def test_keys_never_exceed_max_length(self):
        """Test long words are truncated."""
        primary, secondary = Encoder(max_length=4).encode("supercalifragilistic")
        assert len(primary) <= 4
        assert len(secondary) <= 4

    def test_from_config(self):
        """Test building an encoder from an EncoderConfig."""
        config = EncoderConfig(encode_vowels=True, encode_exact=True, max_length=6)
        encoder = Encoder.from_config(config)
        assert encoder.config == config
        assert encoder.max_length == 6
        assert encoder.encode("bob") == ("BAB", "")

    def test_repr(self):
        """Test Encoder string representation."""
        assert "encode_vowels=True" in repr(Encoder(encode_vowels=True))


class TestEncoderReuse:
    """Tests for reusing one encoder across calls."""

    def test_deterministic(self):
        """Test the same word gives the same keys on every call."""
        encoder = Encoder()
        first = encoder.encode("Schmidt")
        encoder.encode("supernode")
        encoder.encode("")
        assert encoder.encode("Schmidt") == first

    def test_no_state_leaks(self):
        """Test a long word does not affect the next one."""
        encoder = Encoder()
        encoder.encode("supercalifragilistic")
        assert encoder.encode("A") == ("A", "")

    def test_reentry_raises(self):
        """Test re-entering encode from a tracer is rejected."""
        encoder = Encoder(trace=lambda event: encoder.encode("tom"))
        with pytest.raises(EncoderInvariantError):
            encoder.encode("bob")

    def test_usable_after_reentry_error(self):
        """Test the guard is released after a failed call."""
        calls = []

        def tracer(event):
            if not calls:
                calls.append(event)
                encoder.encode("tom")

        encoder = Encoder(trace=tracer)
        with pytest.raises(EncoderInvariantError):
            encoder.encode("bob")
        assert encoder.encode("bob") == ("PP", "")


class TestModuleEncode:
    """Tests for the module-level encode helper."""

    def test_defaults(self):
        """Test encode with default options."""
        assert encode("Smith") == ("SM0", "XMT")

    def test_options(self):
        """Test encode with options."""
        assert encode("tom", encode_vowels=True) == ("TAM", "")
        assert encode("Smith", max_length=2) == ("SM", "XM")

    def test_unknown_option(self):
        """Test unknown options raise ValueError."""
        with pytest.raises(ValueError, match="Unknown encoder option"):
            encode("tom", vowels=True)

    def test_threads(self):
        """Test encode can be called from several threads at once."""
        words = ["Smith", "Schmidt", "Filipowicz", "Gallegos", "Knight", "Xavier"]
        expected = {word: encode(word) for word in words}
        errors = []
        wrong = []

        def worker():
            try:
                for _ in range(200):
                    for word in words:
                        if encode(word) != expected[word]:
                            wrong.append(word)
            except EncoderInvariantError as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert wrong == []


class TestControlLoop:
    """Tests for the scan loop's guarantees."""

    def test_cursor_rewind_raises(self, monkeypatch):
        """Test a handler moving the cursor backwards is rejected."""

        def rewind(scan):
            scan.idx -= 1

        monkeypatch.setitem(DISPATCH, "B", rewind)
        with pytest.raises(EncoderInvariantError, match="cursor did not advance"):
            Encoder().encode("bob")

    def test_lexicon_words_bounded_and_stable(self):
        """Test every exception word encodes within max_length, the same way twice."""
        words = [
            word
            for name, table in vars(lexicon).items()
            if name.isupper() and isinstance(table, tuple)
            for word in table
            if isinstance(word, str)
        ]
        assert words

        for name, config in CONFIG_COMBINATIONS.items():
            encoder = Encoder.from_config(config)
            limit = encoder.max_length
            for word in words:
                first = encoder.encode(word)
                assert len(first[0]) <= limit, (name, word)
                assert len(first[1]) <= limit, (name, word)
                assert encoder.encode(word) == first, (name, word)
