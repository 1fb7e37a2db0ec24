"""Tests for the lexicon tables."""

import pytest

from metaphone3 import lexicon

TABLES = [
    name for name in dir(lexicon)
    if name.isupper() and isinstance(getattr(lexicon, name), tuple)
]


class TestLexicon:
    """Tests for the exception tables."""

    def test_tables_found(self):
        """Test the module exposes its tables."""
        assert "W_NAMES_GERMANIC_OR_SLAVIC" in TABLES
        assert "SILENT_T_FRENCH_8" in TABLES

    @pytest.mark.parametrize("name", TABLES)
    def test_non_empty(self, name):
        """Test every table has entries."""
        assert len(getattr(lexicon, name)) > 0

    @pytest.mark.parametrize("name", TABLES)
    def test_upper_case(self, name):
        """Test every entry is a non-empty upper-case string."""
        for entry in getattr(lexicon, name):
            assert isinstance(entry, str)
            assert entry
            assert entry == entry.upper(), entry

    def test_silent_r_lengths(self):
        """Test the -IER stems are grouped by length."""
        assert all(len(s) == 3 for s in lexicon.SILENT_R_IER_3)
        assert all(len(s) == 6 for s in lexicon.SILENT_R_IER_6)

    def test_compound_root_lengths(self):
        """Test the compound roots are grouped by length."""
        assert all(len(s) == 4 for s in lexicon.SILENT_E_ROOTS_4)
        assert all(len(s) == 5 for s in lexicon.SILENT_E_ROOTS_5)
        assert all(len(s) == 6 for s in lexicon.SILENT_E_ROOTS_6)
