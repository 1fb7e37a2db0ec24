"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from metaphone3.buffer import KeyBuffer
from metaphone3.config import EncoderConfig
from metaphone3.encoder import Scan


@pytest.fixture
def make_scan():
    """Build a scan over a word, positioned at a given index."""

    def _make(word, idx=0, **options):
        scan = Scan(EncoderConfig(**options), KeyBuffer(8))
        scan.reset(word)
        scan.idx = idx
        return scan

    return _make


@pytest.fixture
def sample_fixture_content():
    """Sample acceptance fixture, all four configurations per line."""
    return """# word, noVowel/noExact, vowel/exact, noVowel/exact, vowel/noExact
tom,TM,,TAM,,TM,,TAM,
bob,PP,,BAB,,BB,,PAP,

"smith","SM0","XMT","SMA0","XMAT","SM0","XMT","SMA0","XMAT"
"""


@pytest.fixture
def sample_wordlist_content():
    """Sample plain text word list."""
    return """# Word list
Smith
Smyth  # spelling variant
Schmidt
"""
