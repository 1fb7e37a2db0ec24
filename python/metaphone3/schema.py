"""Records passed between the encoder, fixtures and the CLI.

Core concept:
    - Every word encodes to a primary key and an optional secondary key
    - Acceptance fixtures list the expected keys of a word under each of the
      four encoder configurations

Example:
    "Smith" → PhoneticKey(word="Smith", primary="SM0", secondary="XMT")
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .config import EncoderConfig

# Fixture column order: (vowels, exact) flags per configuration
CONFIG_COMBINATIONS: dict[str, EncoderConfig] = {
    "noVowel_noExact": EncoderConfig(encode_vowels=False, encode_exact=False),
    "vowel_exact": EncoderConfig(encode_vowels=True, encode_exact=True),
    "noVowel_exact": EncoderConfig(encode_vowels=False, encode_exact=True),
    "vowel_noExact": EncoderConfig(encode_vowels=True, encode_exact=False),
}


@dataclass
class PhoneticKey:
    """A word with its Metaphone 3 keys."""

    word: str               # Word as given, before upper-casing
    primary: str            # Primary key
    secondary: str = ""     # Alternate key, empty when same as primary

    def keys(self) -> list[str]:
        """Get the non-empty keys, primary first."""
        return [k for k in (self.primary, self.secondary) if k]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "primary": self.primary,
            "secondary": self.secondary,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PhoneticKey":
        """Create from dictionary."""
        return cls(
            word=data["word"],
            primary=data["primary"],
            secondary=data.get("secondary", ""),
        )


@dataclass
class FixtureRecord:
    """Expected keys for one word of an acceptance fixture."""

    word: str
    expected: dict[str, tuple[str, str]] = field(default_factory=dict)
    line_number: Optional[int] = None

    def expected_for(self, config_name: str) -> tuple[str, str]:
        """Get (primary, secondary) expected under a configuration."""
        if config_name not in CONFIG_COMBINATIONS:
            raise ValueError(
                f"Unknown configuration: {config_name}. "
                f"Available: {list(CONFIG_COMBINATIONS)}"
            )
        return self.expected[config_name]
