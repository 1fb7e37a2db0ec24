"""Sound-alike comparison on top of Metaphone 3 keys.

Two words "sound alike" when one of their keys is shared. The strength of a
match depends on which keys agree: the primary keys of both words agreeing
is the strongest evidence.

Usage:
    from metaphone3.matching import keys_match, group_by_key

    keys_match("Smith", "Schmidt")          # True, via the secondary key
    group_by_key(["Smith", "Smyth", "Jones"])
"""

from typing import Iterable, Optional

from .encoder import Encoder, encode
from .schema import PhoneticKey

STRONG = 3      # primary == primary
NORMAL = 2      # a primary equals the other word's secondary
WEAK = 1        # secondary == secondary
NONE = 0


def phonetic_key(word: str, encoder: Optional[Encoder] = None) -> PhoneticKey:
    """Encode a word into a PhoneticKey.

    Args:
        word: Word to encode.
        encoder: Encoder to use, defaults to the shared default encoder.

    Returns:
        PhoneticKey for the word.
    """
    primary, secondary = encoder.encode(word) if encoder else encode(word)
    return PhoneticKey(word=word, primary=primary, secondary=secondary)


def batch_encode(
    words: Iterable[str], encoder: Optional[Encoder] = None
) -> dict[str, PhoneticKey]:
    """Encode multiple words.

    Args:
        words: Words to encode; duplicates are encoded once.
        encoder: Encoder to use.

    Returns:
        Dict mapping each word to its PhoneticKey.
    """
    results = {}
    for word in words:
        if word not in results:
            results[word] = phonetic_key(word, encoder)
    return results


def match_strength(a: PhoneticKey, b: PhoneticKey) -> int:
    """Rate how strongly two keys match, from NONE (0) to STRONG (3)."""
    if a.primary and a.primary == b.primary:
        return STRONG
    if (a.primary and a.primary == b.secondary) or (a.secondary and a.secondary == b.primary):
        return NORMAL
    if a.secondary and a.secondary == b.secondary:
        return WEAK
    return NONE


def keys_match(
    word_a: str,
    word_b: str,
    encoder: Optional[Encoder] = None,
    threshold: int = WEAK,
) -> bool:
    """Check whether two words sound alike.

    Args:
        word_a: First word.
        word_b: Second word.
        encoder: Encoder to use for both words.
        threshold: Minimum match strength to accept.

    Returns:
        True if the match strength reaches the threshold.
    """
    strength = match_strength(phonetic_key(word_a, encoder), phonetic_key(word_b, encoder))
    return strength >= threshold and strength > NONE


def group_by_key(
    words: Iterable[str], encoder: Optional[Encoder] = None
) -> dict[str, list[str]]:
    """Group words under each of their keys.

    A word with two keys appears in two groups. Words are listed in the order
    first seen, without duplicates.
    """
    groups: dict[str, list[str]] = {}
    for word, key in batch_encode(words, encoder).items():
        for k in key.keys():
            members = groups.setdefault(k, [])
            if word not in members:
                members.append(word)
    return groups
