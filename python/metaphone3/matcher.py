"""Context matching primitives.

Position-relative substring tests against a normalized (upper-cased) word.
All functions are pure and bounds-safe: a position before the start or past
the end of the word simply fails to match instead of raising or wrapping
around.

The encoder binds these to its cursor (``scan.at(offset, ...)`` tests
``string_at(word, cursor + offset, ...)``).
"""


def _in_range(word: str, pos: int) -> bool:
    return 0 <= pos < len(word)


def char_at(word: str, pos: int, char: str) -> bool:
    """Check whether ``word[pos]`` is ``char``."""
    return _in_range(word, pos) and word[pos] == char


def string_at(word: str, pos: int, *candidates: str) -> bool:
    """Check whether any candidate occurs in ``word`` starting at ``pos``.

    Args:
        word: Normalized word.
        pos: Absolute start position.
        candidates: Upper-case strings to test.

    Returns:
        True if one of the candidates matches at ``pos``.
    """
    if not _in_range(word, pos):
        return False
    return any(word.startswith(candidate, pos) for candidate in candidates)


def string_at_start(word: str, pos: int, *candidates: str) -> bool:
    """Like string_at, but only matches when ``pos`` is the start of the word."""
    if pos != 0:
        return False
    return string_at(word, pos, *candidates)


def string_at_end(word: str, pos: int, *candidates: str) -> bool:
    """Check whether a candidate starts at ``pos`` and runs to the word's end.

    Args:
        word: Normalized word.
        pos: Absolute start position.
        candidates: Upper-case strings to test.

    Returns:
        True if a candidate matches at ``pos`` and consumes every remaining
        character of the word.
    """
    if not _in_range(word, pos):
        return False
    remaining = len(word) - pos
    return any(
        len(candidate) == remaining and word.startswith(candidate, pos)
        for candidate in candidates
    )


def string_start(word: str, *candidates: str) -> bool:
    """Check whether the word begins with any candidate."""
    return string_at(word, 0, *candidates)


def string_end(word: str, *candidates: str) -> bool:
    """Check whether the word ends with any candidate, wherever the cursor is."""
    return any(word.endswith(candidate) for candidate in candidates)


def string_exact(word: str, *candidates: str) -> bool:
    """Check whether the whole word equals one of the candidates."""
    return word in candidates


def string_contains(word: str, substring: str) -> bool:
    """Check whether ``substring`` occurs anywhere in the word."""
    return substring in word


def root_or_inflections(word: str, root: str) -> bool:
    """Check whether ``word`` is ``root`` or a regular English inflection of it.

    Matches the root itself plus "-S", "-ES" (roots not ending in 'E'),
    "-ED" / "-D", and with a trailing 'E' dropped "-ING", "-INGLY" and "-Y".
    For "ACHE" that is ACHE, ACHES, ACHED, ACHING, ACHINGLY and ACHY.

    Used where only the root and its inflections should match, and not
    unrelated words that happen to contain the same letters.
    """
    if word in (root, root + "S"):
        return True

    ends_in_e = root.endswith("E")
    if not ends_in_e and word == root + "ES":
        return True
    if word == (root + "D" if ends_in_e else root + "ED"):
        return True

    stem = root[:-1] if ends_in_e else root
    return word in (stem + "ING", stem + "INGLY", stem + "Y")
