"""Exceptions raised by metaphone3."""


class EncoderInvariantError(AssertionError):
    """An internal encoder invariant was violated.

    Raised when the scan cursor fails to move forward, or when an encoder
    instance is re-entered while a call is still in flight. These indicate a
    bug or misuse, never bad input, so library code does not catch them.
    """
