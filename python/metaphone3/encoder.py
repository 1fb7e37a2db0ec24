"""Metaphone 3 encoder.

Scans an upper-cased word left to right with a cursor. At each position the
character selects a letter rule cascade (see metaphone3.rules) or the vowel
path; rules look around the cursor with the context matcher, append to the
primary and secondary keys, and may move the cursor past letters they have
consumed. The loop then steps one position forward.

Usage:
    >>> from metaphone3 import Encoder
    >>> Encoder().encode("Smith")
    ('SM0', 'XMT')
"""

import threading
from typing import Any

from . import matcher
from .buffer import KeyBuffer
from .config import EncoderConfig
from .errors import EncoderInvariantError
from .rules import DISPATCH
from .trace import TraceEvent, Tracer
from .vowels import encode_vowel, is_vowel


def _upper(char: str) -> str:
    upper = char.upper()
    # 'ß'.upper() is "SS"; keep characters without a single-letter capital
    return upper if len(upper) == 1 else char


def normalize(word: str) -> str:
    """Upper-case a word one character at a time, keeping its length."""
    return "".join(_upper(c) for c in word)


class Scan:
    """Call-scoped state of one encoding: the word, the cursor and the keys.

    Rules receive the scan and use its helpers. Matcher helpers take offsets
    relative to the cursor; ``scan.at(-1, "ACH")`` tests whether "ACH" starts
    one letter before the current one.
    """

    def __init__(self, config: EncoderConfig, buffer: KeyBuffer):
        self.config = config
        self.buffer = buffer
        self.word = ""
        self.length = 0
        self.last = -1
        self.idx = 0
        # set by the -LE / -RE transposition rules, consumed by the next 'E'
        self.al_inversion = False

    def reset(self, word: str) -> None:
        self.word = word
        self.length = len(word)
        self.last = self.length - 1
        self.idx = 0
        self.al_inversion = False
        self.buffer.reset()

    @property
    def current(self) -> str:
        return self.word[self.idx]

    # Context matching, relative to the cursor

    def at(self, offset: int, *candidates: str) -> bool:
        return matcher.string_at(self.word, self.idx + offset, *candidates)

    def at_start(self, offset: int, *candidates: str) -> bool:
        return matcher.string_at_start(self.word, self.idx + offset, *candidates)

    def at_end(self, offset: int, *candidates: str) -> bool:
        return matcher.string_at_end(self.word, self.idx + offset, *candidates)

    def starts(self, *candidates: str) -> bool:
        return matcher.string_start(self.word, *candidates)

    def ends(self, *candidates: str) -> bool:
        return matcher.string_end(self.word, *candidates)

    def exact(self, *candidates: str) -> bool:
        return matcher.string_exact(self.word, *candidates)

    def contains(self, substring: str) -> bool:
        return matcher.string_contains(self.word, substring)

    def char_at(self, offset: int, char: str) -> bool:
        return matcher.char_at(self.word, self.idx + offset, char)

    def next_is(self, char: str) -> bool:
        return self.char_at(1, char)

    def vowel_at(self, offset: int) -> bool:
        pos = self.idx + offset
        return 0 <= pos < self.length and is_vowel(self.word[pos])

    def is_slavo_germanic(self) -> bool:
        return self.starts("SCH", "SW") or self.word[0] in ("J", "W")

    # Emitting

    def add(self, symbol: str) -> None:
        """Append the same symbol(s) to both keys."""
        self.buffer.add(symbol, symbol)

    def add_alt(self, primary: str | None, secondary: str | None) -> None:
        """Append different symbols to each key; None leaves a key alone."""
        self.buffer.add(primary, secondary)

    def add_exact_approx(self, exact: str, main: str) -> None:
        """Append ``exact`` when encoding exact consonants, else ``main``."""
        self.add(exact if self.config.encode_exact else main)

    def add_exact_approx_alt(
        self, exact: str, alt_exact: str, main: str, alt: str
    ) -> None:
        if self.config.encode_exact:
            self.add_alt(exact, alt_exact)
        else:
            self.add_alt(main, alt)

    # Cursor

    def advance(self, no_vowel_step: int, vowel_step: int) -> None:
        """Move the cursor by a step that depends on vowel encoding.

        With vowels off, rules can skip over a following vowel too; with
        vowels on it must stay so the vowel path sees it.
        """
        self.idx += vowel_step if self.config.encode_vowels else no_vowel_step


class Encoder:
    """Computes primary and secondary Metaphone 3 keys.

    An instance reuses its buffers between calls and is meant to be used by
    one caller at a time; create one encoder per thread.

    Args:
        encode_vowels: Encode non-initial vowels as 'A'.
        encode_exact: Keep voiced and unvoiced consonants apart.
        max_length: Maximum key length, 0 or less for the configured default.
        trace: Optional callable receiving a TraceEvent per appended symbol.
    """

    def __init__(
        self,
        encode_vowels: bool = False,
        encode_exact: bool = False,
        max_length: int = 0,
        trace: Tracer | None = None,
    ):
        self.config = EncoderConfig(
            encode_vowels=encode_vowels,
            encode_exact=encode_exact,
            max_length=max_length,
        )
        self.max_length = self.config.resolved_max_length()
        self.trace = trace
        self._buffer = KeyBuffer(self.max_length)
        self._scan = Scan(self.config, self._buffer)
        self._busy = False
        if trace is not None:
            self._buffer.on_append = self._emit_trace

    @classmethod
    def from_config(cls, config: EncoderConfig, trace: Tracer | None = None) -> "Encoder":
        return cls(
            encode_vowels=config.encode_vowels,
            encode_exact=config.encode_exact,
            max_length=config.max_length,
            trace=trace,
        )

    def _emit_trace(self, channel: str, symbol: str) -> None:
        scan = self._scan
        letter = scan.word[scan.idx] if 0 <= scan.idx < scan.length else ""
        self.trace(TraceEvent(channel, symbol, scan.idx, letter))

    def encode(self, word: str) -> tuple[str, str]:
        """Encode a word.

        Args:
            word: Any string; case does not matter.

        Returns:
            (primary, secondary). Both are empty for an empty word, and the
            secondary is empty when it would equal the primary.
        """
        if not word:
            return "", ""

        if self._busy:
            raise EncoderInvariantError("Encoder.encode re-entered while in use")
        self._busy = True
        try:
            return self._run(normalize(word))
        finally:
            self._busy = False

    def _run(self, word: str) -> tuple[str, str]:
        scan = self._scan
        buffer = self._buffer
        limit = self.max_length
        scan.reset(word)

        while scan.idx < scan.length:
            if buffer.both_full(limit):
                break

            start = scan.idx
            char = word[start]
            rule = DISPATCH.get(char)
            if rule is not None:
                rule(scan)
            elif is_vowel(char):
                encode_vowel(scan)

            scan.idx += 1
            if scan.idx <= start:
                raise EncoderInvariantError(
                    f"cursor did not advance in {word!r} at {start}"
                )

        return buffer.result(limit)

    def __repr__(self) -> str:
        return (
            f"Encoder(encode_vowels={self.config.encode_vowels}, "
            f"encode_exact={self.config.encode_exact}, max_length={self.max_length})"
        )


# One cache per thread; an Encoder instance is not shared between threads
_local = threading.local()


def encode(word: str, **options: Any) -> tuple[str, str]:
    """Encode one word with this thread's shared encoder for the given options.

    Safe to call from several threads at once.

    Args:
        word: Word to encode.
        **options: encode_vowels, encode_exact, max_length.

    Returns:
        (primary, secondary) keys.
    """
    key = (
        bool(options.get("encode_vowels", False)),
        bool(options.get("encode_exact", False)),
        int(options.get("max_length", 0)),
    )
    unknown = set(options) - {"encode_vowels", "encode_exact", "max_length"}
    if unknown:
        raise ValueError(
            f"Unknown encoder option: {sorted(unknown)[0]}. "
            f"Available: ['encode_vowels', 'encode_exact', 'max_length']"
        )
    encoders = getattr(_local, "encoders", None)
    if encoders is None:
        encoders = _local.encoders = {}
    encoder = encoders.get(key)
    if encoder is None:
        encoder = encoders[key] = Encoder(*key)
    return encoder.encode(word)
