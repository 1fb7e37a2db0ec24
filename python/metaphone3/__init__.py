"""metaphone3 - Metaphone 3 phonetic encoding.

Encodes a word into a primary and a secondary phonetic key so that words
which sound alike, in particular names, map to the same key regardless of
spelling.

Core concepts:
    - Consonants fold into a small alphabet; '0' stands for "TH", 'X' for
      "SH"/"CH", 'J' for the soft "G"/"J" sound
    - Vowels are either dropped or, optionally, all written as 'A'
    - The secondary key carries the most likely alternate pronunciation

Example:
    "Smith"   → ("SM0", "XMT")
    "Schmidt" → ("XMT", "")

Usage:
    from metaphone3 import Encoder, encode

    encode("Smith")
    Encoder(encode_vowels=True).encode("supernode")   # ("SAPARNAT", "")

    from metaphone3.matching import keys_match
    keys_match("Smith", "Schmidt")
"""

from .config import EncoderConfig
from .encoder import Encoder, encode
from .errors import EncoderInvariantError
from .schema import PhoneticKey
from .trace import CollectingTracer, TraceEvent, logging_tracer

__version__ = "0.1.0"

__all__ = [
    "CollectingTracer",
    "Encoder",
    "EncoderConfig",
    "EncoderInvariantError",
    "PhoneticKey",
    "TraceEvent",
    "encode",
    "logging_tracer",
]
