"""Encoder options and the defaults behind them.

Defaults come from a config.json file:

    {"defaults": {"encode_vowels": false, "encode_exact": false,
                  "max_length": 8, "delimiter": ","}}

The file named by $METAPHONE3_CONFIG wins; otherwise the first config.json
found next to the project root or in the working directory is used. Keys the
file leaves out keep their FALLBACK_DEFAULTS value.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

CONFIG_ENV = "METAPHONE3_CONFIG"

FALLBACK_DEFAULTS = {
    "encode_vowels": False,
    "encode_exact": False,
    "max_length": 8,
    "delimiter": ",",
}

_config: dict[str, Any] | None = None


@dataclass(frozen=True)
class EncoderConfig:
    """Options that change how words are encoded.

    encode_vowels: encode non-initial vowels (one 'A' per vowel run).
    encode_exact: keep voiced/unvoiced consonant pairs apart (B/P, D/T, G/K, V/F).
    max_length: maximum key length; 0 or less means the configured default.
    """

    encode_vowels: bool = False
    encode_exact: bool = False
    max_length: int = 0

    def resolved_max_length(self) -> int:
        """Effective key length limit."""
        if self.max_length > 0:
            return self.max_length
        return default_max_length()


def candidate_paths() -> list[Path]:
    """Places searched for config.json, in priority order."""
    paths = []
    override = os.environ.get(CONFIG_ENV)
    if override:
        paths.append(Path(override))
    root = Path(__file__).resolve().parent.parent.parent  # python/metaphone3 -> root
    paths.append(root / "config.json")
    paths.append(Path.cwd() / "config.json")
    return paths


def _read(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict) or not isinstance(data.get("defaults", {}), dict):
        raise ValueError(f"{path}: expected an object with a 'defaults' object")
    merged = dict(data)
    merged["defaults"] = {**FALLBACK_DEFAULTS, **data.get("defaults", {})}
    return merged


def load(path: Path | str | None = None) -> dict[str, Any]:
    """Load and cache the configuration.

    Args:
        path: Read this file instead of searching. Errors reading it are
            raised rather than falling back.

    Returns:
        Config dict whose "defaults" holds every FALLBACK_DEFAULTS key.
    """
    global _config
    if path is not None:
        _config = _read(Path(path))
        return _config
    if _config is not None:
        return _config

    for candidate in candidate_paths():
        if not candidate.is_file():
            continue
        try:
            _config = _read(candidate)
            return _config
        except (json.JSONDecodeError, OSError, ValueError):
            # unreadable file, try the next location
            continue

    _config = {"defaults": dict(FALLBACK_DEFAULTS)}
    return _config


def reset() -> None:
    """Forget the cached configuration so the next load() re-reads it."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    return load().get("defaults", {}).get(key, fallback)


def default_encode_vowels() -> bool:
    return bool(get_default("encode_vowels", FALLBACK_DEFAULTS["encode_vowels"]))


def default_encode_exact() -> bool:
    return bool(get_default("encode_exact", FALLBACK_DEFAULTS["encode_exact"]))


def default_max_length() -> int:
    value = get_default("max_length", FALLBACK_DEFAULTS["max_length"])
    # bool is an int subclass; "max_length": true is not a length
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return FALLBACK_DEFAULTS["max_length"]
    return value


def default_delimiter() -> str:
    return get_default("delimiter", FALLBACK_DEFAULTS["delimiter"]) or ","


def default_encoder_config() -> EncoderConfig:
    """EncoderConfig built from the configured defaults."""
    return EncoderConfig(
        encode_vowels=default_encode_vowels(),
        encode_exact=default_encode_exact(),
        max_length=default_max_length(),
    )
