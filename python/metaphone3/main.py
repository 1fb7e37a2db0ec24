"""metaphone3 CLI - Metaphone 3 phonetic keys.

Usage:
    python -m metaphone3.main Smith Schmidt --vowels
    python -m metaphone3.main --input names.txt --json
    python -m metaphone3.main --fixture tests/data/words.csv
"""

import argparse
import json
import sys
from pathlib import Path

from . import config as cfg
from .encoder import Encoder
from .fixtures import load_fixture, replay
from .matching import group_by_key, phonetic_key
from .trace import CollectingTracer


def read_words(filepath: Path) -> list[str]:
    """Read one word per line, skipping blank lines and # comments."""
    words = []
    with open(filepath, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            # Handle inline comments: "word # comment"
            if "#" in line:
                line = line.split("#")[0].strip()
            if line:
                words.append(line)
    return words


def run_fixture(path: Path, max_length: int) -> int:
    load = load_fixture(path)
    print("=" * 60)
    print("metaphone3 - Fixture replay")
    print("=" * 60)
    print(f"Fixture: {path}")
    print(f"Records: {len(load.records):,}")
    if load.errors:
        print(f"Malformed lines: {len(load.errors)}")
        for error in load.errors:
            print(f"  {error}")
    print()

    result = replay(load.records, max_length=max_length)
    for name in result.checked_by_config:
        failed = result.failed_by_config[name]
        print(f"  {name:<16} {failed:>6,} failed  {result.error_rate_for(name):7.2%}")
    print(f"\n  Overall error rate: {result.error_rate:.2%}")

    for mismatch in result.mismatches:
        print(f"    {mismatch}")

    return 1 if result.mismatches or load.errors else 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    # Load defaults from config.json
    defaults = cfg.load().get("defaults", cfg.FALLBACK_DEFAULTS)

    parser = argparse.ArgumentParser(
        description="metaphone3 - Metaphone 3 phonetic keys"
    )
    parser.add_argument("words", nargs="*", help="Words to encode")
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        help="File with one word per line (# starts a comment)",
    )
    parser.add_argument(
        "--vowels",
        action="store_true",
        default=defaults.get("encode_vowels", False),
        help="Encode non-initial vowels",
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        default=defaults.get("encode_exact", False),
        help="Keep voiced and unvoiced consonants apart",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=defaults.get("max_length", 8),
        help=f"Maximum key length (default: {defaults.get('max_length', 8)})",
    )
    # Output modes
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        action="store_true",
        help="Print keys as a JSON list",
    )
    output.add_argument(
        "--trace",
        action="store_true",
        help="Print every symbol appended while encoding",
    )
    output.add_argument(
        "--group",
        action="store_true",
        help="Print words grouped by shared key",
    )
    parser.add_argument(
        "--fixture",
        type=Path,
        help="Replay an acceptance fixture and report error rates",
    )

    args = parser.parse_args(argv)

    if args.fixture:
        try:
            return run_fixture(args.fixture, args.max_length)
        except OSError as e:
            print(f"ERROR - {e}", file=sys.stderr)
            return 1

    words = list(args.words)
    if args.input:
        try:
            words.extend(read_words(args.input))
        except OSError as e:
            print(f"ERROR - {e}", file=sys.stderr)
            return 1

    if not words:
        parser.print_usage(sys.stderr)
        print("ERROR - no words given", file=sys.stderr)
        return 2

    tracer = CollectingTracer() if args.trace else None
    encoder = Encoder(
        encode_vowels=args.vowels,
        encode_exact=args.exact,
        max_length=args.max_length,
        trace=tracer,
    )

    if args.group:
        for key, members in sorted(group_by_key(words, encoder).items()):
            print(f"{key:<10} {', '.join(members)}")
        return 0

    keys = []
    for word in words:
        if tracer is not None:
            tracer.clear()
        key = phonetic_key(word, encoder)
        keys.append(key)

        if args.json:
            continue
        print(f"{word:<20} {key.primary:<10} {key.secondary}")
        if tracer is not None:
            for line in tracer.format():
                print(f"    {line}")

    if args.json:
        print(json.dumps([k.to_dict() for k in keys], indent=2, ensure_ascii=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
