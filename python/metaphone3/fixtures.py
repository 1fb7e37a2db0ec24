"""Acceptance fixture loading and replay.

Fixture format: one word per line with nine delimited fields,

    word, p, s, p, s, p, s, p, s

giving the expected primary and secondary keys under each configuration in
CONFIG_COMBINATIONS order. Blank lines and lines starting with # are skipped.

Usage:
    load = load_fixture("tests/data/words.csv")
    result = replay(load.records)
    print(result.error_rate, result.error_rate_for("vowel_exact"))
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional

from . import config as cfg
from .encoder import Encoder
from .schema import CONFIG_COMBINATIONS, FixtureRecord

FIELD_COUNT = 1 + 2 * len(CONFIG_COMBINATIONS)


def _clean(value: str) -> str:
    return value.strip().strip("\"'").strip()


def parse_line(
    line: str, delimiter: str = ",", line_number: Optional[int] = None
) -> FixtureRecord:
    """Parse one fixture line.

    Args:
        line: Raw line, without comment handling.
        delimiter: Field separator.
        line_number: Line number to attach to the record.

    Returns:
        FixtureRecord with expected keys for every configuration.

    Raises:
        ValueError: If the line does not have exactly nine fields or the
            word is empty.
    """
    fields = [_clean(f) for f in line.split(delimiter)]
    if len(fields) != FIELD_COUNT:
        raise ValueError(f"expected {FIELD_COUNT} fields, got {len(fields)}")
    if not fields[0]:
        raise ValueError("empty word")

    expected = {}
    for i, name in enumerate(CONFIG_COMBINATIONS):
        expected[name] = (fields[1 + 2 * i], fields[2 + 2 * i])

    return FixtureRecord(word=fields[0], expected=expected, line_number=line_number)


def parse_fixture(
    filepath: Path | str,
    delimiter: Optional[str] = None,
    errors: Optional[list[str]] = None,
) -> Iterator[FixtureRecord]:
    """Parse a fixture file.

    Args:
        filepath: Path to fixture file.
        delimiter: Field separator, defaults to the configured one.
        errors: If given, malformed lines are reported here instead of
            raising.

    Yields:
        FixtureRecord per well-formed line.
    """
    delimiter = delimiter or cfg.default_delimiter()
    with open(filepath, "r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, start=1):
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue

            try:
                yield parse_line(line, delimiter, line_num)
            except ValueError as e:
                if errors is None:
                    raise ValueError(f"{filepath}:{line_num}: {e}") from e
                errors.append(f"line {line_num}: {e}")


@dataclass
class FixtureLoad:
    """Result of loading a fixture file."""

    records: list[FixtureRecord]
    source_path: str
    errors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"FixtureLoad({Path(self.source_path).name}: "
            f"{len(self.records)} records, {len(self.errors)} errors)"
        )


def load_fixture(filepath: Path | str, delimiter: Optional[str] = None) -> FixtureLoad:
    """Load every well-formed record of a fixture file.

    Args:
        filepath: Path to fixture file.
        delimiter: Field separator, defaults to the configured one.

    Returns:
        FixtureLoad with records and per-line errors.
    """
    filepath = Path(filepath)
    errors: list[str] = []
    records = list(parse_fixture(filepath, delimiter, errors))
    return FixtureLoad(records=records, source_path=str(filepath.resolve()), errors=errors)


@dataclass
class Mismatch:
    """A word whose keys differ from the fixture under one configuration."""

    word: str
    config_name: str
    expected: tuple[str, str]
    actual: tuple[str, str]
    line_number: Optional[int] = None

    def __str__(self) -> str:
        where = f"line {self.line_number}: " if self.line_number is not None else ""
        return (
            f"{where}{self.word} [{self.config_name}] "
            f"expected {self.expected[0]}/{self.expected[1]}, "
            f"got {self.actual[0]}/{self.actual[1]}"
        )


@dataclass
class ReplayResult:
    """Outcome of encoding every fixture word under every configuration."""

    total: int = 0
    mismatches: list[Mismatch] = field(default_factory=list)
    checked_by_config: dict[str, int] = field(default_factory=dict)
    failed_by_config: dict[str, int] = field(default_factory=dict)

    @property
    def error_rate(self) -> float:
        """Fraction of failed checks across all configurations."""
        checks = sum(self.checked_by_config.values())
        if checks == 0:
            return 0.0
        return len(self.mismatches) / checks

    def error_rate_for(self, config_name: str) -> float:
        """Fraction of failed checks under one configuration."""
        checks = self.checked_by_config.get(config_name, 0)
        if checks == 0:
            return 0.0
        return self.failed_by_config.get(config_name, 0) / checks

    def __repr__(self) -> str:
        return (
            f"ReplayResult({self.total} words, "
            f"{len(self.mismatches)} mismatches, {self.error_rate:.2%} error)"
        )


def replay(records: Iterable[FixtureRecord], max_length: int = 0) -> ReplayResult:
    """Encode fixture words and compare against the expected keys.

    Args:
        records: Fixture records.
        max_length: Key length limit, 0 for the configured default.

    Returns:
        ReplayResult with mismatches and per-configuration counts.
    """
    encoders = {
        name: Encoder(
            encode_vowels=config.encode_vowels,
            encode_exact=config.encode_exact,
            max_length=max_length,
        )
        for name, config in CONFIG_COMBINATIONS.items()
    }
    result = ReplayResult(
        checked_by_config={name: 0 for name in encoders},
        failed_by_config={name: 0 for name in encoders},
    )

    for record in records:
        result.total += 1
        for name, encoder in encoders.items():
            expected = record.expected.get(name)
            if expected is None:
                continue
            actual = encoder.encode(record.word)
            result.checked_by_config[name] += 1
            if actual != expected:
                result.failed_by_config[name] += 1
                result.mismatches.append(
                    Mismatch(
                        word=record.word,
                        config_name=name,
                        expected=expected,
                        actual=actual,
                        line_number=record.line_number,
                    )
                )

    return result
