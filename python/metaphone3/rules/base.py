"""Shared plumbing for the letter rule modules."""

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from ..encoder import Scan

# A rule tests its context and, when it applies, emits and/or moves the
# cursor and returns True. Returning False hands the letter to the next rule.
Rule = Callable[["Scan"], bool]


def run_cascade(scan: "Scan", rules: tuple[Rule, ...]) -> bool:
    """Apply the first rule that matches; True if one did."""
    for rule in rules:
        if rule(scan):
            return True
    return False


def emit(symbol: str) -> Callable[["Scan"], None]:
    """Letter handler that always appends ``symbol`` to both keys."""

    def _encode(scan: "Scan") -> None:
        scan.add(symbol)

    _encode.__name__ = f"emit_{symbol}"
    return _encode
