"""Letter rules for the Metaphone 3 encoder.

One module per consonant. Each module exposes ``RULES``, the ordered cascade
of context rules for its letter, and ``encode(scan)``, which runs the cascade
and falls back to the letter's default action when no rule applies.

Usage:
    from metaphone3.rules import DISPATCH, rules_for

    DISPATCH["C"](scan)
    [rule.__name__ for rule in rules_for("W")]
"""

from typing import Callable, TYPE_CHECKING

from . import b, c, d, f, g, h, j, k, l, m, n, p, q, r, s, t, v, w, x, z
from .base import Rule, emit, run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan

_LETTER_MODULES = {
    "B": b, "C": c, "D": d, "F": f, "G": g, "H": h, "J": j, "K": k, "L": l,
    "M": m, "N": n, "P": p, "Q": q, "R": r, "S": s, "T": t, "V": v, "W": w,
    "X": x, "Z": z,
}

DISPATCH: dict[str, Callable[["Scan"], None]] = {
    letter: module.encode for letter, module in _LETTER_MODULES.items()
}

# Letters folded to a single symbol without context rules
DISPATCH.update({
    "ß": emit("S"),
    "Ç": emit("S"),
    "Ñ": emit("N"),
    "Ð": emit("0"),
    "Þ": emit("0"),
    "\uC28A": emit("X"),
    "\uC28E": emit("S"),
})


def rules_for(letter: str) -> tuple[Rule, ...]:
    """Get the rule cascade for a consonant.

    Args:
        letter: Upper-case consonant, e.g. "C".

    Returns:
        The ordered rules tried before the letter's default action.

    Raises:
        ValueError: If the letter has no rule module.
    """
    module = _LETTER_MODULES.get(letter)
    if module is None:
        raise ValueError(
            f"Unknown letter: {letter}. Available: {sorted(_LETTER_MODULES)}"
        )
    return module.RULES


__all__ = ["DISPATCH", "Rule", "emit", "rules_for", "run_cascade"]
