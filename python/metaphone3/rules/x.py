"""Rules for 'X'."""

from typing import TYPE_CHECKING

from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def initial_x(scan: "Scan") -> bool:
    # current chinese pinyin spelling
    if scan.starts("XU", "XIA", "XIO", "XIE"):
        scan.add("X")
        return True

    if scan.idx == 0:
        scan.add("S")
        return True

    return False


def greek_x(scan: "Scan") -> bool:
    """'xylophone', 'xylem', 'xanthoma', 'xeno-'."""
    if scan.at(1, "YLO", "YLE", "ENO", "ANTH"):
        scan.add("S")
        return True
    return False


def x_special_cases(scan: "Scan") -> bool:
    """'luxury', 'texeira'."""
    if scan.at(-2, "LUXUR"):
        scan.add_exact_approx("GJ", "KJ")
        return True

    if scan.starts("TEXEIRA", "TEIXEIRA"):
        scan.add("X")
        return True

    return False


def x_to_h(scan: "Scan") -> bool:
    """'oaxaca', 'quixote'."""
    if scan.at(-2, "OAXACA") or scan.at(-3, "QUIXOTE"):
        scan.add("H")
        return True
    return False


def x_vowel(scan: "Scan") -> bool:
    """'sexual', 'connexion', 'noxious'."""
    if scan.at(1, "UAL", "ION", "IOU"):
        scan.add_alt("KX", "KS")
        scan.advance(2, 0)
        return True
    return False


def french_x_final(scan: "Scan") -> bool:
    """Add "KS" unless this is a silent french final 'X' as in 'beaux'.

    Never ends the cascade, so the redundant-letter step still runs.
    """
    if not (
        scan.idx == scan.last
        and (scan.at(-3, "IAU", "EAU", "IEU") or scan.at(-2, "AI", "AU", "OU", "OI", "EU"))
    ):
        scan.add("KS")
    return False


RULES = (
    initial_x,
    greek_x,
    x_special_cases,
    x_to_h,
    x_vowel,
    french_x_final,
)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    # e.g. 'excite', 'exceed'
    if scan.at(1, "X", "Z", "S", "CE"):
        scan.idx += 1
