"""Rules for 'W'.

'W' is mostly a vowel glide and only encoded where it starts a word, as
'V'/'F' in germanic and slavic names, or as part of "WH" and "WR".
"""

from typing import TYPE_CHECKING

from .. import lexicon
from ..vowels import skip_vowels
from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def silent_w_at_beginning(scan: "Scan") -> bool:
    """Initial "WR", e.g. 'write'."""
    return scan.at_start(0, "WR")


def witz_wicz(scan: "Scan") -> bool:
    """Polish endings, e.g. 'filipowicz'."""
    if not scan.at_end(0, "WICZ", "WITZ"):
        return False

    if scan.config.encode_vowels:
        if scan.buffer.last_primary() == "A":
            scan.add_alt("TS", "FAX")
        else:
            scan.add_alt("ATS", "FAX")
    else:
        scan.add_alt("TS", "FX")
    scan.idx += 3
    return True


def wr(scan: "Scan") -> bool:
    """"WR" inside a word."""
    if scan.at(0, "WR"):
        scan.add("R")
        scan.idx += 1
        return True
    return False


def initial_w_vowel(scan: "Scan") -> bool:
    """Initial 'W' before a vowel; 'witter' should also match 'vitter'."""
    if not (scan.idx == 0 and scan.vowel_at(1)):
        return False

    if scan.starts(*lexicon.W_NAMES_GERMANIC_OR_SLAVIC):
        if scan.config.encode_vowels:
            scan.add_exact_approx_alt("A", "VA", "A", "FA")
        else:
            scan.add_exact_approx_alt("A", "V", "A", "F")
    else:
        scan.add("A")

    scan.idx = skip_vowels(scan, scan.idx + 1)
    return True


def wh(scan: "Scan") -> bool:
    """"WH": 'H' in 'who', 'whole' and combining forms like 'rawhide'."""
    if not scan.at(0, "WH"):
        return False

    if scan.char_at(2, "O") and not scan.at(2, "OA", "OP", "OOP", "OMP", "ORL", "ORT", "OOSH"):
        scan.add("H")
        scan.advance(2, 1)
        return True

    # combining forms, e.g. 'hollowhearted', 'rawhide'
    if scan.at(
        2, "IDE", "ARD", "EAD", "AWK", "ERD", "OOK", "AND", "OLE", "OOD", "EART",
        "OUSE", "OUND", "AMMER",
    ):
        scan.add("H")
        scan.idx += 1
        return True

    if scan.idx == 0:
        scan.add("A")
        scan.idx = skip_vowels(scan, scan.idx + 2)
        return True

    scan.idx += 1
    return True


def eastern_european_w(scan: "Scan") -> bool:
    """'arnow' should match 'arnoff'; slavic '-OWSKI', '-WIAK'."""
    if (
        (scan.idx == scan.last and scan.vowel_at(-1))
        or scan.at(-1, "EWSKI", "EWSKY", "OWSKI", "OWSKY")
        or scan.at_end(0, "WIAK", "WICKI", "WACKI")
        or scan.starts("SCH")
    ):
        scan.add_exact_approx_alt("", "V", "", "F")
        return True
    return False


RULES = (
    silent_w_at_beginning,
    witz_wicz,
    wr,
    initial_w_vowel,
    wh,
    eastern_european_w,
)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    # e.g. 'zimbabwe'
    if scan.config.encode_vowels and scan.at_end(0, "WE"):
        scan.add("A")
