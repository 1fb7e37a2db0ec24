"""Rules for 'H'.

'H' is kept only at the start of a word before a vowel, or between vowels;
everywhere else it is silent.
"""

from typing import TYPE_CHECKING

from ..vowels import skip_vowels
from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def initial_silent_h(scan: "Scan") -> bool:
    """'hour', 'herb', 'heir', 'honor'."""
    if not scan.at(1, "OUR", "ERB", "EIR", "ONOR", "ONOUR", "ONEST"):
        return False

    # americans pronounce the H in the name Herb, not in the plant
    if scan.at_start(0, "HERB"):
        if scan.config.encode_vowels:
            scan.add_alt("HA", "A")
        else:
            scan.add_alt("H", "A")
    elif scan.idx == 0 or scan.config.encode_vowels:
        scan.add("A")

    scan.idx = skip_vowels(scan, scan.idx + 1)
    return True


def initial_hs(scan: "Scan") -> bool:
    """Old pinyin transliteration, e.g. 'hsiao'."""
    if scan.at_start(0, "HS"):
        scan.add("X")
        scan.idx += 1
        return True
    return False


def initial_hu_hw(scan: "Scan") -> bool:
    """Spanish spellings and pinyin, e.g. 'huerta', 'hwang'."""
    if not (scan.starts("HUA", "HUE", "HWA") and not scan.at(0, "HUEY")):
        return False

    scan.add("A")
    if not scan.config.encode_vowels:
        scan.idx += 2
    else:
        scan.idx += 1
        while scan.vowel_at(0) or scan.char_at(0, "W"):
            scan.idx += 1
        # the control loop steps onto the next letter
        scan.idx -= 1
    return True


def non_initial_silent_h(scan: "Scan") -> bool:
    """'nihilism', 'vehement', 'graham', 'cohen'."""
    if (
        scan.at(-2, "NIHIL", "VEHEM", "LOHEN", "NEHEM", "MAHON", "MAHAN", "COHEN", "GAHAN")
        or scan.at(-3, "TOUHY", "GRAHAM", "PROHIB", "FRAHER", "TOOHEY", "TOUHEY")
        or scan.starts("CHIHUAHUA")
    ):
        if scan.config.encode_vowels:
            scan.idx += 1
        else:
            scan.idx = skip_vowels(scan, scan.idx + 1)
        return True
    return False


def h_pronounced(scan: "Scan") -> bool:
    """Initial or intervocalic 'H', and 'HH' before a vowel as in 'alwahhab'."""
    if (
        (scan.idx == 0 or scan.vowel_at(-1) or (scan.idx > 0 and scan.char_at(-1, "W")))
        and scan.vowel_at(1)
    ) or (scan.next_is("H") and scan.vowel_at(2)):
        scan.add("H")
        scan.advance(1, 0)
        return True
    return False


RULES = (initial_silent_h, initial_hs, initial_hu_hw, non_initial_silent_h, h_pronounced)


def encode(scan: "Scan") -> None:
    # silent unless one of the rules keeps it
    run_cascade(scan, RULES)
