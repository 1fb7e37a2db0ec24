"""Rules for 'P'."""

from typing import TYPE_CHECKING

from .. import lexicon
from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def silent_p_at_beginning(scan: "Scan") -> bool:
    """Initial "PN", "PF", "PS", "PT", e.g. 'pneumonia', 'psalm'."""
    return scan.at_start(0, "PN", "PF", "PS", "PT")


def pt(scan: "Scan") -> bool:
    """'pterodactyl', 'receipt', 'asymptote'."""
    if scan.next_is("T") and (
        scan.at_start(0, "PTERO") or scan.at(-5, "RECEIPT") or scan.at(-4, "ASYMPTOT")
    ):
        scan.add("T")
        scan.idx += 1
        return True
    return False


def ph(scan: "Scan") -> bool:
    """"-PH-": usually 'F', but 'P' where it joins two words as in 'upheaval'."""
    if not scan.next_is("H"):
        return False

    if scan.at(0, "PHTHALEIN") or scan.at_start(0, "PHTH") or scan.at(-3, "APOPHTHEGM"):
        # 'PH' silent
        scan.add("0")
        scan.idx += 3
    elif (
        scan.idx > 0
        and (scan.at(2, *lexicon.PH_COMBINING_FORMS) and not scan.at(-1, "LPHAM"))
        and not scan.at(-3, "LYMPH", "NYMPH")
    ):
        # combining forms, e.g. 'sheepherd', 'upheaval', 'cupholder'
        scan.add("P")
        scan.advance(2, 1)
    else:
        scan.add("F")
        scan.idx += 1
    return True


def pph(scan: "Scan") -> bool:
    """'sappho'."""
    if scan.next_is("P") and scan.idx + 2 < scan.length and scan.char_at(2, "H"):
        scan.add("F")
        scan.idx += 2
        return True
    return False


def rps(scan: "Scan") -> bool:
    """'corps', 'corpsman', but not 'corpse'."""
    if scan.at(-3, "CORPS") and not scan.at(-3, "CORPSE"):
        scan.idx += 1
        return True
    return False


def coup(scan: "Scan") -> bool:
    """'coup', but not 'recoup'."""
    return scan.at_end(-3, "COUP") and not scan.at(-5, "RECOUP")


def pneum(scan: "Scan") -> bool:
    if scan.at(1, "NEUM"):
        scan.add("N")
        scan.idx += 1
        return True
    return False


def psych(scan: "Scan") -> bool:
    if scan.at(1, "SYCH"):
        scan.add("SAK" if scan.config.encode_vowels else "SK")
        scan.idx += 4
        return True
    return False


def psalm(scan: "Scan") -> bool:
    if scan.at(1, "SALM"):
        scan.add("SAM" if scan.config.encode_vowels else "SM")
        scan.idx += 4
        return True
    return False


RULES = (silent_p_at_beginning, pt, ph, pph, rps, coup, pneum, psych, psalm)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    # e.g. "campbell", "raspberry": eat the redundant P or B
    if scan.at(1, "P", "B"):
        scan.idx += 1
    scan.add("P")
