"""Rules for 'R'."""

from typing import TYPE_CHECKING

from .. import lexicon
from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def rz(scan: "Scan") -> bool:
    """"-RZ-" with its american and polish pronunciations."""
    if (
        scan.at(-2, "GARZ", "KURZ", "MARZ", "MERZ", "HERZ", "PERZ", "WARZ")
        or scan.at(0, "RZANO", "RZOLA")
        or scan.at(-1, "ARZA", "ARZN")
    ):
        return False

    # the 'Z' is usually silent in the united states, 'X' in poland
    if scan.at(-4, "YASTRZEMSKI"):
        scan.add_alt("R", "X")
        scan.idx += 1
        return True

    # two american pronunciations, neither authentically polish
    if scan.at(-1, "BRZEZINSKI"):
        scan.add_alt("RS", "RJ")
        # also skip the second Z
        scan.idx += 3
        return True

    # after a voiceless consonant, a vowel or at the start: polish 'X'
    if scan.at(-1, "TRZ", "PRZ", "KRZ") or (
        scan.at(0, "RZ") and (scan.vowel_at(-1) or scan.idx == 0)
    ):
        scan.add_alt("RS", "X")
        scan.idx += 1
        return True

    # after a voiced consonant: polish 'J'
    if scan.at(-1, "BRZ", "DRZ", "GRZ"):
        scan.add_alt("RS", "J")
        scan.idx += 1
        return True

    return False


def silent_r(scan: "Scan") -> bool:
    """French or no longer pronounced 'R', e.g. 'cartier', 'monsieur', 'worcester'."""
    return (
        (
            scan.idx == scan.last
            and scan.at(-2, "IER")
            and (
                scan.at(-5, *lexicon.SILENT_R_IER_3)
                or scan.at(-6, *lexicon.SILENT_R_IER_4)
                or scan.at(-7, *lexicon.SILENT_R_IER_5)
                or scan.at(-8, *lexicon.SILENT_R_IER_6)
                or scan.at(-9, "CHARCUT")
                or scan.at(-10, "CHARPENT")
            )
        )
        or scan.at(-2, "SURBURB", "WORSTED", "WORCESTER")
        or scan.at(-7, "MONSIEUR")
        or scan.at(-6, "POITIERS")
    )


def vowel_re_transposition(scan: "Scan") -> bool:
    """'-RE' heard as 'AR', like the -LE case, e.g. 'fibre' => FABAR."""
    if (
        scan.config.encode_vowels
        and scan.next_is("E")
        and scan.length > 3
        and not scan.starts("OUTRE", "LIBRE", "ANDRE")
        and not scan.exact("FRED", "TRES")
        and not scan.at(-2, "LDRED", "LFRED", "NDRED", "NFRED", "NDRES", "TRES", "IFRED")
        and not scan.vowel_at(-1)
        and (scan.idx + 1 == scan.last or scan.at_end(2, "D", "S"))
    ):
        scan.add("AR")
        return True
    return False


RULES = (rz,)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    if not silent_r(scan) and not vowel_re_transposition(scan):
        scan.add("R")

    # eat a redundant R, and in "poitiers" skip the S too
    if scan.next_is("R") or scan.at(-6, "POITIERS"):
        scan.idx += 1
