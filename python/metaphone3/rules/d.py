"""Rules for 'D'."""

from typing import TYPE_CHECKING

from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def dg(scan: "Scan") -> bool:
    """"-DG-": 'J' as in 'edge', unless the G starts a root as in 'handgun'."""
    if not scan.at(0, "DG"):
        return False

    # e.g. 'edgar', 'midgut', 'handgrip', 'woodgrouse'
    if scan.at(2, "A", "O") or scan.at(
        1, "GUN", "GUT", "GEAR", "GLAS", "GRIP", "GREN", "GILL", "GRAF",
        "GUARD", "GUILT", "GRAVE", "GRASS", "GROUSE",
    ):
        scan.add_exact_approx("DG", "TK")
    else:
        # e.g. "edge", "abridgment"
        scan.add("J")
    scan.idx += 1
    return True


def dj(scan: "Scan") -> bool:
    """e.g. 'adjacent'."""
    if scan.at(0, "DJ"):
        scan.add("J")
        scan.idx += 1
        return True
    return False


def dt_dd(scan: "Scan") -> bool:
    """Eat a redundant 'T' or 'D'."""
    if not scan.at(0, "DT", "DD"):
        return False

    if scan.at(0, "DTH"):
        scan.add_exact_approx("D0", "T0")
        scan.idx += 2
        return True

    if scan.config.encode_exact:
        # devoice it
        scan.add("T" if scan.at(0, "DT") else "D")
    else:
        scan.add("T")
    scan.idx += 1
    return True


def d_to_j(scan: "Scan") -> bool:
    """'module', 'soldier', 'procedure', 'education'."""
    if (
        (scan.at(0, "DUL") and scan.vowel_at(-1) and scan.vowel_at(3))
        or scan.at_end(-1, "LDIER", "NDEUR", "EDURE", "RDURE")
        or scan.at(-3, "CORDIAL")
        or scan.at(-1, "ADUA", "IDUA", "IDUU", "NDULA", "NDULU", "EDUCA")
    ):
        scan.add_exact_approx_alt("J", "D", "J", "T")
        scan.advance(1, 0)
        return True
    return False


def dous(scan: "Scan") -> bool:
    """'assiduous', 'arduous'."""
    if scan.at(1, "UOUS"):
        scan.add_exact_approx_alt("J", "D", "J", "T")
        scan.advance(3, 0)
        return True
    return False


def silent_d(scan: "Scan") -> bool:
    """'wednesday', 'handsome', and french names such as 'renaud'."""
    return (
        scan.at(-2, "WEDNESDAY")
        or scan.at(-3, "HANDKER", "HANDSOM", "WINDSOR")
        or scan.ends("PERNOD", "ARTAUD", "RENAUD", "RIMBAUD", "MICHAUD", "BICHAUD")
    )


RULES = (dg, dj, dt_dd, d_to_j, dous, silent_d)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    if scan.config.encode_exact:
        # final devoicing, e.g. 'missed' == 'mist'
        scan.add("T" if scan.at_end(-3, "SSED") else "D")
    else:
        scan.add("T")
