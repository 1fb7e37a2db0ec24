"""Rules for 'N'."""

from typing import TYPE_CHECKING

from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def nce(scan: "Scan") -> bool:
    """"-NCE" / "-NSE": 'entrance' sounds exactly like 'entrants'."""
    if (
        scan.at(1, "C", "S")
        and scan.at(2, "E", "Y", "I")
        and (scan.idx + 2 == scan.last or (scan.idx + 3 == scan.last and scan.char_at(3, "S")))
    ):
        scan.add("NTS")
        scan.idx += 1
        return True
    return False


RULES = (nce,)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    if scan.next_is("N"):
        scan.idx += 1

    # e.g. 'monsieur', 'aloneness'
    if not scan.at(-3, "MONSIEUR") and not scan.at(-3, "NENESS"):
        scan.add("N")
