"""Rules for 'K'."""

from typing import TYPE_CHECKING

from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def silent_k(scan: "Scan") -> bool:
    """Initial "KN", and 'know', 'knife', 'penknife'."""
    if scan.idx == 0 and scan.starts("KN"):
        if not scan.at(2, "ISH", "ESSET", "IEVEL"):
            return True

    if (scan.at(1, "NOW", "NIT", "NOT", "NOB") and not scan.starts("BANKNOTE")) or scan.at(
        1, "NOCK", "NUCK", "NIFE", "NACK", "NIGHT"
    ):
        # the N was already encoded, e.g. "penknife"
        if scan.idx > 0 and scan.char_at(-1, "N"):
            scan.idx += 1
        return True

    return False


RULES = (silent_k,)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    scan.add("K")
    if scan.char_at(1, "K") or scan.char_at(1, "Q"):
        scan.idx += 1
