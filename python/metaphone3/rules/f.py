"""Rules for 'F'."""

from typing import TYPE_CHECKING

from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def often(scan: "Scan") -> bool:
    """"-FT-" where the 'T' is usually silent, e.g. 'often', 'soften'."""
    if scan.at(-1, "OFTEN"):
        scan.add_alt("F", "FT")
        scan.idx += 1
        return True
    return False


RULES = (often,)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    if scan.next_is("F"):
        scan.idx += 1
    scan.add("F")
