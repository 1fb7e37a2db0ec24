"""Rules for 'B'."""

from typing import TYPE_CHECKING

from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def silent_b(scan: "Scan") -> bool:
    """'debt', 'doubt', 'subtle': the B is silent, encode the T and skip it."""
    if scan.at(-2, "DEBT", "SUBTL", "SUBTIL") or scan.at(-3, "DOUBT"):
        scan.add("T")
        scan.idx += 1
        return True
    return False


RULES = (silent_b,)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    # "-MB" as in "dumb" is consumed under 'M'
    scan.add_exact_approx("B", "P")

    # skip double B, or BP not followed by H
    if scan.next_is("B") or (
        scan.next_is("P") and scan.idx + 2 < scan.length and scan.word[scan.idx + 2] != "H"
    ):
        scan.idx += 1
