"""Rules for 'V'."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..encoder import Scan

RULES = ()


def encode(scan: "Scan") -> None:
    if scan.next_is("V"):
        scan.idx += 1
    scan.add_exact_approx("V", "F")
