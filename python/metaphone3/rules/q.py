"""Rules for 'Q'."""

from typing import TYPE_CHECKING

from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def pinyin_qin(scan: "Scan") -> bool:
    """Current pinyin, e.g. 'qin'."""
    if scan.at(0, "QIN"):
        scan.add("X")
        return True
    return False


RULES = (pinyin_qin,)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    if scan.next_is("Q"):
        scan.idx += 1
    scan.add("K")
