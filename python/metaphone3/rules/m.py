"""Rules for 'M'."""

from typing import TYPE_CHECKING

from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def silent_m_at_beginning(scan: "Scan") -> bool:
    """Initial "MN", e.g. 'mnemonic'."""
    return scan.at_start(0, "MN")


def mr_and_mrs(scan: "Scan") -> bool:
    """The abbreviations 'Mr' and 'Mrs'."""
    if scan.exact("MR"):
        scan.add("MASTAR" if scan.config.encode_vowels else "MSTR")
        scan.idx += 1
        return True
    if scan.exact("MRS"):
        scan.add("MASAS" if scan.config.encode_vowels else "MSS")
        scan.idx += 2
        return True
    return False


def mac(scan: "Scan") -> bool:
    """Irish and scottish names, e.g. 'mcgregor', 'macintosh'."""
    if not scan.at_start(0, "MC", "MACIVER", "MACEWEN", "MACELROY", "MACILROY", "MACINTOSH"):
        return False

    scan.add("MAK" if scan.config.encode_vowels else "MK")

    if scan.starts("MC"):
        # watch out for e.g. "McGeorge"
        if scan.at(2, "K", "G", "Q") and not scan.at(2, "GEOR"):
            scan.idx += 2
        else:
            scan.idx += 1
    else:
        scan.idx += 2
    return True


def mpt(scan: "Scan") -> bool:
    """'comptroller', 'accompt'."""
    if scan.at(-2, "COMPTROL") or scan.at(-4, "ACCOMPT"):
        scan.add("N")
        scan.idx += 1
        return True
    return False


RULES = (silent_m_at_beginning, mr_and_mrs, mac, mpt)


def _silent_mb_root(scan: "Scan") -> bool:
    # e.g. "lamb", "comb", "dumb", "bomb", combining roots first
    return scan.at_start(-3, "THUMB") or scan.at_start(
        -2, "DUMB", "BOMB", "DAMN", "LAMB", "NUMB", "TOMB"
    )


def _pronounced_mb_root(scan: "Scan") -> bool:
    return (
        scan.at(-2, "NUMBER")
        or (scan.at(2, "A", "O") and not scan.at(-2, "DUMBASS"))
        or scan.at(-2, "LAMBEN", "LAMBER", "LAMBET", "TOMBIG", "LAMBRE")
    )


def _silent_mb_end(scan: "Scan") -> bool:
    # "-MB" at the end of a root, possibly followed by a standard suffix,
    # e.g. "climbing" => KLMNK, "bomber"
    return (
        scan.next_is("B")
        and scan.idx > 1
        and (
            scan.idx + 1 == scan.last
            or scan.at(2, "ING", "ABL", "LIKE")
            or scan.at_end(2, "S")
            or scan.at(-5, "BUNCOMB")
            or (
                scan.at_end(2, "ED", "ER")
                and (
                    scan.starts("CLIMB", "PLUMB")
                    or not scan.at(-1, "IMBER", "AMBER", "EMBER", "UMBER")
                )
                and not scan.at(-2, "CUMBER", "SOMBER")
            )
        )
    )


def _pronounced_mb_end(scan: "Scan") -> bool:
    # e.g. "bombastic", "umbrage", "flamboyant"
    return scan.at(-1, "OMBAS", "OMBAD", "UMBRA") or scan.at(-3, "FLAM")


def _silent_mn(scan: "Scan") -> bool:
    # "-MN" at the end of a word, or followed by a suffix, e.g. "damned"
    return scan.next_is("N") and (
        scan.idx + 1 == scan.last
        or scan.at_end(2, "S", "LY", "ER", "ED", "ING", "EST")
        or scan.at(-2, "DAMNEDEST")
        or scan.at(-5, "GODDAMNIT")
    )


def skip_silent_mb(scan: "Scan") -> None:
    """Step over a silent B or N after the M, or a double M."""
    if _silent_mb_root(scan):
        if not _pronounced_mb_root(scan):
            scan.idx += 1
    elif _silent_mb_end(scan):
        if not _pronounced_mb_end(scan):
            scan.idx += 1
    elif _silent_mn(scan) or scan.next_is("M"):
        scan.idx += 1


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    skip_silent_mb(scan)
    scan.add("M")
