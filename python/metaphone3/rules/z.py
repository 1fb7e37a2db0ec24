"""Rules for 'Z'."""

from typing import TYPE_CHECKING

from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def zz(scan: "Scan") -> bool:
    """Italian "-ZZ-" said as 'TS', e.g. 'abruzzi', 'pizza'."""
    if scan.next_is("Z") and (
        scan.at_end(2, "I", "O", "A") or scan.at(-2, "MOZZARELL", "PIZZICATO", "PUZZONLAN")
    ):
        scan.add_alt("TS", "S")
        scan.idx += 1
        return True
    return False


def zu_zier_zs(scan: "Scan") -> bool:
    """'azure', 'brazier', 'zsa zsa'."""
    if (
        (scan.idx == 1 and scan.at(-1, "AZUR"))
        or (scan.at(0, "ZIER") and not scan.at(-2, "VIZIER"))
        or scan.at(0, "ZSA")
    ):
        scan.add_alt("J", "S")
        if scan.at(0, "ZSA"):
            scan.idx += 1
        return True
    return False


def french_ez(scan: "Scan") -> bool:
    """Silent 'Z' of 'chez', 'rendezvous'."""
    return (scan.idx == 3 and scan.at(-3, "CHEZ")) or scan.at(-5, "RENDEZ")


def german_z(scan: "Scan") -> bool:
    """German 'Z' said as 'TS': 'nazi', 'mozart', 'herzog', 'zeitgeist'."""
    if (
        scan.exact("NAZI")
        or scan.at(-2, "NAZIFY", "MOZART")
        or scan.at(-3, "HOLZ", "HERZ", "MERZ", "FITZ", "HERZOG")
        or (scan.at(-3, "GANZ") and not scan.vowel_at(1))
        or scan.at(-4, "STOLZ", "PRINZ", "VENEZIA")
        # but not 'schlimazel', 'schmooze'
        or (scan.contains("SCH") and not scan.ends("IZE", "OZE", "ZEL"))
        or (scan.idx > 0 and scan.at(0, "ZEIT"))
        or scan.at(-3, "WEIZ")
    ):
        if scan.idx > 0 and scan.char_at(-1, "T"):
            scan.add("S")
        else:
            scan.add("TS")
        return True
    return False


def zh(scan: "Scan") -> bool:
    """Pinyin 'zhao' and english phonetic spellings."""
    if scan.next_is("H"):
        scan.add("J")
        scan.idx += 1
        return True
    return False


RULES = (
    zz,
    zu_zier_zs,
    french_ez,
    german_z,
    zh,
)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    scan.add("S")
    if scan.next_is("Z"):
        scan.idx += 1
