"""Rules for 'T'.

"TH" encodes to '0' (theta). 'T' before "-IO-", "-IA-", "-URE" and
similar suffixes becomes 'X', usually with 'T' as the alternate.
"""

from typing import TYPE_CHECKING

from .. import lexicon
from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def t_initial(scan: "Scan") -> bool:
    """Initial 'T' in 'tzar', pinyin 'tsao', 'tjaarda', 'thai'."""
    if scan.idx != 0:
        return False

    # americans usually say "tzar" as "zar"
    if scan.at(1, "SAR", "ZAR"):
        return True

    # old french-school pinyin where 'ts-' => 'X'
    if scan.exact("TSO", "TSA", "TSU", "TSAO", "TSAI", "TSING", "TSANG"):
        scan.add("X")
        scan.advance(2, 1)
        return True

    # "TS<vowel>-" is said both with and without the 'T'
    if scan.next_is("S") and scan.vowel_at(2):
        scan.add_alt("TS", "S")
        scan.advance(2, 1)
        return True

    # e.g. "tjaarda"
    if scan.next_is("J"):
        scan.add("X")
        scan.advance(2, 1)
        return True

    if scan.exact("THU") or scan.at(1, "HAI", "HUY", "HAO", "HYME", "HYMY", "HANH", "HERES"):
        scan.add("T")
        scan.advance(2, 1)
        return True

    return False


def tch(scan: "Scan") -> bool:
    if scan.at(1, "CH"):
        scan.add("X")
        scan.idx += 2
        return True
    return False


def silent_french_t(scan: "Scan") -> bool:
    """French silent T familiar to americans, e.g. 'ballet', 'gourmet'."""
    return (
        scan.at_end(-4, "MONET", "GENET", "CHAUT")
        or scan.at(-2, "POTPOURRI")
        or scan.at(-3, "MORTGAGE", "BOATSWAIN")
        or scan.at(-4, *lexicon.SILENT_T_FRENCH_4)
        or scan.at(-5, *lexicon.SILENT_T_FRENCH_5)
        or scan.at(-6, *lexicon.SILENT_T_FRENCH_6)
        or scan.at(-7, *lexicon.SILENT_T_FRENCH_7)
        or scan.at(-8, *lexicon.SILENT_T_FRENCH_8)
    ) and not scan.at(1, "AN", "RY", "IC", "OM", "IN")


def tun_tul_tua_tuo(scan: "Scan") -> bool:
    """'fortune', 'capitulate', 'obituary', 'actual'."""
    if (
        scan.at(-3, "FORTUN")
        or (scan.at(0, "TUL") and scan.vowel_at(-1) and scan.vowel_at(3))
        or scan.at(-2, "BITUA", "BITUE")
        or (scan.idx > 1 and scan.at(0, "TUA", "TUO"))
    ):
        scan.add_alt("X", "T")
        return True
    return False


def tue_teu_teou_tul_tie(scan: "Scan") -> bool:
    """'constituent', 'righteous', 'amateur', 'pasteur', 'statue', 'patience'."""
    if (
        scan.at(1, "UENT")
        or scan.at(-4, "RIGHTEOUS")
        or scan.at(-3, "STATUTE", "AMATEUR", "STATUTOR")
        # e.g. "blastula", "pasteur"
        or scan.at(-1, "NTULE", "NTULA", "STULE", "STULA", "STEUR")
        or scan.at_end(0, "TUE")
        # e.g. "constituency"
        or scan.at(0, "TUENC")
        or scan.at_end(0, "TIENCE")
    ):
        scan.add_alt("X", "T")
        scan.advance(1, 0)
        return True
    return False


def tur_tiu_suffixes(scan: "Scan") -> bool:
    """'adventure', 'musculature'; 'tessitura' and 'hematuria' keep 'T'."""
    if scan.idx > 0 and scan.at(1, "URE", "URA", "URI", "URY", "URO", "IUS"):
        if (scan.at_end(1, "URA", "URO") and not scan.at(-3, "VENTURA")) or scan.at(1, "URIA"):
            scan.add("T")
        else:
            scan.add_alt("X", "T")
        scan.advance(1, 0)
        return True
    return False


def ti(scan: "Scan") -> bool:
    """'-TIO-', '-TIA-', '-TIU-', except combining forms such as 'rooseveltian'."""
    if (
        (scan.at(1, "IO") and not scan.at(-1, "ETIOL"))
        or scan.at(1, "IAL")
        or scan.at(-1, "RTIUM", "ATIUM")
        or (
            (scan.at(1, "IAN") and scan.idx > 0)
            and not (
                scan.at(-4, "FAUSTIAN")
                or scan.at(-5, "PROUSTIAN")
                or scan.at(-2, "TATIANA")
                or scan.at(-3, "KANTIAN", "GENTIAN")
                or scan.at(-8, "ROOSEVELTIAN")
            )
        )
        or (
            scan.at_end(0, "TIA")
            # usually 'X' after all
            and not (
                scan.at(-3, "HESTIA", "MASTIA")
                or scan.at(-2, "OSTIA")
                or scan.starts("TIA")
                or scan.at(-5, "IZVESTIA")
            )
        )
        or scan.at(1, "IATE", "IATI", "IABL", "IATO", "IARY")
        or scan.at(-5, "CHRISTIAN")
    ):
        if scan.at_start(-2, "ANTI") or scan.starts("PATIO", "PITIA", "DUTIA"):
            scan.add("T")
        elif scan.at(-4, "EQUATION"):
            scan.add("J")
        elif scan.at(0, "TION"):
            scan.add("X")
        elif scan.starts("KATIA", "LATIA"):
            scan.add_alt("T", "X")
        else:
            scan.add_alt("X", "T")
        scan.advance(2, 0)
        return True
    return False


def tient(scan: "Scan") -> bool:
    """'patient'."""
    if scan.at(1, "IENT"):
        scan.add_alt("X", "T")
        scan.advance(2, 0)
        return True
    return False


def tsch(scan: "Scan") -> bool:
    """'deutsch', but not german compounds like 'weltschmerz'."""
    if scan.at(0, "TSCH") and not scan.at(-3, "WELT", "KLAT", "FEST"):
        scan.add("X")
        scan.idx += 3
        return True
    return False


def tzsch(scan: "Scan") -> bool:
    """'nietzsche'."""
    if scan.at(0, "TZSCH"):
        scan.add("X")
        scan.idx += 4
        return True
    return False


def th_pronounced_separately(scan: "Scan") -> bool:
    """'adulthood', 'bithead', 'apartheid', and 'esther' where "TH" is 'T'."""
    if (
        (
            scan.idx > 0
            and scan.at(
                1, "HOOD", "HEAD", "HEID", "HAND", "HILL", "HOLD", "HAWK", "HEAP", "HERD",
                "HOLE", "HOOK", "HUNT", "HUMO", "HAUS", "HOFF", "HARD",
            )
            and not scan.at(-3, "SOUTH", "NORTH")
        )
        or scan.at(1, "HOUSE", "HEART", "HASTE", "HYPNO", "HEQUE")
        # watch out for the greek root "-thallic"
        or (scan.at_end(1, "HALL") and not scan.at(-3, "SOUTH", "NORTH"))
        or (
            scan.at_end(1, "HAM")
            and not scan.starts(
                "GOTHAM", "WITHAM", "LATHAM", "BENTHAM", "WALTHAM", "WORTHAM", "GRANTHAM"
            )
        )
        or (scan.at(1, "HATCH") and not (scan.idx == 0 or scan.at(-2, "UNTHATCH")))
        or scan.at(-3, "GOETHE", "WARTHOG")
        or scan.at(-2, "ESTHER", "NATHALIE")
    ):
        if scan.at(-3, "POSTHUM"):
            scan.add("X")
        else:
            scan.add("T")
        scan.idx += 1
        return True
    return False


def tth(scan: "Scan") -> bool:
    """'matthew' vs. 'outthink'."""
    if scan.at(0, "TTH"):
        if scan.at(-2, "MATTH"):
            scan.add("0")
        else:
            scan.add("T0")
        scan.idx += 2
        return True
    return False


def th(scan: "Scan") -> bool:
    """"TH" => '0', but 'T' in 'thomas', 'thames' and germanic words."""
    if not scan.at(0, "TH"):
        return False

    # '-clothes-': the vowel is already encoded, go straight to the S
    if scan.at(-3, "CLOTHES"):
        scan.idx += 2
        return True

    if (
        scan.at(2, "OMAS", "OMPS", "OMPK", "OMSO", "OMSE", "AMES", "OVEN", "OFEN", "ILDA", "ILDE")
        or scan.exact("THOM", "THOMS")
        or scan.starts("SCH", "VAN ", "VON ")
    ):
        scan.add("T")
    elif scan.starts("SM"):
        # etymological second reading so 'smith' matches 'schmidt'
        scan.add_alt("0", "T")
    else:
        scan.add("0")

    scan.idx += 1
    return True


RULES = (
    t_initial,
    tch,
    silent_french_t,
    tun_tul_tua_tuo,
    tue_teu_teou_tul_tie,
    tur_tiu_suffixes,
    ti,
    tient,
    tsch,
    tzsch,
    th_pronounced_separately,
    tth,
    th,
)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    if scan.at(1, "T", "D"):
        scan.idx += 1
    scan.add("T")
