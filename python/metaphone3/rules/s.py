"""Rules for 'S'.

'S' is 'S' by default, 'X' in "SH" and most "SCH", 'J' (the "zh" sound)
in 'vision' and 'measure', and silent in a number of french words.
"""

from typing import TYPE_CHECKING

from .. import lexicon
from ..matcher import root_or_inflections
from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def skj(scan: "Scan") -> bool:
    """Scandinavian "SKJ" before a vowel, e.g. 'skjold'."""
    if scan.at(0, "SKJO", "SKJU") and scan.vowel_at(3):
        scan.add("X")
        scan.idx += 2
        return True
    return False


def special_sw(scan: "Scan") -> bool:
    """Names beginning with SW that also get an 'SV' or 'XV' reading."""
    if scan.idx != 0:
        return False

    if scan.starts(*lexicon.SW_NAMES_SV_ALTERNATE):
        scan.add_alt("S", "SV")
        scan.idx += 1
        return True

    if scan.starts(*lexicon.SW_NAMES_XV_ALTERNATE):
        scan.add_alt("S", "XV")
        scan.idx += 1
        return True

    return False


def sj(scan: "Scan") -> bool:
    if scan.starts("SJ"):
        scan.add("X")
        scan.idx += 1
        return True
    return False


def silent_french_s_final(scan: "Scan") -> bool:
    """'arkansas', 'debris', 'bourgeois'; 'louis' gets both readings."""
    if scan.exact("LOUIS"):
        scan.add_alt("S", None)
        return True

    return scan.idx == scan.last and (
        (
            scan.starts(*lexicon.SILENT_S_FINAL_STARTS)
            or scan.exact("HORS")
            or scan.ends(*lexicon.SILENT_S_FINAL_ENDS)
        )
        or (scan.at(-2, "AI", "OI", "UI") and not scan.starts("LOIS", "LUIS"))
    )


def silent_french_s_internal(scan: "Scan") -> bool:
    """French words familiar to americans with a silent internal S."""
    return (
        scan.at(
            -2, "MESNES", "DESCHAM", "DESPRES", "DESROCH", "DESROSI", "DESJARD",
            "DESMARA", "DESCHEN", "DESHOTE", "DESLAUR", "DESCARTES",
        )
        or scan.at(-5, "DUQUESNE", "DUCHESNE")
        or scan.at(-3, "FRESNEL", "GROSVENOR")
        or scan.at(-4, "LOUISVILLE")
        or scan.at(-7, "BEAUCHESNE", "ILLINOISAN")
    )


def isl(scan: "Scan") -> bool:
    """'island', 'isle', 'carlisle', 'carlysle'."""
    return (
        scan.at(-2, "LISL", "LYSL", "AISL")
        and not scan.at(-3, "PAISLEY", "BAISLEY", "ALISLAM", "ALISLAH", "ALISLAA")
    ) or (
        scan.idx == 1
        and (scan.at(-1, "ISLE", "ISLAN") and not scan.at(-1, "ISLEY", "ISLER"))
    )


def stl(scan: "Scan") -> bool:
    """'hustle', 'bustle', 'whistle', 'corpuscle': the T (or C) is silent."""
    if not (
        (scan.at(0, "STLE", "STLI") and not scan.at(2, "LESS", "LIKE", "LINE"))
        or scan.at(-3, "THISTLY", "BRISTLY", "GRISTLY")
        or scan.at(-1, "USCLE")
    ):
        return False

    # names that pronounce the T, and "-LING" as a nominalizing suffix
    if (
        scan.starts("KRISTEN", "KRYSTLE", "CRYSTLE", "KRISTLE", "CHRISTENSEN", "CHRISTENSON")
        or scan.at(-3, "FIRSTLING")
        or scan.at(-2, "NESTLING", "WESTLING")
    ):
        scan.add("ST")
        scan.idx += 1
        return True

    if (
        scan.config.encode_vowels
        and scan.char_at(3, "E")
        and not scan.char_at(4, "R")
        and not scan.at(3, "EY", "ETTE", "ETTA")
    ):
        scan.add("SAL")
        scan.al_inversion = True
    else:
        scan.add("SL")
    scan.idx += 2
    return True


def christmas(scan: "Scan") -> bool:
    if scan.at(-4, "CHRISTMA"):
        scan.add("SM")
        scan.idx += 2
        return True
    return False


def sthm(scan: "Scan") -> bool:
    """'asthma', 'isthmus'."""
    if scan.at(0, "STHM"):
        scan.add("SM")
        scan.idx += 3
        return True
    return False


def isten(scan: "Scan") -> bool:
    """'listen', 'fasten'; in "christen" the T is silent in the verb only."""
    if scan.starts("CHRISTEN"):
        if root_or_inflections(scan.word, "CHRISTEN") or scan.starts("CHRISTENDOM"):
            scan.add_alt("S", "ST")
        else:
            scan.add("ST")
        scan.idx += 1
        return True

    if scan.at(-2, "LISTEN", "RISTEN", "HASTEN", "FASTEN", "MUSTNT") or scan.at(-3, "MOISTEN"):
        scan.add("S")
        scan.idx += 1
        return True

    return False


def sugar(scan: "Scan") -> bool:
    if scan.at(0, "SUGAR"):
        scan.add("X")
        return True
    return False


def sh(scan: "Scan") -> bool:
    """"SH" is 'X', except where it joins two words, e.g. 'clotheshorse', 'dishonor'."""
    if not scan.at(0, "SH"):
        return False

    if scan.at(-2, "CASHMERE"):
        scan.add("J")
        scan.idx += 1
        return True

    if scan.idx > 0 and (
        scan.at_end(1, "HAP")
        # e.g. "hartsheim", "clothshorse"
        or scan.at(1, *lexicon.SH_COMBINING_FORMS)
        # e.g. "mishear"
        or scan.at_end(2, "EAR")
        # e.g. "hartshorn"
        or (scan.at(2, "ORN") and not scan.at(-2, "UNSHORN"))
        # e.g. "newshour" but not "bashour", "manshour"
        or (scan.at(1, "HOUR") and not scan.starts("ASHOUR", "BASHOUR", "MANSHOUR"))
        # e.g. "dishonest", "grasshopper"
        or scan.at(
            2, "ARMON", "ONEST", "ALLOW", "OLDER", "OPPER", "EIMER", "ANDLE", "ONOUR",
            "ABILLE", "UMANCE", "ABITUA",
        )
    ):
        if not scan.at(-1, "S"):
            scan.add("S")
    else:
        scan.add("X")

    scan.idx += 1
    return True


def sch(scan: "Scan") -> bool:
    """"SCH": 'X' in german words, 'SK' in dutch, italian and greek ones."""
    if not scan.at(1, "CH"):
        return False

    # combining forms many centuries ago, e.g. "mischief", "escheat"
    if scan.idx > 0 and (scan.at(3, "IEF", "EAT", "ANCE", "ARGE") or scan.starts("ESCHEW")):
        scan.add("S")
        return True

    # Schlesinger's rule: "school", "schooner", "schiavone", "schiz-"
    if (
        (
            scan.at(3, "OO", "ER", "EN", "UY", "ED", "EM", "IA", "IZ", "IS", "OL")
            and not scan.at(0, "SCHOLT", "SCHISL", "SCHERR")
        )
        or scan.at(3, "ISZ")
        or (
            scan.at(-1, "ESCHAT", "ASCHIN", "ASCHAL", "ISCHAE", "ISCHIA")
            and not scan.at(-2, "FASCHING")
        )
        or scan.at_end(-1, "ESCHI")
        or scan.char_at(3, "Y")
    ):
        # e.g. "schermerhorn", "schenker", "schistose"
        if scan.at(3, "ER", "EN", "IS") and (
            scan.idx + 4 == scan.last or scan.at(3, "ENK", "ENB", "IST")
        ):
            scan.add_alt("X", "SK")
        else:
            scan.add("SK")
    else:
        scan.add("X")

    scan.idx += 2
    return True


def sur(scan: "Scan") -> bool:
    """'erasure', 'usury'; 'sure' and 'ensure' get 'X'."""
    if scan.at(1, "URE", "URA", "URY"):
        if scan.idx == 0 or scan.at(-1, "N", "K") or scan.at(-2, "NO"):
            scan.add("X")
        else:
            scan.add("J")
        scan.advance(1, 0)
        return True
    return False


def su(scan: "Scan") -> bool:
    """'sensuous', 'consensual', 'casual', but 'persuade' keeps 'S'."""
    if scan.at(1, "UO", "UA") and scan.idx != 0:
        if scan.at(-1, "RSUA"):
            scan.add("S")
        elif scan.vowel_at(-1):
            scan.add_alt("J", "S")
        else:
            scan.add_alt("X", "S")
        scan.advance(2, 0)
        return True
    return False


def ssio(scan: "Scan") -> bool:
    """'mission', 'abscission'."""
    if scan.at(1, "SION"):
        if scan.at(-2, "CI"):
            scan.add("J")
        elif scan.vowel_at(-1):
            scan.add("X")
        scan.advance(3, 1)
        return True
    return False


def ss(scan: "Scan") -> bool:
    """'russian', 'pressure', 'hessian', 'assurance'."""
    if scan.at(
        -1, "USSIA", "ESSUR", "ISSUR", "ISSUE", "ESSIAN", "ASSURE", "ASSURA", "ISSUAB",
        "ISSUAN", "ASSIUS",
    ):
        scan.add("X")
        scan.advance(2, 1)
        return True
    return False


def sia(scan: "Scan") -> bool:
    """'controversial', 'fuchsia', 'aphasia', names such as 'alesia'."""
    if scan.at(-2, "CHSIA") or scan.at(-1, "RSIAL"):
        scan.add("X")
        scan.advance(2, 0)
        return True

    # names generally get 'X' where terms such as "aphasia" get 'J'
    if (
        scan.at_start(-3, "ALESIA", "ALYSIA", "ALISIA", "STASIA")
        and not scan.starts("ANASTASIA")
    ) or scan.at(-5, "THERESIA", "DIONYSIAN"):
        scan.add_alt("X", "S")
        scan.advance(2, 0)
        return True

    if scan.at_end(0, "SIA", "SIAN") or scan.at(-5, "AMBROSIAL"):
        if (scan.vowel_at(-1) or scan.at(-1, "R")) and not (
            # compounds based on names, or french or greek words
            scan.starts(
                "JAMES", "NICOS", "PEGAS", "PEPYS", "HOBBES", "HOLMES", "JAQUES",
                "KEYNES", "MALTHUS", "HOMOOUS", "MAGLEMOS", "HOMOIOUS", "LEVALLOIS",
                "TARDENOIS",
            )
            or scan.at(-4, "ALGES")
        ):
            scan.add("J")
        else:
            scan.add("S")
        scan.advance(1, 0)
        return True

    return False


def sio(scan: "Scan") -> bool:
    """'vision', 'version', 'declension', and the irish 'siobhan'."""
    if scan.starts("SIOBHAN"):
        scan.add("X")
        scan.advance(2, 0)
        return True

    if scan.at(1, "ION"):
        if scan.vowel_at(-1) or scan.at(-2, "ER", "UR"):
            scan.add("J")
        else:
            scan.add("X")
        scan.advance(2, 0)
        return True
    return False


def anglicisations(scan: "Scan") -> bool:
    """'smith' matches 'schmidt', 'snider' matches 'schneider'; also slavic "-SZ-"."""
    if scan.at_start(0, "SM", "SN", "SL") or scan.at(1, "Z"):
        scan.add_alt("S", "X")
        if scan.at(1, "Z"):
            scan.idx += 1
        return True
    return False


def sc(scan: "Scan") -> bool:
    """"SC": 'SK', 'S' before a front vowel, 'X' in 'conscious'."""
    if not scan.at(0, "SC"):
        return False

    # 'viscount'
    if scan.at(-2, "VISCOUNT"):
        return True

    if scan.at(2, "I", "E", "Y"):
        # e.g. "conscious", "prosciutto"
        if (
            scan.at(2, "IUT", "IOUS")
            or scan.at(-2, "FASCIS")
            or scan.at(-3, "CONSCIEN", "CRESCEND", "CONSCION")
            or scan.at(-4, "OMNISCIEN")
        ):
            scan.add("X")
        elif scan.at(0, "SCIVV", "SCIRO", "SCIPIO", "SCEPTIC", "SCEPSIS") or scan.at(
            -2, "PISCITELLI"
        ):
            scan.add("SK")
        else:
            scan.add("S")
        scan.idx += 1
        return True

    scan.add("SK")
    scan.idx += 1
    return True


def sei_sui_sier(scan: "Scan") -> bool:
    """'nausea' by itself, 'casuistry', 'hosier', 'brasier'."""
    if (
        scan.at_end(-3, "NAUSEA")
        or scan.at(-2, "CASUI")
        or (
            scan.at(-1, "OSIER", "ASIER")
            and not (scan.starts("OSIER", "EASIER") or scan.at(-2, "ROSIER", "MOSIER"))
        )
    ):
        scan.add_alt("J", "X")
        scan.advance(2, 0)
        return True
    return False


def sea(scan: "Scan") -> bool:
    """'sean', 'nauseous'."""
    if scan.exact("SEAN") or (scan.at(-3, "NAUSEO") and not scan.at(-3, "NAUSEAT")):
        scan.add("X")
        scan.advance(2, 0)
        return True
    return False


RULES = (
    skj,
    special_sw,
    sj,
    silent_french_s_final,
    silent_french_s_internal,
    isl,
    stl,
    christmas,
    sthm,
    isten,
    sugar,
    sh,
    sch,
    sur,
    su,
    ssio,
    ss,
    sia,
    sio,
    anglicisations,
    sc,
    sei_sui_sier,
    sea,
)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    scan.add("S")

    if scan.at(1, "S", "Z") and not scan.at(1, "SH"):
        scan.idx += 1
