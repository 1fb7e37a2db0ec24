"""Rules for 'L'.

Besides silent 'L' ('calm', 'walk', 'would'), this handles "-LL-" read as
a 'Y' in spanish and french words, and the schwa heard before the L in
words such as 'bristle' ('-LE' transposition) when vowels are encoded.
"""

from typing import TYPE_CHECKING

from ..matcher import root_or_inflections
from ..vowels import skip_vowels
from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def interpolate_vowel_at_end(scan: "Scan") -> None:
    """A schwa is heard before a final L after D, G or T, e.g. 'ertl', 'vogl'."""
    if scan.config.encode_vowels and scan.at_end(-1, "DL", "GL", "TL"):
        scan.add("A")


def lely_to_l(scan: "Scan") -> bool:
    """'agilely', 'docilely'."""
    if scan.at_end(-1, "ILELY"):
        scan.add("L")
        scan.idx += 2
        return True
    return False


def colonel(scan: "Scan") -> bool:
    if scan.at(-2, "COLONEL"):
        scan.add("R")
        scan.idx += 1
        return True
    return False


def french_ault(scan: "Scan") -> bool:
    """'renault', 'foucault', but not 'fault' or 'assault'."""
    if (
        scan.idx > 3
        and (
            scan.at(-3, "RAULT", "NAULT", "BAULT", "SAULT", "GAULT", "CAULT")
            or scan.at(-4, "REAULT", "RIAULT", "NEAULT", "BEAULT")
        )
        and not (
            root_or_inflections(scan.word, "ASSAULT")
            or scan.at(-8, "SOMERSAULT")
            or scan.at(-9, "SUMMERSAULT")
        )
    ):
        scan.idx += 1
        return True
    return False


def french_euil(scan: "Scan") -> bool:
    """'auteuil'."""
    return scan.at_end(-3, "EUIL")


def french_oulx(scan: "Scan") -> bool:
    """'proulx'."""
    if scan.at_end(-2, "OULX"):
        scan.idx += 1
        return True
    return False


def silent_l_in_lm(scan: "Scan") -> bool:
    """"-LM-" and "-LN-": silent in 'lincoln', 'holmes', 'psalm', 'salmon'."""
    if not scan.at(0, "LM", "LN"):
        return False

    silent = (
        scan.at(-2, "COLN", "CALM", "BALM", "MALM", "PALM")
        or scan.at_end(-1, "OLM")
        or scan.at(-3, "PSALM", "QUALM")
        or scan.at(-2, "SALMON", "HOLMES")
        or scan.at(-1, "ALMOND")
        or scan.at_start(-1, "ALMS")
    ) and (
        not scan.at(2, "A")
        and not scan.at(-2, "BALMO", "PALMER", "PALMOR", "BALMER")
        and not scan.at(-3, "THALM")
    )
    if not silent:
        scan.add("L")
    return True


def silent_l_in_lk_lv(scan: "Scan") -> bool:
    """'walk', 'yolk', 'half', 'calves', 'chalk'."""
    return (
        (
            scan.at(-2, "WALK", "YOLK", "FOLK", "HALF", "TALK", "CALF", "BALK", "CALK")
            or (
                scan.at(-2, "POLK", "HALV", "SALVE", "CALVE", "SOLDER")
                and not scan.at(-2, "POLKA", "PALKO", "HALVA", "HALVO", "SALVER", "CALVER")
            )
            or (scan.at(-3, "CAULK", "CHALK", "BAULK", "FAULK") and not scan.at(-4, "SCHALK"))
        )
        and not scan.at(-5, "GONSALVES", "GONCALVES")
        and not scan.at(-2, "BALKAN", "TALKAL")
        and not scan.at(-3, "PAULK", "CHALF")
    )


def silent_l_in_ould(scan: "Scan") -> bool:
    """'would', 'could', 'should' but not 'shoulder'."""
    if scan.at(-3, "WOULD", "COULD") or (
        scan.at(-4, "SHOULD") and not scan.at(-4, "SHOULDER")
    ):
        scan.add_exact_approx("D", "T")
        scan.idx += 1
        return True
    return False


RULES = (
    lely_to_l,
    colonel,
    french_ault,
    french_euil,
    french_oulx,
    silent_l_in_lm,
    silent_l_in_lk_lv,
    silent_l_in_ould,
)


def ll_as_vowel_special_cases(scan: "Scan") -> bool:
    """"-ILLA-" / "-ILLE-" that americans say as 'Y', e.g. 'tortilla', 'guillermo'."""
    if (
        scan.at(-5, "TORTILLA")
        or scan.at(-8, "RATATOUILLE")
        # e.g. 'guillermo', 'veillard', but 'guillotine' keeps its L
        or (
            scan.starts("GUILL", "VEILL", "GAILL")
            and not (scan.at(-3, "GUILLOT", "GUILLOR", "GUILLEN") or scan.exact("GUILL"))
        )
        # e.g. "brouillard", "gremillion"
        or scan.starts("ROBILL", "BROUILL", "GREMILL")
        # e.g. 'mireille', but 'reveille' is 're-vil-lee'
        or (scan.at_end(-2, "EILLE") and not scan.at(-5, "REVEILLE"))
    ):
        scan.idx += 1
        return True
    return False


def ll_as_vowel(scan: "Scan") -> bool:
    """Spanish 'cabrillo', 'gallegos', also 'gorilla': both pronunciations."""
    if (
        scan.at_end(-1, "ILLO", "ILLA", "ALLE")
        or (
            scan.ends("A", "O", "AS", "OS")
            and scan.at(-1, "AL", "IL")
            and not scan.at(-1, "ALLA")
        )
        or scan.starts(
            "LLA", "VILLE", "VILLA", "GALLARDO", "VALLADAR", "MAGALLAN", "CAVALLAR",
            "BALLASTE",
        )
    ):
        scan.add_alt("L", None)
        scan.idx += 1
        return True
    return False


def ll_as_vowel_cases(scan: "Scan") -> bool:
    """Double L. Eats the second L when neither vowel reading applies."""
    if scan.next_is("L"):
        if ll_as_vowel_special_cases(scan) or ll_as_vowel(scan):
            return True
        scan.idx += 1
    return False


def vowel_le_transposition(scan: "Scan", start: int) -> bool:
    """Schwa before the L in e.g. 'bristle', 'dazzle', 'goggle' => KAKAL."""
    offset = scan.idx - start
    if (
        scan.config.encode_vowels
        and start > 1
        and not scan.vowel_at(offset - 1)
        and scan.char_at(offset + 1, "E")
        and not scan.char_at(offset - 1, "L")
        and not scan.char_at(offset - 1, "R")
        # lots of exceptions
        and not scan.vowel_at(offset + 2)
        and not scan.starts(
            "MCCLE", "MCLEL", "EMBLEM", "KADLEC", "ECCLESI", "COMPLEC", "COMPLEJ", "ROBLEDO"
        )
        and not (start + 2 == scan.last and scan.at(offset, "LET"))
        and not scan.at(
            offset, "LEG", "LER", "LEX", "LESS", "LESQ", "LECT", "LEDG", "LETE", "LETH",
            "LETS", "LETT", "LETUS", "LETIV", "LETELY", "LETTER", "LETION", "LETIAN",
            "LETING", "LETORY", "LETTING",
        )
        # e.g. "complement" !=> KAMPALMENT
        and not (
            scan.at(offset, "LEMENT")
            and not (
                scan.at(-5, "BATTLE", "TANGLE", "PUZZLE", "RABBLE", "BABBLE")
                or scan.at(-4, "TABLE")
            )
        )
        and not (start + 2 == scan.last and scan.at(offset - 2, "OCLES", "ACLES", "AKLES"))
        and not scan.at(offset - 3, "LISLE", "AISLE")
        and not scan.starts("ISLE")
        and not scan.starts("ROBLES")
        and not scan.at(offset - 4, "PROBLEM", "RESPLEN")
        and not scan.at(offset - 3, "REPLEN")
        and not scan.at(offset - 2, "SPLE")
        and not scan.char_at(offset - 1, "H")
        and not scan.char_at(offset - 1, "W")
    ):
        scan.add("AL")
        scan.al_inversion = True
        if scan.char_at(offset + 2, "L"):
            scan.idx = start + 2
        return True
    return False


def vowel_preserve_after_l(scan: "Scan", start: int) -> bool:
    """Keep the vowel after an L that does not transpose."""
    offset = start - scan.idx
    if (
        scan.config.encode_vowels
        and not scan.vowel_at(offset - 1)
        and scan.char_at(offset + 1, "E")
        and start > 1
        and start + 1 != scan.last
        and not (scan.at(offset + 1, "ES", "ED") and start + 2 == scan.last)
        and not scan.at(offset - 1, "RLEST")
    ):
        scan.add("LA")
        scan.idx = skip_vowels(scan, scan.idx + 1)
        return True
    return False


def encode(scan: "Scan") -> None:
    # the -LE rules need the position before any double L was eaten
    start = scan.idx

    interpolate_vowel_at_end(scan)

    if run_cascade(scan, RULES):
        return
    if ll_as_vowel_cases(scan):
        return

    if vowel_le_transposition(scan, start) or vowel_preserve_after_l(scan, start):
        return
    scan.add("L")
