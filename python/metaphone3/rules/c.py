"""Rules for 'C'.

'C' is the most overloaded consonant: 'K' by default, 'S' before a front
vowel, 'X' (the "sh"/"ch" sound) in most "CH" spellings, and 'K' again in
"CH" spellings of greek and germanic origin.
"""

from typing import TYPE_CHECKING

from .. import lexicon
from ..matcher import root_or_inflections
from .base import run_cascade

if TYPE_CHECKING:
    from ..encoder import Scan


def silent_c_at_beginning(scan: "Scan") -> bool:
    """Initial "CT" and "CN", e.g. 'ctenoid', 'cnidaria'."""
    return scan.idx == 0 and scan.at(0, "CT", "CN")


def ca_to_s(scan: "Scan") -> bool:
    """'caesar', and words written without their cedilla such as 'linguica'."""
    if (scan.idx == 0 and scan.at(0, "CAES", "CAEC", "CAEM")) or scan.starts(
        "FACADE", "FRANCAIS", "FRANCAIX", "LINGUICA", "GONCALVES", "PROVENCAL"
    ):
        scan.add("S")
        scan.advance(1, 0)
        return True
    return False


def co_to_s(scan: "Scan") -> bool:
    """'coelecanth', 'garcon', 'francois'."""
    if (
        scan.at(0, "COEL") and (scan.vowel_at(4) or scan.idx + 3 == scan.last)
        or scan.at(0, "COENA", "COENO")
        or scan.starts("GARCON", "FRANCOIS", "MELANCON")
    ):
        scan.add("S")
        scan.advance(2, 0)
        return True
    return False


# "CH"


def chae(scan: "Scan") -> bool:
    """'michael', 'rachael'."""
    if scan.idx > 0 and scan.at(2, "AE"):
        if scan.starts("RACHAEL"):
            scan.add("X")
        elif not scan.at(-1, "C", "K", "G", "Q"):
            scan.add("K")
        scan.advance(3, 1)
        return True
    return False


def ch_to_h(scan: "Scan") -> bool:
    """Hebrew transliterations where "CH" is 'kh', e.g. 'chanukah', 'chabad'."""
    if (
        scan.idx == 0
        and scan.at(
            2, "AIM", "ETH", "ELM", "ASID", "AZAN", "UPPAH", "UTZPA", "ALLAH",
            "ALUTZ", "AMETZ", "ESHVAN", "ADARIM", "ANUKAH", "ALLLOTH", "ANNUKAH",
            "AROSETH",
        )
    ) or scan.at(-3, "CLACHAN"):
        scan.add("H")
        scan.advance(2, 1)
        return True
    return False


def silent_ch(scan: "Scan") -> bool:
    """'yacht', 'fuchsia', 'drachm'."""
    if (
        scan.at(-2, "YACHT", "FUCHSIA")
        or scan.starts("STRACHAN", "CRICHTON")
        or (scan.at(-3, "DRACHM") and not scan.at(-3, "DRACHMA"))
    ):
        scan.idx += 1
        return True
    return False


def arch(scan: "Scan") -> bool:
    """"-ARCH-": 'K' in combining forms from the greek, 'X' in english words."""
    if not scan.at(-2, "ARCH"):
        return False

    word = scan.word
    if (
        (
            (scan.vowel_at(2) and scan.at(-2, "ARCHA", "ARCHI", "ARCHO", "ARCHU", "ARCHY"))
            or scan.at(
                -2, "ARCHEA", "ARCHEG", "ARCHEO", "ARCHET", "ARCHEL", "ARCHES",
                "ARCHEP", "ARCHEM", "ARCHEN",
            )
            or scan.at_end(-2, "ARCH")
            or scan.starts("MENARCH")
        )
        and (
            not root_or_inflections(word, "ARCH")
            and not scan.at(-4, "SEARCH", "POARCH")
            and not scan.starts(
                "ARCHER", "ARCHIE", "ARCHENEMY", "ARCHIBALD", "ARCHULETA", "ARCHAMBAU"
            )
            and not (
                (
                    (
                        (scan.at(-3, "LARCH", "MARCH", "PARCH") or scan.at(-4, "STARCH"))
                        and not scan.starts(
                            "EPARCH", "NOMARCH", "EXILARCH", "HIPPARCH", "MARCHESE",
                            "ARISTARCH", "MARCHETTI",
                        )
                    )
                    or root_or_inflections(word, "STARCH")
                )
                and (not scan.at(-2, "ARCHU", "ARCHY") or scan.starts("STARCHY"))
            )
        )
    ):
        scan.add_alt("K", "X")
    else:
        scan.add("X")
    scan.idx += 1
    return True


def ch_to_x(scan: "Scan") -> bool:
    """'approach', 'beach', 'dacha', 'macho', 'attach'."""
    if (
        (
            scan.at(-2, "OACH", "EACH", "EECH", "OUCH", "OOCH", "MUCH", "SUCH")
            and not scan.at(-3, "JOACH")
        )
        or scan.at_end(-1, "ACHA", "ACHO")
        or scan.at_end(0, "CHOT", "CHOD", "CHAT")
        or (scan.at_end(-1, "OCHE") and not scan.at(-2, "DOCHE"))
        or scan.at(-4, "ATTACH", "DETACH", "KOVACH", "PARACHUT")
        or scan.at(-5, "SPINACH", "MASSACHU")
        or scan.starts("MACHAU")
        # but not "ACHE"
        or (scan.at(-3, "THACH") and not scan.at(2, "E"))
        or scan.at(-2, "VACHON")
    ):
        scan.add("X")
        scan.idx += 1
        return True
    return False


def english_ch_to_k(scan: "Scan") -> bool:
    """'ache', 'echo', 'headache', the 'micheal' spelling of 'michael'."""
    word = scan.word
    if (
        (scan.idx == 1 and root_or_inflections(word, "ACHE"))
        or (
            (scan.idx > 3 and root_or_inflections(word[scan.idx - 1:], "ACHE"))
            and scan.starts("EAR", "HEAD", "BACK", "HEART", "BELLY", "TOOTH")
        )
        or scan.at(-1, "ECHO")
        or scan.at(-2, "MICHEAL")
        or scan.at(-4, "JERICHO")
        or scan.at(-5, "LEPRECH")
    ):
        scan.add_alt("K", "X")
        scan.idx += 1
        return True
    return False


def germanic_ch_to_k(scan: "Scan") -> bool:
    """Germanic "CH" => 'K', e.g. 'bach', 'brecht', 'fuchs', 'wachtler'."""
    if (
        (
            scan.idx > 1
            and not scan.vowel_at(-2)
            and scan.at(-1, "ACH")
            and not scan.at(-2, "MACHADO", "MACHUCA", "LACHANC", "LACHAPE", "KACHATU")
            and not scan.at(-3, "KHACHAT")
            and (
                not scan.char_at(2, "I")
                and (
                    not scan.char_at(2, "E")
                    or scan.at(-2, "BACHER", "MACHER", "MACHEN", "LACHER")
                )
            )
            # e.g. 'brecht', 'fuchs'; "LUNCHTIME" is excluded even though "WHICHSOEVER"
            # is longer than it
            or (scan.at(2, "T", "S") and not scan.starts("WHICHSOEVER", "LUNCHTIME"))
            # e.g. 'andromache'
            or scan.starts("SCHR")
            or (scan.idx > 2 and scan.at(-2, "MACHE"))
            or (scan.idx == 2 and scan.at(-2, "ZACH"))
            or scan.at(-4, "SCHACH")
            or scan.at(-1, "ACHEN")
            or scan.at(-3, "SPICH", "ZURCH", "BUECH")
            # "kirch" and "blech" both get 'X'
            or (
                scan.at(-3, "KIRCH", "JOACH", "BLECH", "MALCH")
                and not (scan.at(-3, "KIRCHNER") or scan.idx + 1 == scan.last)
            )
            or scan.at_end(-2, "NICH", "LICH", "BACH")
            or (
                scan.at_end(-3, "URICH", "BRICH", "ERICH", "DRICH", "NRICH")
                and not scan.at_end(-5, "ALDRICH")
                and not scan.at_end(-6, "GOODRICH")
                and not scan.at_end(-7, "GINGERICH")
            )
        )
        or scan.at_end(-4, "ULRICH", "LFRICH", "LLRICH", "EMRICH", "ZURICH", "EYRICH")
        # e.g. 'wachtler', 'wechsler', but not 'tichner'
        or (
            (scan.at(-1, "A", "O", "U", "E") or scan.idx == 0)
            and scan.at(2, "L", "R", "N", "M", "B", "H", "F", "V", "W", " ")
        )
    ):
        # "CHR-" / "CHL-" e.g. 'chris' get no 'X' alternate
        if scan.at(2, "R", "L") or scan.is_slavo_germanic():
            scan.add("K")
        else:
            scan.add_alt("K", "X")
        scan.idx += 1
        return True
    return False


def greek_ch_initial(scan: "Scan") -> bool:
    """Greek roots with "CH" at the start of the root, e.g. 'chemistry', 'chorus'."""
    if (
        (
            scan.at(0, *lexicon.GREEK_CH_INITIAL_6)
            or (
                scan.at(0, *lexicon.GREEK_CH_INITIAL_5)
                and not (scan.at(0, "CHEMIN") or scan.at(-2, "ANCHONDO"))
            )
            or (
                scan.at(0, "CHISM", "CHELI")
                # exclude spanish "machismo"
                and not (
                    scan.starts("MICHEL", "MACHISMO", "RICHELIEU", "REVANCHISM")
                    or scan.exact("CHISM")
                )
            )
            # e.g. "chorus", "chyme", "chaos"
            or (
                scan.at(0, "CHOR", "CHOL", "CHYM", "CHYL", "CHLO", "CHOS", "CHUS", "CHOE")
                and not scan.starts("CHOLLO", "CHOLLA", "CHORIZ")
            )
            # "chaos" => K but not "chao"
            or (scan.at(0, "CHAO") and scan.idx + 3 != scan.last)
            # e.g. "abranchiate"
            or (scan.at(0, "CHIA") and not scan.starts("CHIAPAS", "APPALACHIA"))
            or scan.at(0, "CHIMERA", "CHIMAER", "CHIMERI")
            # e.g. "chameleon"
            or scan.starts("CHAME", "CHELO", "CHITO")
            # e.g. "spirochete"
            or (
                (scan.idx + 4 == scan.last or scan.idx + 5 == scan.last)
                and scan.at(-1, "OCHETE")
            )
        )
        # "-CH-" => X after all, e.g. "chortle", "crocheter"
        and not (
            scan.exact("CHORE", "CHOLO", "CHOLA")
            or scan.at(0, "CHORT", "CHOSE")
            or scan.at(-3, "CROCHET")
            or scan.starts("CHEMISE", "CHARISE", "CHARISS", "CHAROLE")
        )
    ):
        if scan.at(2, "R", "L"):
            scan.add("K")
        else:
            scan.add_alt("K", "X")
        scan.idx += 1
        return True
    return False


def greek_ch_non_initial(scan: "Scan") -> bool:
    """Greek and other roots with "CH" inside, e.g. 'tachometer', 'orchid'."""
    if (
        scan.at(
            -2, "LYCHN", "TACHO", "ORCHO", "ORCHI", "LICHO", "ORCHID", "NICHOL",
            "MECHAN", "LICHEN", "MACHIC", "PACHEL", "RACHIF", "RACHID", "RACHIS",
            "RACHIC", "MICHAL", "ORCHESTR",
        )
        or scan.at(
            -3, "MELCH", "GLOCH", "TRACH", "TROCH", "BRACH", "SYNCH", "PSYCH",
            "STICH", "PULCH", "EPOCH",
        )
        or (scan.at(-3, "TRICH") and not scan.at(-5, "OSTRICH"))
        or (
            scan.at(
                -2, "TYCH", "TOCH", "BUCH", "MOCH", "CICH", "DICH", "NUCH", "EICH",
                "LOCH", "DOCH", "ZECH", "WYCH",
            )
            and not (scan.at(-4, "INDOCHINA") or scan.at(-2, "BUCHON"))
        )
        or ((scan.idx == 1 or scan.idx == 2) and scan.at(-1, "OCHER", "ECHIN", "ECHID"))
        or scan.at(
            -4, "BRONCH", "STOICH", "STRYCH", "TELECH", "PLANCH", "CATECH", "MANICH",
            "MALACH", "BIANCH", "DIDACH", "BRANCHIO", "BRANCHIF",
        )
        or scan.starts("ICHA", "ICHN")
        or (
            scan.at(-1, "ACHAB", "ACHAD", "ACHAN", "ACHAZ")
            and not scan.at(-2, "MACHADO", "LACHANC")
        )
        or scan.at(-1, *lexicon.GREEK_ACH_MEDIAL)
        # e.g. 'inchoate', 'ischemia'
        or (scan.idx == 2 and scan.starts("INCHOA") or scan.starts("ISCH"))
        # e.g. 'abimelech', 'antioch', 'pentateuch'
        or (
            scan.idx + 1 == scan.last
            and scan.at(-1, "A", "O", "U", "E")
            and not (
                scan.starts("DEBAUCH")
                or scan.at(-2, "MUCH", "SUCH", "KOCH")
                or scan.at(-5, "OODRICH", "ALDRICH")
            )
        )
    ):
        scan.add_alt("K", "X")
        scan.idx += 1
        return True
    return False


CH_RULES = (
    chae,
    ch_to_h,
    silent_ch,
    arch,
    ch_to_x,
    english_ch_to_k,
    germanic_ch_to_k,
    greek_ch_initial,
    greek_ch_non_initial,
)


def ch(scan: "Scan") -> bool:
    """"CH" in all its readings; 'X' unless one of the CH rules says otherwise."""
    if not scan.at(0, "CH"):
        return False

    if run_cascade(scan, CH_RULES):
        return True

    if scan.idx > 0:
        if scan.starts("MC") and scan.idx == 1:
            # e.g. "McHugh"
            scan.add("K")
        else:
            scan.add_alt("X", "K")
    else:
        scan.add("X")
    scan.idx += 1
    return True


# Double C and C + consonant


def ccia(scan: "Scan") -> bool:
    """Italian "-CCIA-", e.g. 'focaccia'."""
    if scan.at(1, "CIA"):
        scan.add_alt("X", "S")
        scan.idx += 1
        return True
    return False


def cc(scan: "Scan") -> bool:
    """Double 'C', but not in 'McClellan'."""
    if not (scan.at(0, "CC") and not (scan.idx == 1 and scan.word[0] == "M")):
        return False

    if scan.at(-3, "FLACCID"):
        scan.add("S")
        scan.advance(2, 1)
        return True

    # 'bacci', 'bertucci', other italian
    if scan.at_end(2, "I") or scan.at(2, "IO") or scan.at_end(2, "INO", "INI"):
        scan.add("X")
        scan.advance(2, 1)
        return True

    # 'accident', 'accede', 'succeed', but 'bacchus' and 'soccer' get K
    if scan.at(2, "I", "E", "Y") and not (scan.char_at(2, "H") or scan.at(-2, "SOCCER")):
        scan.add("KS")
        scan.advance(2, 1)
        return True

    # Pierce's rule
    scan.add("K")
    scan.idx += 1
    return True


def ck_cg_cq(scan: "Scan") -> bool:
    if not scan.at(0, "CK", "CG", "CQ"):
        return False

    # eastern european spelling e.g. 'gorecki' == 'goresky'
    if scan.at_end(0, "CKI", "CKY") and scan.length > 6:
        scan.add_alt("K", "SK")
    else:
        scan.add("K")
    scan.idx += 1
    # C[KGQ][KGQ]
    if scan.at(1, "K", "G", "Q"):
        scan.idx += 1
    return True


# 'C' before a front vowel


def british_silent_ce(scan: "Scan") -> bool:
    """English place names such as 'gloucester', pronounced glo-ster."""
    return scan.at_end(1, "ESTER") or scan.at(1, "ESTERSHIRE")


def ce(scan: "Scan") -> bool:
    """'ocean', 'rosacea', 'botticelli', 'concerto', 'cello'."""
    if (
        (scan.at(1, "EAN") and scan.vowel_at(-1))
        or (scan.at_end(-1, "ACEA") and not scan.starts("PANACEA"))
        or scan.at(1, "ELLI", "ERTO", "EORL")
        # italian names familiar to americans
        or scan.at_end(-3, "CROCE")
        or scan.at(-3, "DOLCE")
        or scan.at_end(1, "ELLO")
    ):
        scan.add_alt("X", "S")
        return True
    return False


def ci(scan: "Scan") -> bool:
    """'fettucini', 'medici', 'commercial', 'special', 'associate'."""
    # consonant before C, but the americanized 'mancini' gets S
    if (
        (scan.at_end(1, "INI") and not scan.exact("MANCINI"))
        or scan.at_end(-1, "ICI")
        or scan.at(-1, "RCIAL", "NCIAL", "RCIAN", "UCIUS")
        or scan.at(-3, "MARCIA")
        or scan.at(-2, "ANCIENT")
    ):
        scan.add_alt("X", "S")
        return True

    if scan.at(-4, "COERCION"):
        scan.add("J")
        return True

    # vowel before C
    if (scan.at(0, "CIO", "CIE", "CIA") and scan.vowel_at(-1)) or scan.at(1, "IAO"):
        if (
            scan.at(0, "CIAN", "CIAL", "CIAO", "CIES", "CIOL", "CION")
            # "glacier" => X but "spacier" => S
            or scan.at(-3, "GLACIER")
            or scan.at(0, "CIENT", "CIENC", "CIOUS", "CIATE", "CIATI", "CIATO", "CIABL", "CIARY")
            or scan.at_end(0, "CIA", "CIO", "CIAS", "CIOS")
        ) and not (
            scan.at(-4, "ASSOCIATION")
            or scan.starts("OCIE")
            # names usually from the spanish rather than the italian in america
            or scan.at(-2, "LUCIO", "SOCIO", "SOCIE", "MACIAS", "LUCIANO", "HACIENDA")
            or scan.at(-3, "GRACIE", "GRACIA", "MARCIANO")
            or scan.at(-4, "PALACIO", "POLICIES", "FELICIANO")
            or scan.at(-5, "MAURICIO")
            or scan.at(-6, "ANDALUCIA")
            or scan.at(-7, "ENCARNACION")
        ):
            scan.add_alt("X", "S")
        else:
            scan.add_alt("S", "X")
        return True

    return False


def latinate_suffixes(scan: "Scan") -> bool:
    """"-CEOUS", "-CIOUS"."""
    if scan.at(1, "EOUS", "IOUS"):
        scan.add_alt("X", "S")
        return True
    return False


FRONT_VOWEL_RULES = (british_silent_ce, ce, ci, latinate_suffixes)


def c_front_vowel(scan: "Scan") -> bool:
    """'C' before E, I or Y: mostly 'S', sometimes 'X'."""
    if not scan.at(0, "CI", "CE", "CY"):
        return False

    if not run_cascade(scan, FRONT_VOWEL_RULES):
        scan.add("S")
    scan.advance(1, 0)
    return True


def silent_c(scan: "Scan") -> bool:
    """'indict', 'tucson', 'connecticut'."""
    return scan.at(1, "T", "S") and scan.starts("INDICT", "TUCSON", "CONNECTICUT")


def cz(scan: "Scan") -> bool:
    """Slavic "-CZ-", e.g. 'czech'; 'czar' gets S."""
    if scan.at(1, "Z") and not scan.at(-1, "ECZEMA"):
        if scan.at(0, "CZAR"):
            scan.add("S")
        else:
            scan.add("X")
        scan.idx += 1
        return True
    return False


def cs(scan: "Scan") -> bool:
    """Hungarian "-CS", so 'kovacs' matches 'kovach'."""
    if scan.starts("KOVACS"):
        scan.add_alt("KS", "X")
        scan.idx += 1
        return True

    if scan.at_end(-1, "ACS") and not scan.at(-4, "ISAACS"):
        scan.add("X")
        scan.idx += 1
        return True
    return False


RULES = (
    silent_c_at_beginning,
    ca_to_s,
    co_to_s,
    ch,
    ccia,
    cc,
    ck_cg_cq,
    c_front_vowel,
    silent_c,
    cz,
    cs,
)


def encode(scan: "Scan") -> None:
    if run_cascade(scan, RULES):
        return

    if not scan.at(-1, "C", "K", "G", "Q"):
        scan.add("K")

    # names written 'mac caffrey', 'mac gregor'
    if scan.at(1, " C", " Q", " G"):
        scan.idx += 1
    elif scan.at(1, "C", "K", "Q") and not scan.at(1, "CE", "CI"):
        scan.idx += 1
        # e.g. 'rockcliffe'
        if scan.at(1, "C", "K", "Q") and not scan.at(2, "CE", "CI"):
            scan.idx += 1
