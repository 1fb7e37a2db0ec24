"""Vowel classification, vowel-run skipping and the vowel encoding path.

All vowels encode to the same marker 'A'. An initial vowel is always
encoded; later vowels only when the encoder was asked to encode vowels, and
then at most once per run of vowels. Most of the work here is deciding when a
non-initial 'E' is silent.
"""

from typing import TYPE_CHECKING

from . import lexicon
from .errors import EncoderInvariantError

if TYPE_CHECKING:
    from .encoder import Scan

VOWELS = frozenset(
    "AEIOUY"
    "ÀÁÂÃÄÅÆ"
    "ÈÉÊË"
    "ÌÍÎÏ"
    "ÒÓÔÕÖØ"
    "ÙÚÛÜÝ"
    "\uc29f\uc28c"  # kept from the reference vowel table
)


def is_vowel(char: str) -> bool:
    return char in VOWELS


def skip_vowels(scan: "Scan", at: int) -> int:
    """Find the end of the vowel run starting at ``at``.

    'W' counts as part of the run, and so does the 'H' of "WH" unless it
    begins a word like "HOUSE" or "HEAD". The run stops short of slavic
    endings such as "-WICZ" or "-OWSKI" so the 'W' there gets encoded.

    Args:
        scan: Current scan state.
        at: Absolute position to start skipping from.

    Returns:
        Index of the last character in the run, so that the control loop's
        increment lands on the next consonant.
    """
    if at < 0:
        return 0
    if at >= scan.length:
        return scan.length

    current = scan.word[at]
    off = at - scan.idx

    while is_vowel(current) or current == "W":
        if (
            scan.at(off, "WICZ", "WITZ", "WIAK")
            or scan.at(off - 1, "EWSKI", "EWSKY", "OWSKI", "OWSKY")
            or scan.at_end(off, "WICKI", "WACKI")
        ):
            break

        off += 1
        if (
            scan.char_at(off - 1, "W")
            and scan.char_at(off, "H")
            and not scan.at(
                off, "HOP", "HIDE", "HARD", "HEAD", "HAWK", "HERD", "HOOK",
                "HAND", "HOLE", "HEART", "HOUSE", "HOUND", "HAMMER",
            )
        ):
            off += 1

        if scan.idx + off > scan.last:
            break

        current = scan.word[scan.idx + off]

    if off < 1:
        raise EncoderInvariantError(
            f"vowel skip moved backwards in {scan.word!r} at {scan.idx}"
        )

    return scan.idx + off - 1


def encode_vowel(scan: "Scan") -> None:
    """Encode the vowel under the cursor and skip the rest of its run."""
    if scan.idx == 0:
        # all initial vowels map to 'A'
        scan.add("A")
    elif scan.config.encode_vowels:
        if not scan.char_at(0, "E"):
            if _skip_silent_ue(scan) or _silent_o(scan):
                return
            scan.add("A")
        else:
            _encode_e(scan)

    if not (not scan.vowel_at(-2) and scan.at(-1, "LEWA", "LEWO", "LEWI")):
        scan.idx = skip_vowels(scan, scan.idx + 1)


def _skip_silent_ue(scan: "Scan") -> bool:
    # always silent except for the cases listed
    if (
        (
            scan.at(-1, "QUE", "GUE")
            and not scan.starts(
                "RISQUE", "PIROGUE", "ENRIQUE", "BARBEQUE", "PALENQUE",
                "APPLIQUE", "COMMUNIQUE",
            )
            and not scan.at(-3, "ARGUE", "SEGUE")
        )
        and scan.idx > 1
        and (scan.idx + 1 == scan.last or scan.starts("JACQUES"))
    ):
        scan.idx = skip_vowels(scan, scan.idx)
        return True
    return False


def _silent_o(scan: "Scan") -> bool:
    # "iron" at beginning or end of word, but not "ironic"
    if scan.char_at(0, "O") and scan.at(-2, "IRON"):
        if (scan.starts("IRON") or scan.at_end(-2, "IRON")) and not scan.at(-2, "IRONIC"):
            return True
    return False


def _encode_e(scan: "Scan") -> None:
    """Non-initial 'E' when vowels are encoded."""
    # two pronunciations: 'agape', 'lame', 'resume'
    if scan.exact("LAME", "SAKE", "PATE", "AGAPE") or (
        scan.starts("RESUME") and scan.idx == 5
    ):
        scan.add_alt(None, "A")
        return

    # "inge" => 'INGA', 'INJ'
    if scan.exact("INGE"):
        scan.add_alt("A", None)
        return

    # the '-D' is pronounced differently in each reading
    if scan.idx == 5 and scan.starts("BLESSED", "LEARNED"):
        scan.add_exact_approx_alt("D", "AD", "T", "AT")
        scan.idx += 1
        return

    if (
        not e_silent(scan) and not scan.al_inversion and not silent_internal_e(scan)
    ) or e_pronounced_exception(scan):
        scan.add("A")

    # the -LE / -RE transposition only applies to the vowel right after it
    scan.al_inversion = False


def e_silent(scan: "Scan") -> bool:
    """Final 'E', 'E' before a final S or D, and -NESS / -LESS / -LY."""
    if e_pronounced_at_end(scan):
        return False

    return (
        scan.idx == scan.last
        # plural 's' or past tense 'd', e.g. 'grapes', 'banished'
        or (
            scan.idx > 1
            and scan.idx + 1 == scan.last
            and scan.at(1, "S", "D")
            # but not 'nested', 'rises', 'pieces'
            and not (
                scan.at(-1, "TED", "SES", "CES")
                or scan.starts(*lexicon.E_PRONOUNCED_BEFORE_FINAL_D)
            )
        )
        # 'wholeness', 'boneless', 'barely'
        or scan.at_end(1, "NESS", "LESS")
        or (scan.at_end(1, "LY") and not scan.starts("CICELY"))
    )


def e_pronounced_at_end(scan: "Scan") -> bool:
    """Final 'E' that is pronounced, mostly in loanwords and short words."""
    return scan.idx == scan.last and (
        scan.at(-6, "STROPHE")
        # a vowel before the 'E' would already have been skipped,
        # so consonant + 'E' needs the 'E' pronounced
        or scan.length == 2
        or (scan.length == 3 and not scan.vowel_at(-scan.idx))
        # german name endings that reliably pronounce the 'E'
        or (
            scan.at_end(
                -2, "BKE", "DKE", "FKE", "KKE", "LKE", "NKE", "MKE", "PKE",
                "TKE", "VKE", "ZKE",
            )
            and not scan.starts("FINKE", "FUNKE", "FRANKE")
        )
        or scan.at_end(-4, "SCHKE")
        or scan.exact(*lexicon.E_PRONOUNCED_AT_END)
    )


def silent_internal_e(scan: "Scan") -> bool:
    """'E' closing the first root of a compound, e.g. 'olesen', 'bridgewater'."""
    return (
        (scan.starts("OLE") and _e_suffix(scan, 3))
        or (scan.starts(*lexicon.SILENT_E_ROOTS_4) and _e_suffix(scan, 4))
        or (scan.starts(*lexicon.SILENT_E_ROOTS_5) and _e_suffix(scan, 5))
        or (scan.starts(*lexicon.SILENT_E_ROOTS_6) and _e_suffix(scan, 6))
        or scan.at(-5, "CHARLES")
    )


def _e_suffix(scan: "Scan", root_length: int) -> bool:
    """Whether what follows a compound root of ``root_length`` keeps the 'E' silent."""
    rel = -scan.idx + root_length
    if (
        scan.idx == root_length - 1
        and scan.length > root_length + 1
        and (
            scan.vowel_at(rel + 1)
            or (scan.at(rel, "ST", "SL") and scan.length > root_length + 2)
        )
    ):
        # endings where the 'E' is pronounced after all,
        # e.g. 'bridgewood', 'bridgette', 'olena'
        if scan.at_end(rel, *lexicon.E_PRONOUNCING_SUFFIXES):
            return False
        return True
    return False


def e_pronounced_exception(scan: "Scan") -> bool:
    """'E' pronounced where the silent-E tests would drop it."""
    return (
        (
            scan.idx + 1 == scan.last
            and (
                # greek names e.g. 'herakles', hispanic names e.g. 'robles'
                scan.at_end(-3, "OCLES", "ACLES", "AKLES")
                or scan.starts(*lexicon.E_PRONOUNCED_BEFORE_FINAL_S)
            )
        )
        or scan.at(-2, "FRED", "DGES", "DRED", "GNES")
        or scan.at(-5, "PROBLEM", "RESPLEN")
        or scan.at(-4, "REPLEN")
        or scan.at(-3, "SPLE")
    )
