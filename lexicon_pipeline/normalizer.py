# Persian text canonicalization
# Maps every spelling of a word that differs only in letterforms, diacritics
# or joiner code points onto one canonical form. Steps run in a fixed order;
# later steps assume the earlier ones already ran.

import re

ZWNJ = "\u200c"
NBSP = "\u00a0"

_WHITESPACE = re.compile(r"\s+")

# Arabic Yeh / Alef Maksura and Arabic Kaf → Persian letters
_ARABIC_TO_PERSIAN = str.maketrans({
    "\u064a": "\u06cc",   # ي → ی
    "\u0649": "\u06cc",   # ى → ی
    "\u0643": "\u06a9",   # ك → ک
})

# Heh with hamza above and Teh Marbuta → Heh
_HEH_VARIANTS = str.maketrans({
    "\u06c0": "\u0647",   # ۀ → ه
    "\u0629": "\u0647",   # ة → ه
})

# Hamza on Waw → Waw; Alef with hamza above/below and Alef Wasla → Alef.
# آ (Alef with madda) is kept: folding it is a match-key decision.
# ئ is never touched here.
_HAMZA_CARRIERS = str.maketrans({
    "\u0624": "\u0648",   # ؤ → و
    "\u0623": "\u0627",   # أ → ا
    "\u0625": "\u0627",   # إ → ا
    "\u0671": "\u0627",   # ٱ → ا
})

# Tashkeel, superscript alef and Quranic annotation marks
_DIACRITICS = re.compile("[\u0610-\u061a\u064b-\u065f\u0670\u06d6-\u06ed]")

# ZWJ, zero-width space, word joiner and BOM all stand in for a ZWNJ
_JOINERS = re.compile("[\u200b\u200c\u200d\u2060\ufeff]+")


def _collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def tidy(text: str) -> str:
    """Collapse whitespace and joiner runs, trim the edges. Letters are untouched."""
    return _JOINERS.sub(ZWNJ, _collapse_whitespace(text))


def canonicalize(raw) -> str:
    """
    Return the canonical form of ``raw``.

    ``None`` and non-string input give ``""``. The result is idempotent:
    canonicalize(canonicalize(x)) == canonicalize(x).
    """
    if not raw or not isinstance(raw, str):
        return ""

    text = raw.replace(NBSP, " ")
    text = _collapse_whitespace(text)

    text = text.translate(_ARABIC_TO_PERSIAN)
    text = text.translate(_HEH_VARIANTS)
    text = text.translate(_HAMZA_CARRIERS)

    # A stripped mark can leave two spaces side by side (or a space at an edge)
    stripped = _DIACRITICS.sub("", text)
    if stripped != text:
        text = _collapse_whitespace(stripped)

    return _JOINERS.sub(ZWNJ, text)
