"""Last-resort Yeh / Yeh-with-hamza rewrites for frequency lookups.

Match keys never touch ی/ئ because a blanket swap merges unrelated words.
These rules fire only after every key missed the frequency index, and only
for the narrow positional patterns below. The affect index never sees them.
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from .expander import ALEF, ALEF_MADDA

YEH       = "\u06cc"   # ی
YEH_HAMZA = "\u0626"   # ئ


def yeh_sequence_to_hamza(word: str) -> Optional[str]:
    """یی after the first letter → ئی."""
    i = word.find(YEH + YEH, 1)
    if i < 0:
        return None
    return word[:i] + YEH_HAMZA + word[i + 1:]


def _single_medial(word: str, char: str) -> Optional[int]:
    if word.count(char) != 1:
        return None
    i = word.index(char)
    if i == 0 or i == len(word) - 1:
        return None
    return i


def single_medial_yeh_to_hamza(word: str) -> Optional[str]:
    i = _single_medial(word, YEH)
    if i is None:
        return None
    return word[:i] + YEH_HAMZA + word[i + 1:]


def single_medial_hamza_to_yeh(word: str) -> Optional[str]:
    i = _single_medial(word, YEH_HAMZA)
    if i is None:
        return None
    return word[:i] + YEH + word[i + 1:]


def hamza_sequence_to_yeh(word: str) -> Optional[str]:
    """ئی after the first letter → یی."""
    i = word.find(YEH_HAMZA + YEH, 1)
    if i < 0:
        return None
    return word[:i] + YEH + word[i + 1:]


def initial_alef_to_madda(word: str) -> Optional[str]:
    """ا at the start of the word → آ. Opt-in: it merges unrelated words."""
    if not word.startswith(ALEF):
        return None
    return ALEF_MADDA + word[1:]


RESCUE_RULES: tuple[Callable[[str], Optional[str]], ...] = (
    yeh_sequence_to_hamza,
    single_medial_yeh_to_hamza,
    single_medial_hamza_to_yeh,
    hamza_sequence_to_yeh,
)


def rescue_candidates(word: str, alef: bool = False) -> Iterator[str]:
    """Yield each applicable rewrite of *word*, in rule order."""
    rules = RESCUE_RULES + ((initial_alef_to_madda,) if alef else ())
    for rule in rules:
        candidate = rule(word)
        if candidate is not None and candidate != word:
            yield candidate
