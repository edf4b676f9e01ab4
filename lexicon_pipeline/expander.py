from __future__ import annotations

import re
from enum import Enum

from .normalizer import ZWNJ, tidy

ALEF_MADDA = "\u0622"   # آ
ALEF       = "\u0627"   # ا

_WHITESPACE = re.compile(r"\s+")


class KeyMode(str, Enum):
    """
    How many alternate spellings to derive per word.

    FULL — every combination of the whitespace/joiner variants with the
           alef fold; used to build the index and for single-word lookups.
    FAST — identity, no-spaces and no-joiners only (plus their alef fold);
           cheaper for batch analysis, misses a few joiner/space crossovers.
    """

    FULL = "full"
    FAST = "fast"


# ── Single derivations ────────────────────────────────────────────────────────

def remove_spaces(word: str) -> str:
    return _WHITESPACE.sub("", word)


def remove_joiners(word: str) -> str:
    return word.replace(ZWNJ, "")


def collapse(word: str) -> str:
    """Drop both whitespace and joiners."""
    return remove_joiners(remove_spaces(word))


def spaces_to_joiner(word: str) -> str:
    return _WHITESPACE.sub(ZWNJ, word)


def fold_alef(word: str) -> str:
    return word.replace(ALEF_MADDA, ALEF)


_FULL_DERIVATIONS = (
    lambda w: w,
    remove_spaces,
    remove_joiners,
    collapse,
    spaces_to_joiner,
)

_FAST_DERIVATIONS = (
    lambda w: w,
    remove_spaces,
    remove_joiners,
)


# ── Public API ────────────────────────────────────────────────────────────────

def expand_keys(
    word:      str,
    mode:      KeyMode = KeyMode.FULL,
    fold:      bool    = True,
) -> tuple[str, ...]:
    """
    Return the match keys of the canonical form *word*, identity first.

    The result is ordered and free of duplicates; callers scan it in order
    and stop at the first hit. An empty *word* gives an empty tuple.
    """
    if not word:
        return ()

    derivations = _FULL_DERIVATIONS if KeyMode(mode) is KeyMode.FULL else _FAST_DERIVATIONS
    # Removing or converting a separator can leave edge spaces or joiner runs
    variants = [tidy(derive(word)) for derive in derivations]
    if fold:
        variants += [fold_alef(v) for v in variants]

    seen, keys = set(), []
    for key in variants:
        if key and key not in seen:
            seen.add(key)
            keys.append(key)
    return tuple(keys)
