# Ranking utilities: match tiers, Zipf ordering, optional bigram similarity.

from __future__ import annotations

from typing import Optional

from .config import MISSING_ZIPF
from .expander import collapse
from .models import ResolvedEntry

EXACT, PREFIX, SUBSTRING, FUZZY = 0, 1, 2, 3


def match_tier(word: str, query: str) -> Optional[int]:
    """
    Best tier reached by *word* for *query*, or None if it does not match.

    Both are canonical forms; each is also compared in its whitespace/joiner
    collapsed spelling so "هدف مند" finds "هدف‌مند".
    """
    if not word or not query:
        return None
    best = None
    for w in {word, collapse(word)}:
        for q in {query, collapse(query)}:
            if not q:
                continue
            if w == q:
                return EXACT
            if w.startswith(q):
                tier = PREFIX
            elif q in w:
                tier = SUBSTRING
            else:
                continue
            best = tier if best is None else min(best, tier)
    return best


def _bigrams(s: str) -> set:
    s = collapse(s)
    return {s[i:i + 2] for i in range(len(s) - 1)} if len(s) >= 2 else {s}


def bigram_similarity(a: str, b: str) -> float:
    """
    Character-bigram Jaccard similarity between two strings.
    Fast and tolerant of a letter or two of difference.
    """
    bg_a, bg_b = _bigrams(a), _bigrams(b)
    if not bg_a or not bg_b:
        return 0.0
    return len(bg_a & bg_b) / len(bg_a | bg_b)


class ContainmentFilter:
    """Default candidate filter: equals / starts-with / contains."""

    def tier(self, word: str, query: str) -> Optional[int]:
        return match_tier(word, query)


class BigramFilter(ContainmentFilter):
    """
    Containment first; words that fail it but reach *threshold* bigram
    similarity join as a fourth tier after the substring matches.
    """

    def __init__(self, threshold: float):
        self.threshold = threshold

    def tier(self, word: str, query: str) -> Optional[int]:
        tier = match_tier(word, query)
        if tier is None and bigram_similarity(word, query) >= self.threshold:
            return FUZZY
        return tier


def zipf_or_floor(entry: ResolvedEntry) -> float:
    zipf = entry.zipf
    return MISSING_ZIPF if zipf is None else zipf


def rank(scored: list[tuple[int, ResolvedEntry]]) -> list[ResolvedEntry]:
    """
    Order (tier, entry) pairs: lower tier first, then higher Zipf.
    The sort is stable, so ties keep candidate order.
    """
    ordered = sorted(scored, key=lambda pair: (pair[0], -zipf_or_floor(pair[1])))
    return [entry for _, entry in ordered]
