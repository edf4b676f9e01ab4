"""Bulk word-list analysis."""

from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from .expander import KeyMode
from .models import ResolvedEntry
from .normalizer import canonicalize
from .resolver import Resolver

# Newline, tab, comma, Arabic comma, semicolon, Arabic semicolon.
# Spaces are kept: a pasted line may be a multi-word compound.
_SEPARATORS = re.compile(r"[\r\n\t,;\u060c\u061b]+")


def split_words(text: str) -> list[str]:
    """Split pasted bulk input into raw word strings, blanks dropped."""
    if not text:
        return []
    return [part.strip() for part in _SEPARATORS.split(text) if part.strip()]


def unique_canonical(words: Iterable[str]) -> list[str]:
    """Canonicalize *words*, drop empties, keep the first of each form."""
    seen, out = set(), []
    for word in words:
        canon = canonicalize(word)
        if canon and canon not in seen:
            seen.add(canon)
            out.append(canon)
    return out


def analyze(
    words:    Iterable[str] | str,
    resolver: Resolver,
    fast:     bool = True,
    workers:  int  = 1,
) -> list[ResolvedEntry]:
    """
    Resolve every distinct word of a bulk list.

    *words* is an iterable of words or one pasted block of text. Each word is
    resolved on its own, so *workers* > 1 spreads the work over a thread
    pool; the output always follows the de-duplicated input order.
    """
    if isinstance(words, str):
        words = split_words(words)
    canon_words = unique_canonical(words)
    mode = KeyMode.FAST if fast else KeyMode.FULL

    if workers <= 1 or len(canon_words) < 2:
        return [resolver.resolve_canonical(w, mode) for w in canon_words]

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="lexicon-batch") as pool:
        return list(pool.map(lambda w: resolver.resolve_canonical(w, mode), canon_words))
