"""Word → ResolvedEntry.

Frequency and affect are resolved independently: the first match key that
hits each table wins. Only the frequency table falls back to the rescue
rules, and only after every key missed.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import RESCUE_ALEF
from .expander import KeyMode, expand_keys
from .index import DualIndex
from .models import FrequencyRecord, ResolvedEntry
from .normalizer import canonicalize
from .rescue import rescue_candidates

log = logging.getLogger(__name__)


class Resolver:
    """
    Stateless lookups over a built DualIndex; safe to share between threads.

    Args:
        index       — the loaded DualIndex
        rescue_alef — also try the word-initial ا → آ rescue
    """

    def __init__(self, index: DualIndex, rescue_alef: bool = RESCUE_ALEF):
        self.index       = index
        self.rescue_alef = rescue_alef

    def resolve(self, raw_word, mode: KeyMode = KeyMode.FULL) -> ResolvedEntry:
        canon = canonicalize(raw_word)
        if not canon:
            return ResolvedEntry(word="")
        return self.resolve_canonical(canon, mode)

    def resolve_canonical(self, canon: str, mode: KeyMode = KeyMode.FULL) -> ResolvedEntry:
        """Resolve a word that is already in canonical form."""
        frequency = affect = None
        for key in expand_keys(canon, mode, fold=self.index.fold_alef):
            if frequency is None:
                frequency = self.index.lookup_frequency(key)
            if affect is None:
                affect = self.index.lookup_affect(key)
            if frequency is not None and affect is not None:
                break

        if frequency is None:
            frequency = self._rescue_frequency(canon)

        return ResolvedEntry(word=canon, frequency=frequency, affect=affect)

    def _rescue_frequency(self, canon: str) -> Optional[FrequencyRecord]:
        for candidate in rescue_candidates(canon, alef=self.rescue_alef):
            record = self.index.lookup_frequency(candidate)
            if record is not None:
                log.debug("rescued %r via %r", canon, candidate)
                return record
        return None
