"""The dual index: match key → frequency record and match key → affect record.

Built once from parsed dataset rows, then only read. Every row is indexed
under each of its full-mode match keys; when two source words share a key the
first one inserted keeps it and later ones are dropped for that key.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .expander import KeyMode, expand_keys
from .models import AffectRecord, FrequencyRecord
from .normalizer import canonicalize

log = logging.getLogger(__name__)


@dataclass
class IndexStats:
    rows:       int = 0
    keys:       int = 0
    collisions: int = 0


class DualIndex:
    """
    Read-only lookup tables over the two reference datasets.

    Attributes:
        vocabulary  — canonical source words, frequency rows first, load order
        fold_alef   — whether آ → ا keys were generated
        freq_stats  — row/key/collision counts for the frequency table
        affect_stats — same for the affect table
    """

    def __init__(self, fold_alef: bool = True):
        self.fold_alef    = fold_alef
        self._frequency:  dict[str, FrequencyRecord] = {}
        self._affect:     dict[str, AffectRecord]    = {}
        self._vocabulary: dict[str, None]            = {}
        self.freq_stats   = IndexStats()
        self.affect_stats = IndexStats()

    # ── Build ─────────────────────────────────────────────────────────────────

    @classmethod
    def build(
        cls,
        frequency_rows: Iterable[tuple[str, FrequencyRecord]],
        affect_rows:    Iterable[tuple[str, AffectRecord]],
        fold_alef:      bool = True,
    ) -> "DualIndex":
        index = cls(fold_alef=fold_alef)
        index._insert_all(frequency_rows, index._frequency, index.freq_stats)
        index._insert_all(affect_rows, index._affect, index.affect_stats)
        log.info(
            "Index built: %d frequency keys (%d rows), %d affect keys (%d rows)",
            index.freq_stats.keys, index.freq_stats.rows,
            index.affect_stats.keys, index.affect_stats.rows,
        )
        return index

    def _insert_all(self, rows, table: dict, stats: IndexStats) -> None:
        for word, record in rows:
            canon = canonicalize(word)
            if not canon:
                continue
            stats.rows += 1
            self._vocabulary.setdefault(canon, None)
            for key in expand_keys(canon, KeyMode.FULL, fold=self.fold_alef):
                if key in table:
                    if table[key] is not record:
                        stats.collisions += 1
                    continue
                table[key] = record
                stats.keys += 1

    # ── Lookup ────────────────────────────────────────────────────────────────

    def lookup_frequency(self, key: str) -> Optional[FrequencyRecord]:
        return self._frequency.get(key)

    def lookup_affect(self, key: str) -> Optional[AffectRecord]:
        return self._affect.get(key)

    @property
    def vocabulary(self) -> list[str]:
        return list(self._vocabulary)

    def __len__(self) -> int:
        return len(self._vocabulary)
