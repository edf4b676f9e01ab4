# engine.py
# Search engine and lexicon facade — orchestrates all pipeline stages.
#
#   load     — datasets.load_reference_data() builds the DualIndex (both tables
#              in parallel); a failure leaves the facade unloaded
#   resolve  — canonicalize → match keys → dual index (+ frequency rescue)
#   search   — first-character bucket → containment filter → resolve → rank
#   analyze  — bulk list, de-duplicated, each word resolved independently
#
# Nothing here mutates shared state after load, so one Lexicon can serve
# many overlapping queries.

from __future__ import annotations

import logging
import time
from typing import Iterable, Optional

from .batch import analyze as analyze_words
from .config import BATCH_WORKERS, FOLD_ALEF, FUZZY_THRESHOLD, RESCUE_ALEF, SEARCH_RESULT_CAP
from .datasets import LoadReport, Source, load_reference_data
from .display import process_farsi_text
from .errors import DataUnavailableError
from .expander import KeyMode
from .index import DualIndex
from .models import AffectRecord, FrequencyRecord, ResolvedEntry
from .normalizer import canonicalize
from .ranking import BigramFilter, ContainmentFilter, rank
from .resolver import Resolver

log = logging.getLogger(__name__)

EMPTY_BUCKET = "#"


def bucket_key(word: str) -> str:
    return word[0] if word else EMPTY_BUCKET


# ── Search engine ─────────────────────────────────────────────────────────────

class SearchEngine:
    """
    Ranked prefix/substring search over the indexed vocabulary.

    Candidates come from the bucket of words sharing the query's first
    character; the whole vocabulary is scanned only when that bucket is
    empty. Results rank exact > prefix > substring, then by descending Zipf.
    """

    def __init__(
        self,
        resolver:      Resolver,
        vocabulary:    Optional[Iterable[str]] = None,
        result_cap:    int                     = SEARCH_RESULT_CAP,
        match_filter:  Optional[ContainmentFilter] = None,
    ):
        self.resolver     = resolver
        self.result_cap   = result_cap
        self.match_filter = match_filter or ContainmentFilter()
        if vocabulary is None:
            vocabulary = resolver.index.vocabulary
        self._vocabulary: list[str] = list(vocabulary)
        self._buckets:    dict[str, list[str]] = {}
        for word in self._vocabulary:
            self._buckets.setdefault(bucket_key(word), []).append(word)

    # ── Public API ────────────────────────────────────────────────────────────

    def search(
        self,
        query:   str,
        entries: Optional[Iterable[str]] = None,
        limit:   Optional[int]           = None,
        verbose: bool                    = False,
    ) -> list[ResolvedEntry]:
        """
        Return the ranked, de-duplicated matches for *query*.

        Args:
            query   — raw user text
            entries — optional explicit word pool, scanned in full instead
                      of the bucketed vocabulary
            limit   — smaller per-call cap; never exceeds the engine's cap
        """
        t0 = time.time()
        canon_query = canonicalize(query)
        if not canon_query:
            return []

        pool = self._candidates(canon_query) if entries is None else entries

        scored, seen = [], set()
        for word in pool:
            canon = canonicalize(word)
            if not canon or canon in seen:
                continue
            tier = self.match_filter.tier(canon, canon_query)
            if tier is None:
                continue
            seen.add(canon)
            entry = self.resolver.resolve_canonical(canon, KeyMode.FULL)
            if entry.matched:
                scored.append((tier, entry))

        cap = self.result_cap if limit is None else min(limit, self.result_cap)
        results = rank(scored)[:max(cap, 0)]

        if verbose:
            self._log_results(canon_query, results, time.time() - t0)
        return results

    def _candidates(self, canon_query: str) -> list[str]:
        bucket = self._buckets.get(bucket_key(canon_query))
        return bucket if bucket else self._vocabulary

    # ── Logging helpers ───────────────────────────────────────────────────────

    def _log_results(self, query: str, results: list[ResolvedEntry], elapsed: float) -> None:
        print(process_farsi_text(f"\n🔎 Query : {query}"))
        print(f"Top {len(results)} results  ({elapsed:.3f}s)\n")
        for rank_no, entry in enumerate(results, 1):
            freq = entry.frequency
            line = f"  #{rank_no}  {entry.word}"
            if freq is not None:
                zipf = "—" if freq.zipf is None else f"{freq.zipf:.3f}"
                line += f"  pm={freq.per_million:.3f}  zipf={zipf}"
            if entry.affect is not None:
                line += f"  [{entry.affect.source.value}]"
            print(process_farsi_text(line))


# ── Lexicon facade ────────────────────────────────────────────────────────────

class Lexicon:
    """
    Entry point for callers: load once, then resolve / search / analyze.

    Every query method raises DataUnavailableError until a load succeeds.
    """

    def __init__(
        self,
        fold_alef:       bool            = FOLD_ALEF,
        rescue_alef:     bool            = RESCUE_ALEF,
        fuzzy_threshold: Optional[float] = FUZZY_THRESHOLD,
        result_cap:      int             = SEARCH_RESULT_CAP,
        batch_workers:   int             = BATCH_WORKERS,
    ):
        self.fold_alef       = fold_alef
        self.rescue_alef     = rescue_alef
        self.fuzzy_threshold = fuzzy_threshold
        self.result_cap      = result_cap
        self.batch_workers   = batch_workers
        self.report: Optional[LoadReport] = None
        self._resolver: Optional[Resolver]     = None
        self._engine:   Optional[SearchEngine] = None

    # ── Load ──────────────────────────────────────────────────────────────────

    def load(self, frequency_source: Source, affect_source: Source) -> LoadReport:
        """
        Load both reference tables and swap in the new index.

        Raises ReferenceDataError on failure; a previous index stays in use.
        """
        index, report = load_reference_data(frequency_source, affect_source, fold_alef=self.fold_alef)
        self._install(index)
        self.report = report
        return report

    @classmethod
    def from_rows(
        cls,
        frequency_rows: Iterable[tuple[str, FrequencyRecord]] = (),
        affect_rows:    Iterable[tuple[str, AffectRecord]]    = (),
        **options,
    ) -> "Lexicon":
        """Build a loaded Lexicon straight from parsed rows."""
        lexicon = cls(**options)
        lexicon._install(DualIndex.build(frequency_rows, affect_rows, fold_alef=lexicon.fold_alef))
        return lexicon

    def _install(self, index: DualIndex) -> None:
        match_filter = (
            BigramFilter(self.fuzzy_threshold) if self.fuzzy_threshold is not None
            else ContainmentFilter()
        )
        resolver = Resolver(index, rescue_alef=self.rescue_alef)
        self._engine = SearchEngine(resolver, result_cap=self.result_cap, match_filter=match_filter)
        self._resolver = resolver
        log.info("Lexicon ready: %d words", len(index))

    @property
    def is_loaded(self) -> bool:
        return self._resolver is not None

    @property
    def index(self) -> DualIndex:
        return self._require().index

    def _require(self) -> Resolver:
        if self._resolver is None:
            raise DataUnavailableError()
        return self._resolver

    # ── Queries ───────────────────────────────────────────────────────────────

    def resolve(self, word) -> ResolvedEntry:
        return self._require().resolve(word, KeyMode.FULL)

    def search(
        self,
        query:   str,
        entries: Optional[Iterable[str]] = None,
        limit:   Optional[int]           = None,
        verbose: bool                    = False,
    ) -> list[ResolvedEntry]:
        self._require()
        return self._engine.search(query, entries=entries, limit=limit, verbose=verbose)

    def analyze(self, words: Iterable[str] | str, fast: bool = True) -> list[ResolvedEntry]:
        return analyze_words(words, self._require(), fast=fast, workers=self.batch_workers)
