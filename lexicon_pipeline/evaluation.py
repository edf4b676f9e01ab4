# Coverage metrics over a batch of resolved entries.
# Pass the output of batch.analyze() to coverage_summary() for the totals and
# the mean ratings the bulk-analysis view reports.

from __future__ import annotations

import numpy as np

from .models import AffectSource, ResolvedEntry

MEASURES = ("valence", "arousal", "dominance", "concreteness")


def _mean(values: list) -> float | None:
    """
    nanmean of the known values, rounded to 3 places.
    Returns None when none of them is known.
    """
    arr = np.array([v for v in values if v is not None], dtype=float)
    if arr.size == 0:
        return None
    return round(float(np.nanmean(arr)), 3)


def coverage_summary(entries: list[ResolvedEntry]) -> dict:
    """
    Summarise a batch result.

    Example:
        3 words, 2 with frequency, 1 with an extrapolated affect record →
        {"total": 3, "matched": 2, "frequency_hits": 2, "affect_hits": 1,
         "human": 0, "extrapolated": 1, "match_rate": 0.667, ...}
    """
    total     = len(entries)
    matched   = sum(1 for e in entries if e.matched)
    freq_hits = [e for e in entries if e.frequency is not None]
    affects   = [e.affect for e in entries if e.affect is not None]

    summary = {
        "total":          total,
        "matched":        matched,
        "frequency_hits": len(freq_hits),
        "affect_hits":    len(affects),
        "human":          sum(1 for a in affects if a.source is AffectSource.HUMAN),
        "extrapolated":   sum(1 for a in affects if a.source is AffectSource.EXTRAPOLATED),
        "match_rate":     round(matched / total, 3) if total else 0.0,
        "mean_zipf":      _mean([e.frequency.zipf for e in freq_hits]),
    }
    for measure in MEASURES:
        summary[f"mean_{measure}"] = _mean([getattr(a, measure) for a in affects])
    return summary
