# Record types — typed shapes every dataset row is mapped into at load time.
#
# Records are frozen: the index hands the same instance to every query, so
# nothing downstream may mutate one.

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional


class AffectSource(str, Enum):
    HUMAN        = "Human"
    EXTRAPOLATED = "Extrapolated"


@dataclass(frozen=True)
class FrequencyRecord:
    per_million: float
    zipf:        Optional[float] = None


@dataclass(frozen=True)
class AffectRecord:
    valence:      Optional[float] = None
    arousal:      Optional[float] = None
    dominance:    Optional[float] = None
    concreteness: Optional[float] = None
    source:       AffectSource    = AffectSource.HUMAN


@dataclass(frozen=True)
class ResolvedEntry:
    """
    Everything known about one word.

    Attributes:
        word      — canonical form of the query
        frequency — frequency record, or None
        affect    — affect record, or None
        matched   — True when at least one of the two was found
    """

    word:      str
    frequency: Optional[FrequencyRecord] = None
    affect:    Optional[AffectRecord]    = None

    @property
    def matched(self) -> bool:
        return self.frequency is not None or self.affect is not None

    @property
    def zipf(self) -> Optional[float]:
        return self.frequency.zipf if self.frequency else None

    def to_dict(self) -> dict:
        """JSON-ready view; the affect source is emitted as its label."""
        affect = None
        if self.affect is not None:
            affect = asdict(self.affect)
            affect["source"] = self.affect.source.value
        return {
            "word":      self.word,
            "matched":   self.matched,
            "frequency": asdict(self.frequency) if self.frequency else None,
            "affect":    affect,
        }
