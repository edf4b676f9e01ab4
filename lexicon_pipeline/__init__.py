"""Persian word lookup: frequency statistics and affect ratings despite spelling variation."""

from .config import AFFECT_PATH, FREQUENCY_PATH
from .engine import Lexicon, SearchEngine
from .errors import DataUnavailableError, DatasetError, LexiconError, ReferenceDataError
from .expander import KeyMode, expand_keys
from .index import DualIndex
from .models import AffectRecord, AffectSource, FrequencyRecord, ResolvedEntry
from .normalizer import canonicalize
from .resolver import Resolver

__all__ = [
    "AFFECT_PATH",
    "FREQUENCY_PATH",
    "Lexicon",
    "SearchEngine",
    "DataUnavailableError",
    "DatasetError",
    "LexiconError",
    "ReferenceDataError",
    "KeyMode",
    "expand_keys",
    "DualIndex",
    "AffectRecord",
    "AffectSource",
    "FrequencyRecord",
    "ResolvedEntry",
    "canonicalize",
    "Resolver",
]
