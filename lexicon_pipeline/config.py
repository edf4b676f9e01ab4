# Runtime configuration — every value can be overridden through a LEXICON_* env var.
#
# Values are read once at import time. Malformed overrides fall back to the
# default silently so a typo in the environment never blocks the load phase.

import os


def env_str(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    return value if value not in (None, "") else default


def env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    return default


def env_float(name: str, default: float | None) -> float | None:
    try:
        return float(os.environ[name])
    except (KeyError, ValueError):
        return default


def env_int(name: str, default: int) -> int:
    try:
        return int(os.environ[name])
    except (KeyError, ValueError):
        return default


# ── Reference datasets ────────────────────────────────────────────────────────

FREQUENCY_PATH = env_str("LEXICON_FREQUENCY_PATH", "data/word_frequencies_public.tsv")
AFFECT_PATH    = env_str("LEXICON_AFFECT_PATH",    "data/affect_norms.csv")
FETCH_TIMEOUT  = env_float("LEXICON_FETCH_TIMEOUT", 30.0)

# ── Matching ──────────────────────────────────────────────────────────────────

# Fold آ to ا inside match keys. Merges e.g. "آب"/"اب" — more recall, some
# unrelated words collapse onto one key.
FOLD_ALEF   = env_flag("LEXICON_FOLD_ALEF", True)

# Word-initial ا → آ as a last frequency rescue. Off: known false positives.
RESCUE_ALEF = env_flag("LEXICON_RESCUE_ALEF", False)

# ── Search ────────────────────────────────────────────────────────────────────

SEARCH_RESULT_CAP = env_int("LEXICON_SEARCH_RESULT_CAP", 250)
MISSING_ZIPF      = -999.0
FUZZY_THRESHOLD   = env_float("LEXICON_FUZZY_THRESHOLD", None)   # None = disabled

# ── Batch analysis ────────────────────────────────────────────────────────────

BATCH_WORKERS = env_int("LEXICON_BATCH_WORKERS", 1)

# ── HTTP API ──────────────────────────────────────────────────────────────────

API_HOST = env_str("LEXICON_API_HOST", "0.0.0.0")
API_PORT = env_int("LEXICON_API_PORT", 5000)
