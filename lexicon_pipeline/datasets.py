# Dataset access layer — all reference-data I/O lives here.
#
# Two tables feed the index:
#   frequency — TSV or CSV: word, per-million frequency, optional Zipf value
#   affect    — RFC 4180 CSV: word, dataset label, four human-rated measures
#               and their extrapolated (EBW_*) counterparts
#
# Rows are mapped eagerly into FrequencyRecord / AffectRecord. A bad row is
# skipped and counted; a bad *table* (unreadable, empty, no word column)
# raises DatasetError. Both tables load concurrently and any failure surfaces
# as a single ReferenceDataError.

from __future__ import annotations

import csv
import io
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import requests

from .config import FETCH_TIMEOUT, FOLD_ALEF
from .errors import DatasetError, ReferenceDataError
from .index import DualIndex
from .models import AffectRecord, AffectSource, FrequencyRecord

log = logging.getLogger(__name__)

Source = Union[str, Path]

EXTRAPOLATED_SENTINEL = "XXX"
MEASURES = ("valence", "arousal", "dominance", "concreteness")

# Header aliases, compared after lower-casing and trimming
FREQUENCY_COLUMNS = {
    "word":        ("word", "words", "token", "form", "واژه", "کلمه"),
    "per_million": ("per_million", "permillion", "per million", "freq_per_million",
                    "frequency_per_million", "fpm", "frequency", "freq"),
    "zipf":        ("zipf", "zipf_value", "zipf_frequency", "zipf frequency"),
}

AFFECT_COLUMNS = {
    "word":    ("word", "words", "token", "واژه", "کلمه"),
    "dataset": ("dataset", "source", "data_set"),
    **{m: (m,) for m in MEASURES},
    **{f"ebw_{m}": (f"ebw_{m}", f"extrapolated_{m}", f"ebw {m}") for m in MEASURES},
}


@dataclass
class TableReport:
    """Outcome of parsing one table."""
    name:    str
    source:  str
    rows:    int = 0
    skipped: int = 0


@dataclass
class LoadReport:
    frequency: TableReport
    affect:    TableReport
    keys:      dict = field(default_factory=dict)


# ── Reading ───────────────────────────────────────────────────────────────────

def _is_url(source: Source) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def read_source(source: Source, name: str, timeout: float = FETCH_TIMEOUT) -> str:
    """Return the decoded text of a local file or an http(s) URL."""
    try:
        if _is_url(source):
            resp = requests.get(source, timeout=timeout)
            resp.raise_for_status()
            text = resp.content.decode("utf-8-sig")
        else:
            text = Path(source).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError, requests.RequestException) as exc:
        raise DatasetError(name, f"cannot read {source}: {exc}") from exc

    if not text.strip():
        raise DatasetError(name, f"{source} is empty")
    return text


# ── Cell helpers ──────────────────────────────────────────────────────────────

def parse_number(value) -> Optional[float]:
    """Float value of a cell, or None for blanks, text, NaN and infinities."""
    if value is None:
        return None
    value = str(value).strip().replace("\u066b", ".")
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _resolve_columns(header: list[str], aliases: dict) -> dict[str, int]:
    """Map logical column name → position, first matching header cell wins."""
    cleaned = [h.strip().lower() for h in header]
    positions = {}
    for name, names in aliases.items():
        for i, cell in enumerate(cleaned):
            if cell in names:
                positions[name] = i
                break
    return positions


def _cell(row: list[str], pos: Optional[int]) -> str:
    if pos is None or pos >= len(row):
        return ""
    return row[pos]


# ── Frequency table ───────────────────────────────────────────────────────────

def parse_frequency_table(
    text: str,
    name: str = "frequency",
) -> tuple[list[tuple[str, FrequencyRecord]], int]:
    """
    Parse the frequency table.

    The delimiter is a tab when the first line has one, else a comma. A file
    whose first row already carries a number in its second cell has no
    header and is read positionally as ``word, per_million[, zipf]``.

    Returns:
        (rows, skipped) — rows are (raw word, record) pairs in file order
    """
    first_line = next((line for line in text.splitlines() if line.strip()), "")
    delimiter = "\t" if "\t" in first_line else ","
    quoting = csv.QUOTE_NONE if delimiter == "\t" else csv.QUOTE_MINIMAL
    reader = [
        r for r in csv.reader(io.StringIO(text), delimiter=delimiter, quoting=quoting)
        if any(c.strip() for c in r)
    ]
    if not reader:
        raise DatasetError(name, "no rows")

    first = reader[0]
    headerless = len(first) > 1 and parse_number(first[1]) is not None
    if headerless:
        cols, body = {"word": 0, "per_million": 1, "zipf": 2}, reader
    else:
        cols, body = _resolve_columns(first, FREQUENCY_COLUMNS), reader[1:]
        if "word" not in cols:
            raise DatasetError(name, f"missing word column in header {first}")
        if "per_million" not in cols:
            raise DatasetError(name, f"missing per-million column in header {first}")

    rows, skipped = [], 0
    for line_no, row in enumerate(body, 1 if headerless else 2):
        word = _cell(row, cols["word"]).strip()
        per_million = parse_number(_cell(row, cols["per_million"]))
        if not word or per_million is None:
            log.debug("%s: skipping line %d (%r)", name, line_no, row)
            skipped += 1
            continue
        zipf = parse_number(_cell(row, cols.get("zipf")))
        rows.append((word, FrequencyRecord(per_million=per_million, zipf=zipf)))
    return rows, skipped


# ── Affect table ──────────────────────────────────────────────────────────────

def parse_affect_table(
    text: str,
    name: str = "affect",
) -> tuple[list[tuple[str, AffectRecord]], int]:
    """
    Parse the affect-norms CSV.

    Rows labelled with the ``XXX`` dataset sentinel are extrapolated: their
    four measures come from the EBW_* columns and the human columns on that
    row are ignored. Rows with no usable measure at all are skipped.
    """
    reader = csv.reader(io.StringIO(text))
    header = next(reader, None)
    if not header:
        raise DatasetError(name, "no header row")

    cols = _resolve_columns(header, AFFECT_COLUMNS)
    if "word" not in cols:
        raise DatasetError(name, f"missing word column in header {header}")

    rows, skipped = [], 0
    for line_no, row in enumerate(reader, 2):
        if not any(c.strip() for c in row):
            continue
        word = _cell(row, cols["word"]).strip()
        extrapolated = _cell(row, cols.get("dataset")).strip() == EXTRAPOLATED_SENTINEL
        prefix = "ebw_" if extrapolated else ""
        values = {m: parse_number(_cell(row, cols.get(prefix + m))) for m in MEASURES}

        if not word or all(v is None for v in values.values()):
            log.debug("%s: skipping line %d (%r)", name, line_no, row)
            skipped += 1
            continue

        source = AffectSource.EXTRAPOLATED if extrapolated else AffectSource.HUMAN
        rows.append((word, AffectRecord(source=source, **values)))
    return rows, skipped


# ── Load phase ────────────────────────────────────────────────────────────────

def _load_table(parse, source: Source, name: str, timeout: float):
    text = read_source(source, name, timeout)
    try:
        rows, skipped = parse(text, name)
    except csv.Error as exc:
        raise DatasetError(name, f"malformed table: {exc}") from exc
    report = TableReport(name=name, source=str(source), rows=len(rows), skipped=skipped)
    log.info("%s: %d rows parsed, %d skipped (%s)", name, report.rows, skipped, source)
    return rows, report


def load_reference_data(
    frequency_source: Source,
    affect_source:    Source,
    fold_alef:        bool  = FOLD_ALEF,
    timeout:          float = FETCH_TIMEOUT,
) -> tuple[DualIndex, LoadReport]:
    """
    Read both tables concurrently and build the index.

    Raises:
        ReferenceDataError — if either table failed; lists every failure
    """
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="lexicon-load") as pool:
        futures = {
            "frequency": pool.submit(_load_table, parse_frequency_table, frequency_source, "frequency", timeout),
            "affect":    pool.submit(_load_table, parse_affect_table, affect_source, "affect", timeout),
        }

    results, errors = {}, []
    for name, future in futures.items():
        try:
            results[name] = future.result()
        except DatasetError as exc:
            errors.append(exc)

    if errors:
        log.error("Reference data load failed: %s", "; ".join(str(e) for e in errors))
        raise ReferenceDataError(errors)

    (freq_rows, freq_report), (affect_rows, affect_report) = results["frequency"], results["affect"]
    index = DualIndex.build(freq_rows, affect_rows, fold_alef=fold_alef)
    report = LoadReport(
        frequency=freq_report,
        affect=affect_report,
        keys={"frequency": index.freq_stats.keys, "affect": index.affect_stats.keys},
    )
    return index, report
