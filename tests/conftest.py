"""Shared fixtures: small reference tables written to ``tmp_path``."""

from __future__ import annotations

import pytest

from lexicon_pipeline import Lexicon
from lexicon_pipeline.models import AffectRecord, AffectSource, FrequencyRecord

ZWNJ = "\u200c"

FREQUENCY_TSV = (
    "word\tper_million\tzipf\n"
    f"هدف\u200cمند\t12.5\t4.1\n"
    "کتاب\t250.0\t5.4\n"
    "دل\t310.2\t5.5\n"
    "دلتنگ\t8.0\t3.9\n"
    "بئی\t1.5\t\n"
    "\t3.0\t2.0\n"
    "خراب\tabc\t1.0\n"
)

AFFECT_CSV = (
    "Word,Dataset,Valence,Arousal,Dominance,Concreteness,"
    "EBW_Valence,EBW_Arousal,EBW_Dominance,EBW_Concreteness\n"
    "کتاب,Human,6.2,3.1,5.5,4.8,,,,\n"
    "دلتنگ,XXX,9.0,9.0,9.0,9.0,5.1,4.2,3.3,2.4\n"
    "\"شاد, خوشحال\",Human,8.1,,,,,,,\n"
    ",Human,1,1,1,1,,,,\n"
    "خالی,Human,,,,,,,,\n"
)


@pytest.fixture
def frequency_file(tmp_path):
    path = tmp_path / "frequency.tsv"
    path.write_text(FREQUENCY_TSV, encoding="utf-8")
    return path


@pytest.fixture
def affect_file(tmp_path):
    path = tmp_path / "affect.csv"
    path.write_text(AFFECT_CSV, encoding="utf-8")
    return path


@pytest.fixture
def lexicon(frequency_file, affect_file):
    lex = Lexicon()
    lex.load(frequency_file, affect_file)
    return lex


@pytest.fixture
def small_lexicon():
    """Lexicon built straight from records, no files involved."""
    freq = [
        ("دل",    FrequencyRecord(310.2, 5.5)),
        ("دلتنگ", FrequencyRecord(8.0, 3.9)),
        ("آدل",   FrequencyRecord(0.4, 6.0)),
        ("کتاب",  FrequencyRecord(250.0, 5.4)),
    ]
    affect = [
        ("کتاب", AffectRecord(6.2, 3.1, 5.5, 4.8, AffectSource.HUMAN)),
    ]
    return Lexicon.from_rows(freq, affect)
