from lexicon_pipeline import Lexicon
from lexicon_pipeline.expander import KeyMode
from lexicon_pipeline.index import DualIndex
from lexicon_pipeline.models import AffectRecord, AffectSource, FrequencyRecord
from lexicon_pipeline.normalizer import ZWNJ
from lexicon_pipeline.resolver import Resolver


def _resolver(freq=(), affect=(), **kwargs):
    fold = kwargs.pop("fold_alef", True)
    return Resolver(DualIndex.build(freq, affect, fold_alef=fold), **kwargs)


def test_space_query_finds_joiner_entry():
    resolver = _resolver([("هدف" + ZWNJ + "مند", FrequencyRecord(12.5))])
    entry = resolver.resolve("هدف مند")
    assert entry.frequency.per_million == 12.5
    assert entry.matched
    assert entry.word == "هدف مند"


def test_arabic_spelling_finds_persian_entry():
    resolver = _resolver([("کتاب", FrequencyRecord(250.0))])
    assert resolver.resolve("\u0643\u062a\u0627\u0628").matched


def test_yeh_sequence_rescue():
    resolver = _resolver([("بئی", FrequencyRecord(1.5))])
    assert resolver.resolve("بیی").frequency.per_million == 1.5
    assert resolver.resolve("یبب").frequency is None


def test_rescue_never_applies_to_affect():
    resolver = _resolver([], [("بئی", AffectRecord(valence=5.0))])
    entry = resolver.resolve("بیی")
    assert entry.affect is None
    assert not entry.matched


def test_direct_hit_beats_rescue():
    direct, rescued = FrequencyRecord(9.0), FrequencyRecord(1.0)
    resolver = _resolver([("پایز", direct), ("پائز", rescued)])
    assert resolver.resolve("پایز").frequency is direct


def test_frequency_and_affect_are_independent():
    resolver = _resolver(
        [("دل", FrequencyRecord(310.0))],
        [("شاد", AffectRecord(valence=8.0))],
    )
    only_freq = resolver.resolve("دل")
    assert only_freq.frequency is not None and only_freq.affect is None
    only_affect = resolver.resolve("شاد")
    assert only_affect.frequency is None and only_affect.affect.valence == 8.0
    assert only_affect.matched


def test_extrapolated_affect_row(affect_file, frequency_file):
    lexicon = Lexicon()
    lexicon.load(frequency_file, affect_file)
    affect = lexicon.resolve("دلتنگ").affect
    assert affect.source is AffectSource.EXTRAPOLATED
    assert affect.valence == 5.1


def test_empty_input_is_unmatched():
    resolver = _resolver([("دل", FrequencyRecord(1.0))])
    for raw in ("", "   ", None, "\u064b"):
        entry = resolver.resolve(raw)
        assert not entry.matched
        assert entry.frequency is None and entry.affect is None


def test_alef_rescue_is_opt_in():
    freq = [("آب", FrequencyRecord(40.0))]
    assert _resolver(freq, fold_alef=False).resolve("اب").frequency is None
    rescued = _resolver(freq, fold_alef=False, rescue_alef=True).resolve("اب")
    assert rescued.frequency.per_million == 40.0


def test_alef_fold_matches_without_rescue():
    resolver = _resolver([("آب", FrequencyRecord(40.0))])
    assert resolver.resolve("اب").frequency.per_million == 40.0


def test_fast_mode_still_matches_collapsed_compounds():
    resolver = _resolver([("هدف" + ZWNJ + "مند", FrequencyRecord(12.5))])
    assert resolver.resolve("هدف مند", KeyMode.FAST).matched


def test_to_dict():
    resolver = _resolver(
        [("دل", FrequencyRecord(310.0, 5.5))],
        [("دل", AffectRecord(valence=7.0, source=AffectSource.EXTRAPOLATED))],
    )
    data = resolver.resolve("دل").to_dict()
    assert data["matched"] is True
    assert data["frequency"] == {"per_million": 310.0, "zipf": 5.5}
    assert data["affect"]["source"] == "Extrapolated"
    assert data["affect"]["arousal"] is None
