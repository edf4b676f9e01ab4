import pytest

from lexicon_pipeline.normalizer import ZWNJ, canonicalize


def test_arabic_letters_become_persian():
    assert canonicalize("\u0643\u062a\u0627\u0628") == "کتاب"        # ك → ک
    assert canonicalize("\u0639\u0644\u064a") == "\u0639\u0644\u06cc"   # ي → ی
    assert canonicalize("\u0645\u0648\u0633\u0649") == "\u0645\u0648\u0633\u06cc"   # ى → ی


def test_heh_variants():
    assert canonicalize("خان\u06c0") == "خانه"
    assert canonicalize("مدرس\u0629") == "مدرسه"


def test_hamza_carriers_and_alef_variants():
    assert canonicalize("م\u0624من") == "مومن"
    assert canonicalize("\u0623حمد") == "احمد"
    assert canonicalize("\u0625سلام") == "اسلام"
    assert canonicalize("\u0671لله") == "الله"


def test_yeh_hamza_and_alef_madda_are_kept():
    assert canonicalize("پا\u0626یز") == "پا\u0626یز"
    assert canonicalize("آب") == "آب"


def test_diacritics_are_stripped():
    assert canonicalize("ک\u0650تاب") == "کتاب"
    assert canonicalize("م\u064fح\u064eم\u0651د") == "محمد"


def test_whitespace_is_collapsed_and_trimmed():
    assert canonicalize("  هدف \u00a0  مند \n") == "هدف مند"


def test_joiner_variants_unify():
    assert canonicalize("هدف\u200dمند") == "هدف" + ZWNJ + "مند"
    assert canonicalize("هدف\u200c\u200cمند") == "هدف" + ZWNJ + "مند"
    assert canonicalize("هدف\ufeffمند") == "هدف" + ZWNJ + "مند"


@pytest.mark.parametrize("value", [None, "", "   ", 123, ["کتاب"]])
def test_invalid_or_empty_input_gives_empty_string(value):
    assert canonicalize(value) == ""


@pytest.mark.parametrize("raw", [
    "\u0643\u062a\u0627\u0628 \u0648 \u0642\u0644\u0645",
    "  هدف\u200dمند  ",
    "a \u064b b",
    "\u064b کتاب",
    "خان\u06c0\u00a0\u0645\u0646",
    "پا\u0626یز\u200b",
    "\u0623\u064e\u0628",
])
def test_idempotent(raw):
    once = canonicalize(raw)
    assert canonicalize(once) == once
