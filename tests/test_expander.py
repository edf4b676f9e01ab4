from lexicon_pipeline.expander import KeyMode, collapse, expand_keys
from lexicon_pipeline.normalizer import ZWNJ, canonicalize

SPACED = "هدف مند"
JOINED = "هدف" + ZWNJ + "مند"


def test_empty_word_has_no_keys():
    assert expand_keys("") == ()


def test_identity_comes_first():
    keys = expand_keys(SPACED)
    assert keys[0] == SPACED


def test_full_mode_covers_space_and_joiner_spellings():
    keys = expand_keys(SPACED)
    assert "هدفمند" in keys
    assert JOINED in keys

    joined_keys = expand_keys(JOINED)
    assert "هدفمند" in joined_keys


def test_fast_mode_is_a_subset_without_joiner_conversion():
    fast = expand_keys(SPACED, KeyMode.FAST)
    assert fast == (SPACED, "هدفمند")
    assert set(fast) <= set(expand_keys(SPACED, KeyMode.FULL))


def test_mode_accepts_plain_strings():
    assert expand_keys(SPACED, "fast") == expand_keys(SPACED, KeyMode.FAST)


def test_alef_fold_is_configurable():
    assert "اب" in expand_keys("آب")
    assert "اب" not in expand_keys("آب", fold=False)
    assert expand_keys("آب", fold=False) == ("آب",)


def test_alef_fold_combines_with_collapsing():
    keys = expand_keys("آب" + ZWNJ + "انبار")
    assert "ابانبار" in keys
    assert "آبانبار" in keys


def test_keys_are_unique_and_canonical():
    words = (
        SPACED,
        JOINED,
        "آب" + ZWNJ + "انبار کوچک",
        "دل",
        "ب " + ZWNJ + "ها",
        ZWNJ + " " + ZWNJ + "ب",
        "ب " + ZWNJ,
    )
    for word in words:
        assert canonicalize(word) == word
        keys = expand_keys(word)
        assert len(keys) == len(set(keys))
        assert word in keys
        for key in keys:
            assert canonicalize(key) == key


def test_collapse_drops_spaces_and_joiners():
    assert collapse("آب " + ZWNJ + "انبار") == "آبانبار"


def test_separator_next_to_joiner_gives_tidy_keys():
    keys = expand_keys("ب " + ZWNJ + "ها")
    assert "ب" + ZWNJ + "ها" in keys
    assert "ب" + ZWNJ + ZWNJ + "ها" not in keys

    edge_keys = expand_keys("ب " + ZWNJ)
    assert "ب" in edge_keys
    assert "ب " not in edge_keys
