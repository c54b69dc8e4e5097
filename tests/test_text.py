from __future__ import annotations
import string
import pytest

from review_terms.utils.text import (
    case_fold,
    collapse_whitespace,
    fuse_negation,
    is_punctuation,
    normalize,
    remove_stopwords,
    strip_punctuation,
    tokenize,
)

SAMPLES = [
    "Great dress, not great fit.",
    "Love this dress!!  Fits perfectly",
    "I did NOT like it... at all",
    "Not bad, not bad at all",
    "Soft—fabric “lovely” color",
    "price: $49.99 (on sale) #bargain",
    "",
    "   ",
]


def test_strip_punctuation_concatenates_neighbours():
    assert strip_punctuation("Great dress, not great fit.") == "Great dress not great fit"
    assert strip_punctuation("well-made") == "wellmade"


def test_strip_punctuation_unicode():
    assert strip_punctuation("“quoted” — dash…") == "quoted  dash"


def test_strip_punctuation_removes_every_ascii_punct():
    out = strip_punctuation("a" + string.punctuation + "b")
    assert out == "ab"


def test_fuse_negation_is_case_sensitive():
    assert fuse_negation("not good, not bad") == "notgood, notbad"
    assert fuse_negation("Not good") == "Not good"
    assert fuse_negation("good not") == "good not"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("a  b", "a b"),
        ("a b", "a b"),
        ("a   b", "a  b"),
        ("a    b", "a  b"),
        ("a     b", "a b"),
    ],
)
def test_collapse_whitespace_fixed_width_passes(raw, expected):
    assert collapse_whitespace(raw) == expected


def test_case_fold():
    assert case_fold("Love THIS") == "love this"


def test_remove_stopwords():
    assert remove_stopwords("love this dress", {"this"}) == "love dress"
    assert remove_stopwords("this the", {"this", "the"}) == ""
    assert remove_stopwords("", {"this"}) == ""


def test_remove_stopwords_keeps_other_whitespace():
    assert remove_stopwords("fits  perfectly", {"this"}) == "fits  perfectly"
    assert remove_stopwords("love this  dress", {"this"}) == "love  dress"
    assert remove_stopwords("a\tthe\tb\nc", {"the"}) == "a\tb\nc"
    assert remove_stopwords("  this dress ", {"this"}) == "dress"


def test_remove_stopwords_matches_whole_tokens_only():
    assert remove_stopwords("thistle this", {"this"}) == "thistle"
    assert remove_stopwords("it its", {"it"}) == "its"


def test_normalize_keeps_partial_collapse():
    assert normalize("fits    perfectly") == "fits  perfectly"
    assert normalize("Love this dress!!  Fits    perfectly", {"this"}) == "love dress fits  perfectly"


def test_tokenize_empty_and_runs():
    assert tokenize("") == []
    assert tokenize("  a   b \t c\n") == ["a", "b", "c"]


def test_normalize_example():
    sw = {"great", "this"}
    assert normalize("Great dress, not great fit.", sw) == "dress notgreat fit"
    assert normalize("Love this dress!", sw) == "love dress"


def test_negation_fusion_yields_single_token():
    assert tokenize(normalize("not good", {"the"})) == ["notgood"]


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_idempotent(text, english_stopwords):
    once = normalize(text, english_stopwords)
    assert normalize(once, english_stopwords) == once


@pytest.mark.parametrize("text", SAMPLES)
def test_no_punctuation_survives(text, english_stopwords):
    out = normalize(text, english_stopwords)
    assert not any(is_punctuation(ch) for ch in out)


def test_all_stopwords_normalizes_to_empty(english_stopwords):
    assert normalize("It is what it is.", english_stopwords) == ""


def test_long_space_runs_are_not_idempotent():
    once = normalize("fits    perfectly")
    assert once == "fits  perfectly"
    assert normalize(once) == "fits perfectly"


def test_uppercase_not_suffix_breaks_idempotence(english_stopwords):
    # fusion is case-sensitive and runs before case folding
    once = normalize("KNOT tied", english_stopwords)
    assert once == "knot tied"
    assert normalize(once, english_stopwords) == "knottied"


def test_capitalised_not_breaks_idempotence_when_kept():
    once = normalize("Not x", {"the"})
    assert once == "not x"
    assert normalize(once, {"the"}) == "notx"
