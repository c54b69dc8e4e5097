from __future__ import annotations
from collections import Counter
import numpy as np
import pytest

from review_terms.dtm.matrix import build_dtm, histogram


@pytest.fixture
def dtm():
    return build_dtm([Counter(a=2, b=1), Counter(), Counter(b=3)])


def test_histogram_ignores_empty_tokens():
    assert histogram(["a", "", "a", "b"]) == Counter(a=2, b=1)


def test_shape_and_vocabulary(dtm):
    assert dtm.shape == (3, 2)
    assert dtm.n_docs == 3
    assert dtm.vocabulary == ("a", "b")
    assert dtm.doc_ids == (0, 1, 2)


def test_mapping_keeps_empty_rows(dtm):
    assert dtm.to_mapping() == {0: {"a": 2, "b": 1}, 1: {}, 2: {"b": 3}}
    assert dtm.row(2) == {"b": 3}


def test_frequencies(dtm):
    np.testing.assert_array_equal(dtm.document_frequency(), [1, 2])
    np.testing.assert_array_equal(dtm.column_totals(), [2, 4])
    assert dtm.total() == 6


def test_zero_counts_are_not_materialized():
    m = build_dtm([{"a": 0, "b": 1}])
    assert m.vocabulary == ("b",)
    assert m.counts.nnz == 1


def test_all_empty_documents():
    m = build_dtm([Counter(), Counter()])
    assert m.shape == (2, 0)
    assert m.to_mapping() == {0: {}, 1: {}}
    assert m.document_frequency().size == 0
    assert m.total() == 0


def test_select_columns(dtm):
    only_b = dtm.select_columns(np.array([False, True]))
    assert only_b.vocabulary == ("b",)
    assert only_b.to_mapping() == {0: {"b": 1}, 1: {}, 2: {"b": 3}}
    none = dtm.select_columns(np.array([False, False]))
    assert none.shape == (3, 0)


def test_to_frame(dtm):
    df = dtm.to_frame()
    assert df.index.name == "doc_id"
    assert list(df.columns) == ["a", "b"]
    assert df.loc[0, "a"] == 2
    assert df.loc[1].sum() == 0


def test_to_long(dtm):
    assert dtm.to_long() == [(0, "a", 2), (0, "b", 1), (2, "b", 3)]


def test_custom_doc_ids():
    m = build_dtm([Counter(x=1), Counter(y=1)], doc_ids=[10, 11])
    assert m.to_mapping() == {10: {"x": 1}, 11: {"y": 1}}


def test_doc_id_count_mismatch():
    with pytest.raises(ValueError):
        build_dtm([Counter(x=1)], doc_ids=[0, 1])
