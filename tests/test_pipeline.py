from __future__ import annotations
import pytest

from review_terms.analytics.sink import AnalyticsSink
from review_terms.errors import ConfigError, InputError
from review_terms.pipeline.build import run_from_config, run_pipeline
from review_terms.pipeline.context import TermFrequency
from review_terms.pipeline.executors import partitions
from review_terms.policies.loader import NormalizationConfig, normalization_config

QUIET = {"progress": False}


def test_end_to_end_example(example_texts, example_config):
    result = run_pipeline(example_texts, example_config, execution=QUIET)
    assert [d.normalized_text for d in result.documents] == ["dress notgreat fit", "love dress"]
    assert result.ranking[0] == TermFrequency("dress", 2, 2)
    assert [tf.as_pair() for tf in result.ranking] == [
        ("dress", 2), ("fit", 1), ("love", 1), ("notgreat", 1),
    ]
    assert result.pruned.vocabulary == result.dtm.vocabulary


def test_full_chain_keeps_partial_whitespace_collapse():
    cfg = NormalizationConfig(stopwords=frozenset())
    result = run_pipeline(["fits    perfectly"], cfg, execution=QUIET)
    doc = result.documents[0]
    assert doc.normalized_text == "fits  perfectly"
    assert doc.tokens == ("fits", "perfectly")


def test_row_count_includes_empty_documents(english_stopwords):
    cfg = NormalizationConfig(stopwords=english_stopwords)
    result = run_pipeline(["", "The a.", "good product"], cfg, execution=QUIET)
    assert result.dtm.n_docs == 3
    assert result.pruned.n_docs == 3
    assert result.pruned.to_mapping()[0] == {}
    assert result.documents[1].tokens == ()


def test_all_documents_empty_is_not_an_error(english_stopwords):
    cfg = NormalizationConfig(stopwords=english_stopwords)
    result = run_pipeline(["The.", "it is", "!!!"], cfg, execution=QUIET)
    assert result.ranking == []
    assert result.dtm.shape == (3, 0)


def test_threshold_removing_everything(example_config):
    cfg = NormalizationConfig(stopwords=frozenset(), sparse_threshold=0.1)
    result = run_pipeline(["alpha", "beta", "gamma"], cfg, execution=QUIET)
    assert result.ranking == []
    assert result.pruned.n_docs == 3


def test_zero_documents_rejected(example_config):
    with pytest.raises(InputError):
        run_pipeline([], example_config)


def test_non_string_rejected(example_config):
    with pytest.raises(InputError):
        run_pipeline(["ok", None], example_config)


def test_unknown_mode(example_texts, example_config):
    with pytest.raises(ConfigError):
        run_pipeline(example_texts, example_config, execution={"mode": "gpu"})


def test_deterministic(reviews, english_stopwords):
    cfg = NormalizationConfig(stopwords=english_stopwords, sparse_threshold=0.9)
    a = run_pipeline(reviews, cfg, execution=QUIET)
    b = run_pipeline(list(reviews), cfg, execution=QUIET)
    assert a.ranking == b.ranking
    assert a.pruned.to_mapping() == b.pruned.to_mapping()


def test_grand_total(reviews, english_stopwords):
    cfg = NormalizationConfig(stopwords=english_stopwords, sparse_threshold=0.8)
    result = run_pipeline(reviews, cfg, execution=QUIET)
    assert sum(tf.total_count for tf in result.ranking) == result.pruned.total()


@pytest.mark.parametrize("mode", ["threads", "processes"])
def test_pooled_modes_match_local(mode, reviews, english_stopwords):
    cfg = NormalizationConfig(stopwords=english_stopwords, sparse_threshold=0.95)
    local = run_pipeline(reviews, cfg, execution=QUIET)
    pooled = run_pipeline(
        reviews, cfg,
        execution={"mode": mode, "workers": 3, "partition_size": 2, "progress": False},
    )
    assert pooled.documents == local.documents
    assert pooled.dtm.to_mapping() == local.dtm.to_mapping()
    assert pooled.ranking == local.ranking


def test_ray_mode_matches_local(reviews, english_stopwords):
    pytest.importorskip("ray")
    cfg = NormalizationConfig(stopwords=english_stopwords, sparse_threshold=0.95)
    local = run_pipeline(reviews, cfg, execution=QUIET)
    distributed = run_pipeline(reviews, cfg, execution={"mode": "ray", "partition_size": 3})
    assert distributed.ranking == local.ranking


def test_partitions_cover_exactly_once():
    parts = partitions(7, 3)
    assert parts == [(0, 3), (3, 6), (6, 7)]
    assert partitions(0, 3) == []
    with pytest.raises(ConfigError):
        partitions(5, 0)


def test_top_k(reviews, english_stopwords):
    cfg = NormalizationConfig(stopwords=english_stopwords)
    result = run_pipeline(reviews, cfg, top_k=3, execution=QUIET)
    assert len(result.ranking) == 3
    assert result.top(1) == result.ranking[:1]


def test_sink_receives_events(example_texts, example_config):
    sink = AnalyticsSink(out_dir=None, run_id="t")
    run_pipeline(example_texts, example_config, execution=QUIET, sink=sink)
    summary = sink.summary()
    assert summary["normalize"]["documents"] == 2
    assert summary["dtm"]["columns"] == 4
    assert summary["prune"]["columns_after"] == 4
    assert summary["rank"]["grand_total"] == 5
    assert sink.flush() is None


def test_run_from_config(example_texts):
    cfg = {
        "normalization": {"stopwords": ["great", "this"], "sparse_threshold": 0.99},
        "execution": QUIET,
        "ranking": {"top_k": 1},
    }
    result = run_from_config(cfg, example_texts)
    assert result.ranking == [TermFrequency("dress", 2, 2)]


def test_normalization_config_extra_and_exclude():
    cfg = normalization_config({"normalization": {"stopwords_extra": ["Dress"], "stopwords_exclude": ["not"]}})
    assert "dress" in cfg.stopwords
    assert "not" not in cfg.stopwords
    assert "the" in cfg.stopwords


def test_unknown_language():
    with pytest.raises(ConfigError):
        normalization_config({"normalization": {"language": "klingon"}})


@pytest.mark.parametrize("bad", [0.0, 1.0, 2])
def test_config_threshold_validated(bad):
    with pytest.raises(ConfigError):
        NormalizationConfig(sparse_threshold=bad)
