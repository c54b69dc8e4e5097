"""Pipeline runner.

raw texts -> stages (normalize + tokenize) -> DTM -> sparsity prune -> rank

`run_pipeline` is pure and in-memory: it takes strings and returns a
PipelineResult. Reading sources and writing outputs belong to the caller
(see cli.py). Execution mode only changes how per-document work is scheduled;
every mode yields identical results.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Sequence
import logging

from ..analytics.schemas import make_event
from ..analytics.sink import AnalyticsSink
from ..dtm.matrix import build_dtm
from ..dtm.prune import remove_sparse_terms
from ..dtm.rank import rank_terms, term_frequencies
from ..errors import ConfigError, InputError
from ..policies.loader import NormalizationConfig
from ..stages.registry import make_stages
from .context import PipelineResult
from .executors import EXECUTION_MODES, run_local, run_pooled

log = logging.getLogger("review_terms.build")


def _check_texts(texts: Sequence[str]) -> None:
    if len(texts) == 0:
        raise InputError("No documents to process")
    bad = [i for i, t in enumerate(texts) if not isinstance(t, str)]
    if bad:
        raise InputError(f"{len(bad)} non-string document(s), first at row {bad[0]}")


def run_pipeline(
    texts: Sequence[str],
    config: NormalizationConfig,
    *,
    stage_names: Optional[Sequence[str]] = None,
    tokenizer_name: str = "whitespace",
    execution: Optional[Dict[str, Any]] = None,
    top_k: Optional[int] = None,
    sink: Optional[AnalyticsSink] = None,
) -> PipelineResult:
    """
    Run the full pipeline over an ordered list of raw documents.

    Args:
        texts: Raw document strings; list position becomes the doc id
        config: Stopwords and sparse threshold
        stage_names: Normalization stage order (None -> default chain)
        tokenizer_name: Registered tokenizer name
        execution: {"mode": local|threads|processes|ray, "workers": int,
                    "partition_size": int, "progress": bool, "ray": {...}}
        top_k: Keep only the first K ranked terms
        sink: Optional analytics sink receiving one event per step
    """
    _check_texts(texts)
    execution = execution or {}
    mode = str(execution.get("mode", "local")).lower()
    if mode not in EXECUTION_MODES:
        raise ConfigError(f"Unknown execution mode: {mode}. Available: {list(EXECUTION_MODES)}")
    progress = bool(execution.get("progress", True))
    run_id = sink.run_id if sink is not None else ""

    stages = make_stages(stage_names, config, tokenizer_name=tokenizer_name)
    log.info(f"Starting run docs={len(texts)} mode={mode} stages={[st.name for st in stages]}")

    if mode == "local":
        docs, hists = run_local(texts, stages, progress=progress)
    elif mode == "ray":
        from .ray_build import run_ray
        docs, hists = run_ray(
            texts, stages,
            partition_size=int(execution.get("partition_size", 1000)),
            ray_cfg=execution.get("ray") or {},
        )
    else:
        docs, hists = run_pooled(
            texts, stages,
            mode=mode,
            workers=int(execution.get("workers", 4)),
            partition_size=int(execution.get("partition_size", 1000)),
            progress=progress,
        )

    empty = sum(1 for d in docs if not d.tokens)
    n_tokens = sum(len(d.tokens) for d in docs)
    if empty == len(docs):
        log.warning("Every document is empty after normalization; ranking will be empty")
    elif empty:
        log.info(f"{empty} of {len(docs)} documents are empty after normalization")

    dtm = build_dtm(hists, doc_ids=[d.doc_id for d in docs])
    log.info(f"dtm rows={dtm.n_docs} columns={dtm.n_terms} nonzero={dtm.counts.nnz}")

    pruned, df = remove_sparse_terms(dtm, config.sparse_threshold)
    ranking = rank_terms(term_frequencies(pruned, df), top_k=top_k)
    if not ranking:
        log.warning("Ranking is empty")

    if sink is not None:
        sink.emit(make_event(run_id=run_id, stage="normalize", layer="normalization",
                             counts={"documents": len(docs), "empty_documents": empty, "tokens": n_tokens}))
        sink.emit(make_event(run_id=run_id, stage="dtm", layer="matrix",
                             counts={"rows": dtm.n_docs, "columns": dtm.n_terms, "nonzero_cells": int(dtm.counts.nnz)}))
        sink.emit(make_event(run_id=run_id, stage="prune", layer="matrix",
                             counts={"columns_before": dtm.n_terms, "columns_after": pruned.n_terms},
                             metrics={"sparse_threshold": config.sparse_threshold}))
        sink.emit(make_event(run_id=run_id, stage="rank", layer="ranking",
                             counts={"terms": len(ranking), "grand_total": pruned.total()}))

    return PipelineResult(documents=docs, dtm=dtm, pruned=pruned, ranking=ranking)


def run_from_config(cfg: Dict[str, Any], texts: Sequence[str], *, sink: Optional[AnalyticsSink] = None) -> PipelineResult:
    """Run with the sections of a loaded run config (normalization, stages, tokenizer, execution, ranking)."""
    from ..policies.loader import normalization_config

    return run_pipeline(
        texts,
        normalization_config(cfg),
        stage_names=cfg.get("stages"),
        tokenizer_name=(cfg.get("tokenizer") or {}).get("name", "whitespace"),
        execution=cfg.get("execution") or {},
        top_k=(cfg.get("ranking") or {}).get("top_k"),
        sink=sink,
    )
