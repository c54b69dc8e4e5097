"""Sparsity pruning.

A term's sparsity is the fraction of documents it is absent from:
`(n - df) / n`. A term is kept when its sparsity is <= the threshold, so with
two documents a term seen once (sparsity 0.5) survives `sparse=0.5` and is
dropped at `sparse=0.49`. Rows are never dropped.
"""

from __future__ import annotations
from typing import Tuple
import logging
import numpy as np

from ..policies.loader import validate_sparse
from .matrix import DocumentTermMatrix

log = logging.getLogger("review_terms.dtm.prune")


def term_sparsity(dtm: DocumentTermMatrix) -> np.ndarray:
    """Per-column fraction of documents with a zero count."""
    n = dtm.n_docs
    if n == 0:
        return np.zeros(dtm.n_terms, dtype=np.float64)
    return (n - dtm.document_frequency()) / n


def remove_sparse_terms(dtm: DocumentTermMatrix, sparse: float) -> Tuple[DocumentTermMatrix, np.ndarray]:
    """Drop columns whose sparsity exceeds `sparse`.

    Returns the pruned matrix and the document frequency of each surviving
    column (aligned with the pruned vocabulary) so the ranker can reuse it.
    """
    sparse = validate_sparse(sparse)
    df = dtm.document_frequency()
    if dtm.n_terms == 0 or dtm.n_docs == 0:
        return dtm, df

    keep = ((dtm.n_docs - df) / dtm.n_docs) <= sparse
    pruned = dtm.select_columns(keep)
    kept = int(keep.sum())
    log.info(f"prune sparse={sparse} terms_before={dtm.n_terms} terms_after={kept}")
    if kept == 0:
        log.warning(f"Sparsity threshold {sparse} removed every term; ranking will be empty")
    return pruned, df[keep]
