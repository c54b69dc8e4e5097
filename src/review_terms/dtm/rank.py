"""Frequency aggregation and ranking.

Order: total_count descending, then term ascending. The secondary key makes
tie order independent of how the matrix was built, so repeated runs on the
same input return the same list.
"""

from __future__ import annotations
from typing import Iterable, List, Optional
import numpy as np

from ..errors import ConfigError
from ..pipeline.context import TermFrequency
from .matrix import DocumentTermMatrix


def term_frequencies(dtm: DocumentTermMatrix, document_frequency: Optional[np.ndarray] = None) -> List[TermFrequency]:
    """One TermFrequency per column, in vocabulary order.

    `document_frequency` (from the pruner) is reused when given.
    """
    totals = dtm.column_totals()
    df = dtm.document_frequency() if document_frequency is None else np.asarray(document_frequency)
    if df.shape[0] != dtm.n_terms:
        raise ValueError(f"document_frequency has {df.shape[0]} entries for {dtm.n_terms} terms")
    return [
        TermFrequency(term=t, total_count=int(c), document_count=int(d))
        for t, c, d in zip(dtm.vocabulary, totals, df)
    ]


def rank_terms(frequencies: Iterable[TermFrequency], top_k: Optional[int] = None) -> List[TermFrequency]:
    if top_k is not None and int(top_k) <= 0:
        raise ConfigError(f"top_k must be positive, got {top_k}")
    ranked = sorted(frequencies, key=lambda tf: (-tf.total_count, tf.term))
    return ranked if top_k is None else ranked[: int(top_k)]
