"""Document-term matrix (DTM).

Rows are documents (in input order), columns are terms (sorted), cells are
occurrence counts. Storage is a `scipy.sparse.csr_matrix`; zero cells are
implicit and never stored.

Invariants:
- one row per input document, including documents with no tokens (all-zero row)
- one column per distinct non-empty token seen in the corpus (before pruning)
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
import numpy as np
import pandas as pd
from scipy import sparse


def histogram(tokens: Iterable[str]) -> Counter:
    """Per-document term counts; empty tokens are ignored."""
    return Counter(t for t in tokens if t)


@dataclass(frozen=True)
class DocumentTermMatrix:
    doc_ids: Tuple[int, ...]
    vocabulary: Tuple[str, ...]
    counts: sparse.csr_matrix

    def __post_init__(self):
        expected = (len(self.doc_ids), len(self.vocabulary))
        if self.counts.shape != expected:
            raise ValueError(f"counts shape {self.counts.shape} != (docs, terms) {expected}")

    @property
    def shape(self) -> Tuple[int, int]:
        return self.counts.shape

    @property
    def n_docs(self) -> int:
        return len(self.doc_ids)

    @property
    def n_terms(self) -> int:
        return len(self.vocabulary)

    def document_frequency(self) -> np.ndarray:
        """Number of documents with a non-zero count, per column."""
        return np.asarray((self.counts > 0).sum(axis=0)).ravel().astype(np.int64)

    def column_totals(self) -> np.ndarray:
        return np.asarray(self.counts.sum(axis=0)).ravel().astype(np.int64)

    def total(self) -> int:
        return int(self.counts.sum())

    def select_columns(self, mask: np.ndarray) -> "DocumentTermMatrix":
        """Keep the columns where `mask` is true; rows are untouched."""
        idx = np.flatnonzero(np.asarray(mask, dtype=bool))
        if idx.size == 0:
            counts = sparse.csr_matrix((self.n_docs, 0), dtype=np.int64)
        else:
            counts = sparse.csr_matrix(self.counts[:, idx])
        return DocumentTermMatrix(
            doc_ids=self.doc_ids,
            vocabulary=tuple(self.vocabulary[i] for i in idx),
            counts=counts,
        )

    def row(self, doc_id: int) -> Dict[str, int]:
        r = self.doc_ids.index(doc_id)
        start, end = self.counts.indptr[r], self.counts.indptr[r + 1]
        return {
            self.vocabulary[j]: int(v)
            for j, v in zip(self.counts.indices[start:end], self.counts.data[start:end])
            if v
        }

    def to_mapping(self) -> Dict[int, Dict[str, int]]:
        """doc_id -> {term -> count}; every document is present, zero cells are omitted."""
        out: Dict[int, Dict[str, int]] = {}
        indptr, indices, data = self.counts.indptr, self.counts.indices, self.counts.data
        for r, doc_id in enumerate(self.doc_ids):
            start, end = indptr[r], indptr[r + 1]
            out[doc_id] = {self.vocabulary[j]: int(v) for j, v in zip(indices[start:end], data[start:end]) if v}
        return out

    def to_frame(self) -> pd.DataFrame:
        """Dense DataFrame view (rows = doc ids, columns = terms). Meant for small corpora."""
        return pd.DataFrame(
            self.counts.toarray(),
            index=pd.Index(self.doc_ids, name="doc_id"),
            columns=list(self.vocabulary),
        )

    def to_long(self) -> List[Tuple[int, str, int]]:
        """(doc_id, term, count) triples for the non-zero cells, row-major."""
        coo = self.counts.tocoo()
        rows = sorted(zip(coo.row.tolist(), coo.col.tolist(), coo.data.tolist()))
        return [(self.doc_ids[r], self.vocabulary[c], int(v)) for r, c, v in rows if v]


def build_dtm(
    histograms: Sequence[Mapping[str, int]],
    doc_ids: Optional[Sequence[int]] = None,
) -> DocumentTermMatrix:
    """Assemble a DTM from per-document histograms.

    Args:
        histograms: one term->count mapping per document, in row order
        doc_ids: row labels (defaults to 0..n-1)
    """
    if doc_ids is None:
        doc_ids = range(len(histograms))
    doc_ids = tuple(int(d) for d in doc_ids)
    if len(doc_ids) != len(histograms):
        raise ValueError(f"{len(doc_ids)} doc ids for {len(histograms)} histograms")

    vocabulary = sorted({t for h in histograms for t, c in h.items() if t and c > 0})
    index = {t: i for i, t in enumerate(vocabulary)}

    indptr = [0]
    indices: List[int] = []
    data: List[int] = []
    for h in histograms:
        cols = sorted((index[t], int(c)) for t, c in h.items() if t and c > 0)
        indices.extend(j for j, _ in cols)
        data.extend(c for _, c in cols)
        indptr.append(len(indices))

    counts = sparse.csr_matrix(
        (
            np.asarray(data, dtype=np.int64),
            np.asarray(indices, dtype=np.int64),
            np.asarray(indptr, dtype=np.int64),
        ),
        shape=(len(doc_ids), len(vocabulary)),
    )
    return DocumentTermMatrix(doc_ids=doc_ids, vocabulary=tuple(vocabulary), counts=counts)
