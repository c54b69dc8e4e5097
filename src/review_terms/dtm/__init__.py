"""Document-term matrix: construction, sparsity pruning, frequency ranking."""

from .matrix import DocumentTermMatrix, build_dtm, histogram
from .prune import remove_sparse_terms
from .rank import term_frequencies, rank_terms

__all__ = [
    "DocumentTermMatrix",
    "build_dtm",
    "histogram",
    "remove_sparse_terms",
    "term_frequencies",
    "rank_terms",
]
