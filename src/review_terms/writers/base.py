"""Output writers.

The core never writes anything; writers are used by the caller (the CLI) to
persist a finished run:
- RankingWriter: the ranked TermFrequency list
- the pruned matrix in long format (see writers.matrix)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence
from ..pipeline.context import TermFrequency


def ranking_rows(ranking: Sequence[TermFrequency]) -> List[Dict[str, Any]]:
    return [
        {"rank": i, "term": tf.term, "total_count": tf.total_count, "document_count": tf.document_count}
        for i, tf in enumerate(ranking, start=1)
    ]


class RankingWriter(ABC):
    """Writes a ranking file and returns its path."""
    name: str
    extension: str

    @abstractmethod
    def write(self, ranking: Sequence[TermFrequency], path: str) -> str:
        raise NotImplementedError
