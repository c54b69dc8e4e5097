"""Core pipeline data model.

Document is the value flowing through stages. Stages never mutate it; each
returns a new Document via `dataclasses.replace`, so per-document work can run
on any worker without shared state.

TermFrequency is the read-only aggregate handed to reporting collaborators.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..dtm.matrix import DocumentTermMatrix


@dataclass(frozen=True)
class Document:
    # identity (row order of the input)
    doc_id: int
    raw_text: str

    # derived
    normalized_text: str = ""
    tokens: Tuple[str, ...] = ()

    # governance
    transform_chain: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_raw(cls, doc_id: int, raw_text: str) -> "Document":
        """Seed a document; normalization stages start from normalized_text."""
        return cls(doc_id=doc_id, raw_text=raw_text, normalized_text=raw_text)


@dataclass(frozen=True)
class TermFrequency:
    term: str
    total_count: int
    document_count: int

    def as_pair(self) -> Tuple[str, int]:
        return (self.term, self.total_count)


@dataclass(frozen=True)
class PipelineResult:
    documents: List[Document]
    dtm: "DocumentTermMatrix"
    pruned: "DocumentTermMatrix"
    ranking: List[TermFrequency]

    def top(self, k: int) -> List[TermFrequency]:
        return self.ranking[:k]
