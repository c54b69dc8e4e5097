"""Stage plugin interface.

Stages must:
- accept a Document
- return a new Document (never mutate the input)
- append a transform_chain entry (for auditability)

TextStage covers the common case of a pure `str -> str` rewrite of
`normalized_text`; it only has to implement `transform`.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import replace
from ..pipeline.context import Document


class Stage(ABC):
    name: str = "stage"
    layer: str = "normalization"

    @abstractmethod
    def apply(self, doc: Document) -> Document:
        ...


class TextStage(Stage):
    version: str = "v1"

    @abstractmethod
    def transform(self, text: str) -> str:
        ...

    def apply(self, doc: Document) -> Document:
        return replace(
            doc,
            normalized_text=self.transform(doc.normalized_text),
            transform_chain=doc.transform_chain + (f"{self.name}_{self.version}",),
        )
