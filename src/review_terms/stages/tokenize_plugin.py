"""Tokenization stage (plugin-driven).

Resolves its TokenizerAdapter once at construction, so the stage can be
shipped to worker processes without relying on registrations made there.
"""

from __future__ import annotations
from dataclasses import replace

from ..pipeline.context import Document
from ..plugins.registry import get_tokenizer
from .base import Stage


class TokenizeStage(Stage):
    name = "tokenize"
    layer = "tokenization"

    def __init__(self, tokenizer_name: str = "whitespace"):
        self.tokenizer_name = tokenizer_name
        self.tokenizer = get_tokenizer(tokenizer_name)

    def apply(self, doc: Document) -> Document:
        tokens = tuple(t for t in self.tokenizer.tokenize(doc.normalized_text) if t)
        return replace(
            doc,
            tokens=tokens,
            transform_chain=doc.transform_chain + (f"tokenize_{self.tokenizer_name}_v1",),
        )
