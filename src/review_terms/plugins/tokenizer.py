"""Tokenizer adapter plugin.

Tokenizers turn normalized text into terms. They are registered by name in
`review_terms.plugins.registry` and selected with `tokenizer.name` in the run config.

Minimal contract:
- tokenize(text) -> list[str], a fresh list on every call, no empty strings
- optional: tokenize_batch(list[str]) -> list[list[str]] for speed
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Sequence
from ..utils.text import tokenize as _whitespace_tokenize


class TokenizerAdapter(ABC):
    """Base tokenizer adapter."""
    name: str = "tokenizer"

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Split a normalized string into terms."""
        raise NotImplementedError

    def tokenize_batch(self, texts: Sequence[str]) -> List[List[str]]:
        """Optional fast path; default falls back to single tokenize."""
        return [self.tokenize(t) for t in texts]


class WhitespaceTokenizer(TokenizerAdapter):
    """Split on runs of whitespace; empty input gives an empty list."""
    name = "whitespace"

    def tokenize(self, text: str) -> List[str]:
        return _whitespace_tokenize(text)
