"""Built-in normalization stages.

Default order (see stages.registry.DEFAULT_STAGES):
strip_punctuation -> fuse_negation -> collapse_whitespace -> case_fold -> remove_stopwords

Negation fusion is case-sensitive and must run before case_fold; "Not good"
stays two words. Stopwords are passed in explicitly, never read from globals.
"""

from __future__ import annotations
from typing import Iterable
from ..utils import text as T
from .base import TextStage


class StripPunctuation(TextStage):
    name = "strip_punctuation"

    def transform(self, text: str) -> str:
        return T.strip_punctuation(text)


class FuseNegation(TextStage):
    name = "fuse_negation"

    def transform(self, text: str) -> str:
        return T.fuse_negation(text)


class CollapseWhitespace(TextStage):
    name = "collapse_whitespace"

    def transform(self, text: str) -> str:
        return T.collapse_whitespace(text)


class CaseFold(TextStage):
    name = "case_fold"

    def transform(self, text: str) -> str:
        return T.case_fold(text)


class RemoveStopwords(TextStage):
    name = "remove_stopwords"

    def __init__(self, stopwords: Iterable[str]):
        self.stopwords = frozenset(w.lower() for w in stopwords)
        self.pattern = T.stopword_pattern(self.stopwords)

    def transform(self, text: str) -> str:
        return T.remove_stopwords(text, self.stopwords, self.pattern)
