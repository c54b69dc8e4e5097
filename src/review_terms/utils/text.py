"""Text normalization primitives.

Each function is one step of the normalizer chain, applied in this order:

1. strip_punctuation    - delete punctuation, no space inserted ("well-made" -> "wellmade")
2. fuse_negation        - "not good" -> "notgood"; case-sensitive, runs before case folding
3. collapse_whitespace  - two fixed-width passes: "  " -> " ", then "   " -> " "
4. case_fold            - lowercase
5. remove_stopwords     - delete stopword tokens with one trailing whitespace character

The whitespace collapse is deliberately not a general `\\s+` collapse: runs of
four or more spaces are only partially reduced.
"""

from __future__ import annotations
import re
import string
import unicodedata
from typing import AbstractSet, Iterable, List, Optional, Pattern

_ASCII_PUNCT = frozenset(string.punctuation)


def is_punctuation(ch: str) -> bool:
    """ASCII punctuation or any Unicode `P*` category character."""
    return ch in _ASCII_PUNCT or unicodedata.category(ch).startswith("P")


def strip_punctuation(text: str) -> str:
    return "".join(ch for ch in text if not is_punctuation(ch))


def fuse_negation(text: str) -> str:
    return text.replace("not ", "not")


def collapse_whitespace(text: str) -> str:
    text = text.replace("  ", " ")
    return text.replace("   ", " ")


def case_fold(text: str) -> str:
    return text.lower()


def stopword_pattern(stopwords: Iterable[str]) -> Optional[Pattern[str]]:
    """Compile one alternation matching any stopword as a whole token.

    The match includes at most one trailing whitespace character. Returns None
    when there is nothing to match.
    """
    words = sorted({w for w in stopwords if w}, key=lambda w: (-len(w), w))
    if not words:
        return None
    alternation = "|".join(re.escape(w) for w in words)
    return re.compile(r"(?<!\S)(?:%s)(?!\S)\s?" % alternation)


def remove_stopwords(
    text: str,
    stopwords: AbstractSet[str],
    pattern: Optional[Pattern[str]] = None,
) -> str:
    """Delete tokens found in `stopwords`, each with one trailing whitespace character.

    Other whitespace is left alone, so the partial collapse of long space runs
    survives this step. The result is stripped at both ends. Stopwords are
    expected to be case-folded already (see policies.loader). Pass `pattern`
    from `stopword_pattern` to avoid recompiling it per document.
    """
    if pattern is None:
        pattern = stopword_pattern(stopwords)
    if pattern is not None:
        text = pattern.sub("", text)
    return text.strip()


def tokenize(text: str) -> List[str]:
    """Split on whitespace; zero-length tokens never appear."""
    return text.split()


def normalize(text: str, stopwords: Iterable[str] = ()) -> str:
    """Run the full default chain on one string."""
    sw = frozenset(w.lower() for w in stopwords)
    text = strip_punctuation(text)
    text = fuse_negation(text)
    text = collapse_whitespace(text)
    text = case_fold(text)
    return remove_stopwords(text, sw)
