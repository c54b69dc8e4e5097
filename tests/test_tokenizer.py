from __future__ import annotations
from typing import List

from review_terms.pipeline.build import run_pipeline
from review_terms.plugins.registry import get_tokenizer, list_tokenizers, register_tokenizer
from review_terms.plugins.tokenizer import TokenizerAdapter, WhitespaceTokenizer


def test_whitespace_tokenizer_empty():
    assert WhitespaceTokenizer().tokenize("") == []
    assert WhitespaceTokenizer().tokenize("   ") == []


def test_tokenize_is_restartable():
    tok = WhitespaceTokenizer()
    first = tok.tokenize("love dress")
    first.append("mutated")
    assert tok.tokenize("love dress") == ["love", "dress"]


def test_tokenize_batch():
    assert WhitespaceTokenizer().tokenize_batch(["a b", ""]) == [["a", "b"], []]


def test_default_registered():
    assert "whitespace" in list_tokenizers()
    assert isinstance(get_tokenizer("whitespace"), WhitespaceTokenizer)


class MinLengthTokenizer(TokenizerAdapter):
    name = "min_length_3"

    def tokenize(self, text: str) -> List[str]:
        return [t for t in text.split() if len(t) >= 3]


def test_custom_tokenizer_in_pipeline(example_config):
    register_tokenizer("min_length_3", MinLengthTokenizer())
    result = run_pipeline(
        ["a fit dress", "ok dress"],
        example_config,
        tokenizer_name="min_length_3",
        execution={"progress": False},
    )
    assert result.dtm.vocabulary == ("dress", "fit")
    assert result.documents[1].tokens == ("dress",)
