"""Plugin registry.

Enables new tokenizers without modifying core pipeline code.
The whitespace tokenizer is always available.
"""

from __future__ import annotations
from typing import Dict, List
from ..errors import ConfigError
from .tokenizer import TokenizerAdapter, WhitespaceTokenizer

_TOKENIZERS: Dict[str, TokenizerAdapter] = {
    "whitespace": WhitespaceTokenizer(),
}


def register_tokenizer(name: str, tok: TokenizerAdapter) -> None:
    _TOKENIZERS[name] = tok


def list_tokenizers() -> List[str]:
    return list(_TOKENIZERS)


def get_tokenizer(name: str) -> TokenizerAdapter:
    if name not in _TOKENIZERS:
        raise ConfigError(f"Unknown tokenizer: {name}. Available: {list(_TOKENIZERS)}")
    return _TOKENIZERS[name]
