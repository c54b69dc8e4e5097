"""Writer registry.

Add new ranking formats without changing CLI code by registering them here.
"""

from __future__ import annotations
from typing import Dict, List
from ..errors import ConfigError
from .base import RankingWriter
from .ranking import CSVRankingWriter, JSONLRankingWriter, ParquetRankingWriter

_RANKING: Dict[str, RankingWriter] = {
    "csv": CSVRankingWriter(),
    "parquet": ParquetRankingWriter(),
    "jsonl": JSONLRankingWriter(),
}


def register_ranking_writer(name: str, writer: RankingWriter) -> None:
    """Register a new ranking writer dynamically."""
    if name in _RANKING:
        raise ValueError(f"Ranking writer '{name}' already registered")
    _RANKING[name] = writer


def list_ranking_writers() -> List[str]:
    return list(_RANKING.keys())


def get_ranking_writer(name: str) -> RankingWriter:
    if name not in _RANKING:
        raise ConfigError(
            f"Unknown ranking writer: {name}. "
            f"Available: {list(_RANKING)}. "
            f"Register with register_ranking_writer()"
        )
    return _RANKING[name]
