"""Source registry.

Adding a new source:
1) implement a DataSource subclass
2) register it with register_source(kind, factory)
3) reference the kind in the run config (`source.kind`)
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List
import logging

from ..errors import ConfigError, InputError
from .base import DataSource, SourceSpec, coerce_texts
from .csv_source import CSVSource
from .local_jsonl import LocalJSONLSource

log = logging.getLogger("review_terms.sources")

_SOURCES: Dict[str, Callable[[SourceSpec], DataSource]] = {
    "csv": CSVSource,
    "local_jsonl": LocalJSONLSource,
}


def register_source(kind: str, factory: Callable[[SourceSpec], DataSource]) -> None:
    """Register a new source kind at runtime."""
    if kind in _SOURCES:
        raise ValueError(f"Source kind '{kind}' already registered")
    _SOURCES[kind] = factory


def list_sources() -> List[str]:
    return list(_SOURCES)


def make_source(spec: SourceSpec) -> DataSource:
    if spec.kind not in _SOURCES:
        raise ConfigError(f"Unknown source kind: {spec.kind}. Available: {list(_SOURCES)}")
    return _SOURCES[spec.kind](spec)


def spec_from_config(cfg: Dict[str, Any]) -> SourceSpec:
    s_cfg = cfg.get("source")
    if not s_cfg:
        raise ConfigError("Config has no 'source' section")
    try:
        return SourceSpec(**s_cfg)
    except TypeError as e:
        raise ConfigError(f"Invalid source config: {e}") from e


def load_texts(spec: SourceSpec) -> List[str]:
    """Read, validate and coerce the text column of a source."""
    src = make_source(spec)
    values = src.read_column()
    if not values:
        raise InputError(f"Source {spec.name}: no documents in {spec.dataset}")
    texts = coerce_texts(values, spec.on_invalid, source=spec.name)
    log.info(f"Source {spec.name}: loaded {len(texts)} documents from {spec.dataset}")
    return texts
