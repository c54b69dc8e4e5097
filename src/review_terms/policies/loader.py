"""Policy and configuration loader.

Configuration lives in YAML files with simple keys:
- easy review of stopword lists and thresholds
- versioned configuration across runs (see `review-terms config-diff`)

Stopword lists ship as `policies/stopwords/<language>.yaml`. A run can add or
exclude words, or point to its own file, under the `normalization` section.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional
import logging
import os
import yaml

from ..errors import ConfigError

log = logging.getLogger("review_terms.policies")

STOPWORDS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "stopwords")
DEFAULT_LANGUAGE = "english"
DEFAULT_SPARSE_THRESHOLD = 0.99


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def validate_sparse(sparse: float) -> float:
    """Sparse thresholds live in the open interval (0, 1)."""
    try:
        value = float(sparse)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"sparse_threshold must be a number, got {sparse!r}") from e
    if not 0.0 < value < 1.0:
        raise ConfigError(f"sparse_threshold must be in (0, 1), got {value}")
    return value


def load_stopwords(
    language: str = DEFAULT_LANGUAGE,
    *,
    path: Optional[str] = None,
    extra: Iterable[str] = (),
    exclude: Iterable[str] = (),
) -> FrozenSet[str]:
    """Load a stopword list and return it case-folded.

    Args:
        language: selects `stopwords/<language>.yaml` when `path` is not given
        path: explicit YAML file with a `stopwords:` list
        extra: words added on top of the list
        exclude: words removed from the list (applied last)
    """
    if path is None:
        path = os.path.join(STOPWORDS_DIR, f"{language}.yaml")
    if not os.path.exists(path):
        raise ConfigError(f"No stopword list for language={language!r} (looked for {path})")
    doc = load_yaml(path)
    words = {str(w).lower() for w in (doc.get("stopwords") or [])}
    words.update(str(w).lower() for w in extra)
    words.difference_update(str(w).lower() for w in exclude)
    log.debug(f"Loaded {len(words)} stopwords from {path}")
    return frozenset(words)


@dataclass(frozen=True)
class NormalizationConfig:
    language: str = DEFAULT_LANGUAGE
    stopwords: FrozenSet[str] = field(default_factory=frozenset)
    sparse_threshold: float = DEFAULT_SPARSE_THRESHOLD

    def __post_init__(self):
        object.__setattr__(self, "sparse_threshold", validate_sparse(self.sparse_threshold))
        object.__setattr__(self, "stopwords", frozenset(w.lower() for w in self.stopwords))

    @classmethod
    def for_language(cls, language: str = DEFAULT_LANGUAGE, sparse_threshold: float = DEFAULT_SPARSE_THRESHOLD) -> "NormalizationConfig":
        return cls(language=language, stopwords=load_stopwords(language), sparse_threshold=sparse_threshold)


def normalization_config(cfg: Dict[str, Any]) -> NormalizationConfig:
    """Build a NormalizationConfig from the `normalization` section of a run config."""
    norm = cfg.get("normalization") or {}
    language = norm.get("language", DEFAULT_LANGUAGE)
    if norm.get("stopwords") is not None:
        # Inline list replaces the shipped one
        stopwords = frozenset(str(w).lower() for w in norm["stopwords"])
    else:
        stopwords = load_stopwords(
            language,
            path=norm.get("stopwords_file"),
            extra=norm.get("stopwords_extra") or (),
            exclude=norm.get("stopwords_exclude") or (),
        )
    return NormalizationConfig(
        language=language,
        stopwords=stopwords,
        sparse_threshold=norm.get("sparse_threshold", DEFAULT_SPARSE_THRESHOLD),
    )
