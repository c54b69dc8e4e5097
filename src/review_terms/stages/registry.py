"""Stage registry.

Normalization stages are configured by name in the run config (`stages:`),
and run in the listed order. The tokenize stage is always appended last.

Adding a stage: implement a Stage (usually a TextStage) and register a factory
with `register_stage(name, factory)`; factories receive the NormalizationConfig.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional, Sequence
from ..errors import ConfigError
from ..policies.loader import NormalizationConfig
from .base import Stage
from .normalize import StripPunctuation, FuseNegation, CollapseWhitespace, CaseFold, RemoveStopwords
from .tokenize_plugin import TokenizeStage

DEFAULT_STAGES: List[str] = [
    "strip_punctuation",
    "fuse_negation",
    "collapse_whitespace",
    "case_fold",
    "remove_stopwords",
]

StageFactory = Callable[[NormalizationConfig], Stage]

_STAGES: Dict[str, StageFactory] = {
    "strip_punctuation": lambda cfg: StripPunctuation(),
    "fuse_negation": lambda cfg: FuseNegation(),
    "collapse_whitespace": lambda cfg: CollapseWhitespace(),
    "case_fold": lambda cfg: CaseFold(),
    "remove_stopwords": lambda cfg: RemoveStopwords(cfg.stopwords),
}


def register_stage(name: str, factory: StageFactory) -> None:
    if name in _STAGES:
        raise ValueError(f"Stage '{name}' already registered")
    _STAGES[name] = factory


def list_stages() -> List[str]:
    return list(_STAGES)


def make_stages(
    stage_names: Optional[Sequence[str]],
    config: NormalizationConfig,
    *,
    tokenizer_name: str = "whitespace",
) -> List[Stage]:
    """
    Create the ordered stage chain.

    Args:
        stage_names: Normalization stages in run order (None -> DEFAULT_STAGES)
        config: Normalization config (stopwords etc.)
        tokenizer_name: Registered tokenizer for the final tokenize stage
    """
    names = list(DEFAULT_STAGES if stage_names is None else stage_names)
    stages: List[Stage] = []
    for n in names:
        if n not in _STAGES:
            raise ConfigError(f"Unknown stage: {n}. Register it in review_terms.stages.registry")
        stages.append(_STAGES[n](config))
    stages.append(TokenizeStage(tokenizer_name=tokenizer_name))
    return stages
