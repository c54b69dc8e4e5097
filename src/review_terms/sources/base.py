"""Data source plugin interface.

Goal: allow new input formats without changing pipeline code.

Every source exposes `read_column()`, returning the raw values of the
configured text field in row order. `coerce_texts` then applies the
`on_invalid` policy at the ingestion boundary:

- coerce (default): non-string values (None, NaN, numbers) become ""
- reject: any non-string value raises InputError

Rows are never dropped; row position is the document id.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence
import logging

from ..errors import ConfigError, InputError

log = logging.getLogger("review_terms.sources")

ON_INVALID = ("coerce", "reject")


@dataclass
class SourceSpec:
    name: str
    kind: str               # implementation key, e.g. csv, local_jsonl
    dataset: str            # path to the input file
    text_field: str = "text"
    on_invalid: str = "coerce"
    encoding: str = "utf-8"
    options: Dict[str, Any] = field(default_factory=dict)  # passed through to the reader

    def __post_init__(self):
        if self.on_invalid not in ON_INVALID:
            raise ConfigError(f"on_invalid must be one of {list(ON_INVALID)}, got {self.on_invalid!r}")


class DataSource(ABC):
    """Base interface for all sources."""
    kind: str = "source"

    def __init__(self, spec: SourceSpec):
        self.spec = spec
        self.name = spec.name

    def metadata(self) -> Dict[str, Any]:
        return {"kind": self.kind, "dataset": self.spec.dataset, "text_field": self.spec.text_field}

    @abstractmethod
    def read_column(self) -> List[Any]:
        """Raw values of the text field, in row order.

        Raises InputError when the field does not exist in the source.
        """
        raise NotImplementedError


def coerce_texts(values: Sequence[Any], on_invalid: str = "coerce", source: str = "") -> List[str]:
    bad = [i for i, v in enumerate(values) if not isinstance(v, str)]
    if bad and on_invalid == "reject":
        raise InputError(f"Source {source}: {len(bad)} non-string value(s) in text field, first at row {bad[0]}")
    if bad:
        log.warning(f"Source {source}: coerced {len(bad)} non-string value(s) to empty text")
    bad_rows = set(bad)
    return ["" if i in bad_rows else v for i, v in enumerate(values)]
