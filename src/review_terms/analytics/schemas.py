"""Analytics event schemas.

Analytics are emitted once per pipeline step as small events. This module
defines the constructor and recommended keys, but does not force strict
validation.

Recommended counts: documents, empty_documents, tokens, rows, columns,
columns_before, columns_after, nonzero_cells, terms, grand_total.
"""

from __future__ import annotations
from typing import Dict, Any
import time


def make_event(
    *,
    run_id: str,
    stage: str,
    layer: str,
    counts: Dict[str, int],
    metrics: Dict[str, float] | None = None,
) -> Dict[str, Any]:
    return {
        "run_id": run_id,
        "stage": stage,
        "layer": layer,
        "timestamp_ms": int(time.time() * 1000),
        "counts": counts,
        "metrics": metrics or {},
    }
