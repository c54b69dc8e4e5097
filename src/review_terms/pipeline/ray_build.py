"""Ray runner.

Each partition becomes one `ray.remote` task running the same
`process_partition` function as the pooled executors; results are gathered
with `ray.get` in submission order and merged.

Ray is an optional dependency: `pip install "review-terms[ray]"`.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Sequence
import logging

from ..stages.base import Stage
from .executors import PartitionResult, merge, partitions, process_partition

log = logging.getLogger("review_terms.ray")


def run_ray(
    texts: Sequence[str],
    stages: Sequence[Stage],
    *,
    partition_size: int = 1000,
    ray_cfg: Optional[Dict[str, Any]] = None,
) -> PartitionResult:
    try:
        import ray
    except ImportError as e:
        raise ImportError(
            "Ray execution mode requires ray. "
            "Install with: pip install 'review-terms[ray]'. "
            f"Original error: {e}"
        )

    ray_cfg = ray_cfg or {}
    ray.init(address=ray_cfg.get("address"), ignore_reinit_error=True)

    remote_partition = ray.remote(process_partition)
    stages_ref = ray.put(list(stages))
    parts = partitions(len(texts), partition_size)
    log.info(f"[ray] partitions={len(parts)} docs={len(texts)}")
    refs = [remote_partition.remote(s, list(texts[s:e]), stages_ref) for s, e in parts]
    return merge(ray.get(refs))
