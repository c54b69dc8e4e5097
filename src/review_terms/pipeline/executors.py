"""Per-document execution strategies.

Normalization, tokenization and the per-document histogram are independent
per document, so the corpus is cut into contiguous partitions and each
partition is processed by exactly one worker. Results are concatenated in
partition order, which keeps doc ids and counts exact.

Modes:
- local: sequential, with a progress bar
- threads / processes: concurrent.futures pools
- ray: see pipeline.ray_build
"""

from __future__ import annotations
from collections import Counter
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import List, Sequence, Tuple
import logging
from tqdm import tqdm

from ..dtm.matrix import histogram
from ..errors import ConfigError
from ..stages.base import Stage
from .context import Document

log = logging.getLogger("review_terms.executors")

EXECUTION_MODES = ("local", "threads", "processes", "ray")

PartitionResult = Tuple[List[Document], List[Counter]]


def partitions(n: int, size: int) -> List[Tuple[int, int]]:
    """Contiguous [start, end) ranges covering 0..n exactly once."""
    if size <= 0:
        raise ConfigError(f"partition_size must be positive, got {size}")
    return [(start, min(start + size, n)) for start in range(0, n, size)]


def process_document(doc: Document, stages: Sequence[Stage]) -> Document:
    for st in stages:
        doc = st.apply(doc)
    return doc


def process_partition(start: int, texts: Sequence[str], stages: Sequence[Stage]) -> PartitionResult:
    """Run the stage chain over one partition; doc ids start at `start`."""
    docs = [process_document(Document.from_raw(start + i, t), stages) for i, t in enumerate(texts)]
    return docs, [histogram(d.tokens) for d in docs]


def merge(results: Sequence[PartitionResult]) -> PartitionResult:
    docs: List[Document] = []
    hists: List[Counter] = []
    for d, h in results:
        docs.extend(d)
        hists.extend(h)
    return docs, hists


def run_local(texts: Sequence[str], stages: Sequence[Stage], *, progress: bool = True) -> PartitionResult:
    docs = []
    for i, t in enumerate(tqdm(texts, desc="normalize", unit="doc", disable=not progress)):
        docs.append(process_document(Document.from_raw(i, t), stages))
    return docs, [histogram(d.tokens) for d in docs]


def _make_executor(mode: str, workers: int) -> Executor:
    if mode == "threads":
        return ThreadPoolExecutor(max_workers=workers)
    if mode == "processes":
        return ProcessPoolExecutor(max_workers=workers)
    raise ConfigError(f"Unknown execution mode: {mode}. Available: {list(EXECUTION_MODES)}")


def run_pooled(
    texts: Sequence[str],
    stages: Sequence[Stage],
    *,
    mode: str,
    workers: int = 4,
    partition_size: int = 1000,
    progress: bool = True,
) -> PartitionResult:
    parts = partitions(len(texts), partition_size)
    log.info(f"mode={mode} workers={workers} partitions={len(parts)} docs={len(texts)}")
    with _make_executor(mode, workers) as ex:
        futures = [ex.submit(process_partition, s, list(texts[s:e]), list(stages)) for s, e in parts]
        # Collect in submission order, not completion order
        results = [f.result() for f in tqdm(futures, desc=mode, unit="part", disable=not progress)]
    return merge(results)
