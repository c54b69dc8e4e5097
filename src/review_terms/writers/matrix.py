"""Pruned matrix writer (long format: doc_id, term, count; non-zero cells only).

Heatmap-style consumers pivot this back; documents with an all-zero row do
not appear here, the manifest records the full row count.
"""

from __future__ import annotations
import os
import pyarrow as pa
import pyarrow.parquet as pq

from ..dtm.matrix import DocumentTermMatrix


def matrix_schema() -> pa.Schema:
    return pa.schema([
        ("doc_id", pa.int64()),
        ("term", pa.string()),
        ("count", pa.int64()),
    ], metadata={"schema_version": "v1"})


def write_matrix_parquet(dtm: DocumentTermMatrix, path: str) -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    cells = dtm.to_long()
    table = pa.Table.from_pydict(
        {
            "doc_id": [d for d, _, _ in cells],
            "term": [t for _, t, _ in cells],
            "count": [c for _, _, c in cells],
        },
        schema=matrix_schema(),
    )
    pq.write_table(table, path, compression="zstd")
    return path
