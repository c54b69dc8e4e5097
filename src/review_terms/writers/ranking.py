from __future__ import annotations
import json
import os
from typing import Sequence
import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from ..pipeline.context import TermFrequency
from .base import RankingWriter, ranking_rows


def ranking_schema() -> pa.Schema:
    return pa.schema([
        ("rank", pa.int32()),
        ("term", pa.string()),
        ("total_count", pa.int64()),
        ("document_count", pa.int64()),
    ], metadata={"schema_version": "v1"})


class ParquetRankingWriter(RankingWriter):
    name = "parquet"
    extension = "parquet"

    def write(self, ranking: Sequence[TermFrequency], path: str) -> str:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        table = pa.Table.from_pylist(ranking_rows(ranking), schema=ranking_schema())
        pq.write_table(table, path, compression="zstd")
        return path


class CSVRankingWriter(RankingWriter):
    name = "csv"
    extension = "csv"

    def write(self, ranking: Sequence[TermFrequency], path: str) -> str:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        df = pd.DataFrame(ranking_rows(ranking), columns=["rank", "term", "total_count", "document_count"])
        df.to_csv(path, index=False, encoding="utf-8")
        return path


class JSONLRankingWriter(RankingWriter):
    name = "jsonl"
    extension = "jsonl"

    def write(self, ranking: Sequence[TermFrequency], path: str) -> str:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            for row in ranking_rows(ranking):
                f.write(json.dumps(row, ensure_ascii=False) + "\n")
        return path
