"""Analytics sink.

Events are buffered in memory and flushed to `analytics/events.parquet`
as long-format rows: (run_id, stage, layer, timestamp_ms, kind, key, value).
Long format keeps a single fixed schema however many counters a step emits.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import os
import pyarrow as pa
import pyarrow.parquet as pq


def events_schema() -> pa.Schema:
    return pa.schema([
        ("run_id", pa.string()),
        ("stage", pa.string()),
        ("layer", pa.string()),
        ("timestamp_ms", pa.int64()),
        ("kind", pa.string()),   # count | metric
        ("key", pa.string()),
        ("value", pa.float64()),
    ], metadata={"schema_version": "v1"})


class AnalyticsSink:
    def __init__(self, out_dir: Optional[str], run_id: str):
        self.out_dir = out_dir
        self.run_id = run_id
        self.events: List[Dict[str, Any]] = []

    @property
    def path(self) -> Optional[str]:
        if self.out_dir is None:
            return None
        return os.path.join(self.out_dir, "analytics", "events.parquet")

    def emit(self, event: Dict[str, Any]) -> None:
        self.events.append(event)

    def rows(self) -> List[Dict[str, Any]]:
        out = []
        for ev in self.events:
            base = {
                "run_id": ev.get("run_id", self.run_id),
                "stage": ev["stage"],
                "layer": ev.get("layer", ""),
                "timestamp_ms": int(ev["timestamp_ms"]),
            }
            for kind, values in (("count", ev.get("counts") or {}), ("metric", ev.get("metrics") or {})):
                for k, v in values.items():
                    out.append({**base, "kind": kind, "key": str(k), "value": float(v)})
        return out

    def summary(self) -> Dict[str, Dict[str, float]]:
        """stage -> {key -> value}, later events win."""
        out: Dict[str, Dict[str, float]] = {}
        for r in self.rows():
            out.setdefault(r["stage"], {})[r["key"]] = r["value"]
        return out

    def flush(self) -> Optional[str]:
        """Write buffered events; returns the parquet path (None for in-memory sinks)."""
        if self.path is None or not self.events:
            return None
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        table = pa.Table.from_pylist(self.rows(), schema=events_schema())
        pq.write_table(table, self.path, compression="zstd")
        return self.path
