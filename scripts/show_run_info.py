"""Show information about a completed run: manifest, top terms, analytics.

Usage:
    python scripts/show_run_info.py storage/<run_id> [--top 15]
"""

from __future__ import annotations
import argparse
import glob
import os
import pandas as pd

from review_terms.storage.writer import read_manifest


def show_run_info(out_dir: str, top: int = 15) -> None:
    print(f"\n{'='*60}")
    print(f"Run Information: {out_dir}")
    print(f"{'='*60}\n")

    manifests = sorted(glob.glob(os.path.join(out_dir, "manifests", "*.json")))
    if not manifests:
        print("No manifest found (run not finished or wrong directory)")
        return
    manifest = read_manifest(manifests[-1])

    print("Run Summary:")
    print("-" * 60)
    print(f"  Run ID:            {manifest.get('run_id')}")
    print(f"  Source:            {manifest.get('source')} ({manifest.get('dataset')})")
    print(f"  Documents:         {manifest.get('documents', 0):,}")
    print(f"  Terms (raw):       {manifest.get('terms_before_pruning', 0):,}")
    print(f"  Terms (pruned):    {manifest.get('terms_after_pruning', 0):,}")
    print(f"  Grand total:       {manifest.get('grand_total', 0):,}")

    outputs = manifest.get("outputs") or {}
    ranking_path = outputs.get("ranking")
    if ranking_path and os.path.exists(ranking_path):
        if ranking_path.endswith(".parquet"):
            df = pd.read_parquet(ranking_path)
        elif ranking_path.endswith(".jsonl"):
            df = pd.read_json(ranking_path, lines=True)
        else:
            df = pd.read_csv(ranking_path, keep_default_na=False)
        print(f"\nTop {top} terms:")
        print("-" * 60)
        print(df.head(top).to_string(index=False))

    events_path = outputs.get("analytics")
    if events_path and os.path.exists(events_path):
        ev = pd.read_parquet(events_path)
        print("\nAnalytics:")
        print("-" * 60)
        print(ev.pivot_table(index="stage", columns="key", values="value", aggfunc="last").to_string())


if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("out_dir")
    p.add_argument("--top", type=int, default=15)
    a = p.parse_args()
    show_run_info(a.out_dir, a.top)
