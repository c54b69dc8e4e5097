"""CLI entrypoint.

Commands:
- `review-terms rank --config configs/rank.yaml [--top-k N] [--mode threads] [--out-dir DIR]`
- `review-terms config-diff --a <file.yaml> --b <file.yaml>`

`rank` is the caller of the in-memory pipeline: it reads the source, runs the
pipeline, then writes the ranking, optionally the pruned matrix, analytics
events and a run manifest under the resolved out_dir.
"""

from __future__ import annotations
import argparse
import logging
import os
import time
from typing import List, Optional
import yaml

from . import __version__
from .errors import ConfigError, ReviewTermsError
from .logging_ import setup_logging
from .run_id import resolve_run_id, resolve_out_dir

log = logging.getLogger("review_terms.cli")


def _load_yaml(path: str) -> dict:
    if not os.path.isfile(path):
        raise ConfigError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def rank_command(args: argparse.Namespace) -> int:
    from .analytics.sink import AnalyticsSink
    from .pipeline.build import run_from_config
    from .sources.registry import load_texts, spec_from_config
    from .storage.writer import write_manifest
    from .writers.matrix import write_matrix_parquet
    from .writers.registry import get_ranking_writer

    cfg = _load_yaml(args.config)
    if args.out_dir:
        cfg["run"] = {**(cfg.get("run") or {}), "out_dir": args.out_dir}
    if args.top_k is not None:
        cfg["ranking"] = {**(cfg.get("ranking") or {}), "top_k": args.top_k}
    if args.mode:
        cfg["execution"] = {**(cfg.get("execution") or {}), "mode": args.mode}

    run_id = resolve_run_id(cfg)
    out_dir = resolve_out_dir(cfg, run_id)
    setup_logging(out_dir=out_dir, run_id=run_id)
    start_ms = int(time.time() * 1000)

    out_cfg = cfg.get("output") or {}
    writer = get_ranking_writer(out_cfg.get("ranking_format", "csv"))

    spec = spec_from_config(cfg)
    texts = load_texts(spec)

    sink = AnalyticsSink(out_dir=out_dir, run_id=run_id)
    result = run_from_config(cfg, texts, sink=sink)

    ranking_path = writer.write(result.ranking, os.path.join(out_dir, "ranking", f"{run_id}.{writer.extension}"))
    log.info(f"Wrote ranking terms={len(result.ranking)} path={ranking_path}")

    matrix_path = None
    if out_cfg.get("write_matrix", False):
        matrix_path = write_matrix_parquet(result.pruned, os.path.join(out_dir, "matrix", f"{run_id}.parquet"))
        log.info(f"Wrote pruned matrix path={matrix_path}")

    events_path = sink.flush()

    write_manifest(os.path.join(out_dir, "manifests", f"{run_id}.json"), {
        "run_id": run_id,
        "version": __version__,
        "config_path": os.path.abspath(args.config),
        "source": spec.name,
        "dataset": spec.dataset,
        "documents": result.dtm.n_docs,
        "terms_before_pruning": result.dtm.n_terms,
        "terms_after_pruning": result.pruned.n_terms,
        "ranked_terms": len(result.ranking),
        "grand_total": result.pruned.total(),
        "outputs": {"ranking": ranking_path, "matrix": matrix_path, "analytics": events_path},
        "start_time_ms": start_ms,
        "end_time_ms": int(time.time() * 1000),
    })

    show = args.show if args.show is not None else int(out_cfg.get("display_top", 20))
    for i, tf in enumerate(result.ranking[:show], start=1):
        print(f"{i:>4}  {tf.term:<24} {tf.total_count:>8} {tf.document_count:>8}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="review-terms")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    pr = sub.add_parser("rank", help="Rank the most frequent terms of a review corpus")
    pr.add_argument("--config", required=True)
    pr.add_argument("--top-k", type=int, default=None, help="Keep only the first K ranked terms")
    pr.add_argument("--mode", choices=["local", "threads", "processes", "ray"], default=None)
    pr.add_argument("--out-dir", default=None, help="Override run.out_dir")
    pr.add_argument("--show", type=int, default=None, metavar="N", help="Print the first N terms (default: output.display_top or 20)")

    pd = sub.add_parser("config-diff", help="Diff two YAML configs")
    pd.add_argument("--a", required=True)
    pd.add_argument("--b", required=True)

    args = p.parse_args(argv)

    try:
        if args.cmd == "config-diff":
            from .tools.config_diff import main as config_diff_main
            print(config_diff_main(args.a, args.b))
            return 0
        return rank_command(args)
    except ReviewTermsError as e:
        log.error(f"{type(e).__name__}: {e}")
        return 2
