"""Diagnose a configured source before running the pipeline.

Checks the file exists, the text field is present, and how many rows are
empty or would be coerced.

Usage:
    python scripts/diagnose_source.py configs/rank.yaml
"""

from __future__ import annotations
import sys

from review_terms.errors import ReviewTermsError
from review_terms.policies.loader import load_yaml
from review_terms.sources.registry import make_source, spec_from_config


def diagnose_source(config_path: str) -> int:
    print(f"\n{'='*70}")
    print(f"Source Diagnosis: {config_path}")
    print(f"{'='*70}\n")

    try:
        spec = spec_from_config(load_yaml(config_path))
        src = make_source(spec)
        print(f"Kind:       {spec.kind}")
        print(f"Dataset:    {spec.dataset}")
        print(f"Text field: {spec.text_field}")
        values = src.read_column()
    except (ReviewTermsError, OSError) as e:
        print(f"[FAIL] {e}")
        return 1

    non_str = sum(1 for v in values if not isinstance(v, str))
    blank = sum(1 for v in values if isinstance(v, str) and not v.strip())
    print(f"Rows:       {len(values):,}")
    print(f"Non-string: {non_str:,} (policy: {spec.on_invalid})")
    print(f"Blank text: {blank:,}")
    if not values:
        print("[FAIL] Source yields zero documents")
        return 1
    print("[OK] Source looks usable")
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/diagnose_source.py <config.yaml>")
        sys.exit(1)
    sys.exit(diagnose_source(sys.argv[1]))
