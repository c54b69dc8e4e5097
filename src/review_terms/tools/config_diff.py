"""Config diff tool.

Compares two YAML run configs (or stopword files) and prints a structured diff.

Usage:
`review-terms config-diff --a configs/rank.yaml --b configs/rank_strict.yaml`
"""

from __future__ import annotations
from typing import Any, List, Tuple
from ..policies.loader import load_yaml


def diff(a: Any, b: Any, prefix: str = "") -> List[Tuple[str, str, Any, Any]]:
    """Return list of (path, change_type, old, new)."""
    out = []
    if isinstance(a, dict) and isinstance(b, dict):
        for k in sorted(set(a) | set(b), key=str):
            pfx = f"{prefix}.{k}" if prefix else str(k)
            if k not in a:
                out.append((pfx, "added", None, b[k]))
            elif k not in b:
                out.append((pfx, "removed", a[k], None))
            else:
                out.extend(diff(a[k], b[k], pfx))
    elif a != b:
        out.append((prefix, "changed", a, b))
    return out


def render(diff_rows: List[Tuple[str, str, Any, Any]]) -> str:
    lines = []
    for path, typ, old, new in diff_rows:
        if typ == "added":
            lines.append(f"+ {path}: {new}")
        elif typ == "removed":
            lines.append(f"- {path}: {old}")
        else:
            lines.append(f"~ {path}: {old} -> {new}")
    return "\n".join(lines)


def main(a_path: str, b_path: str) -> str:
    return render(diff(load_yaml(a_path), load_yaml(b_path)))
