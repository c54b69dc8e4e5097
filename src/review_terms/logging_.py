"""Logging utilities.

We use Python's standard `logging` module with a compact structured format.

- Logs go to: `<log_dir>/<run_id>.log` (defaults to `<out_dir>/logs`)
- Also prints concise progress to the console.
"""

from __future__ import annotations
import logging
import os
from typing import List, Optional

_HANDLERS: List[logging.Handler] = []


def setup_logging(out_dir: str, run_id: str, log_dir: Optional[str] = None, level: int = logging.INFO) -> str:
    """
    Setup logging configuration and return the log file path.

    Args:
        out_dir: Output directory of the run
        run_id: Run identifier (names the log file)
        log_dir: Log directory (if None, uses out_dir/logs)
        level: Root log level
    """
    if log_dir is None:
        log_dir = os.path.join(out_dir, "logs")

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, f"{run_id}.log")

    root = logging.getLogger()
    root.setLevel(level)

    # Repeated runs in one process (tests, notebooks) must not stack handlers
    for h in _HANDLERS:
        root.removeHandler(h)
        h.close()
    _HANDLERS.clear()

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    # File
    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    root.addHandler(ch)

    _HANDLERS.extend([fh, ch])
    return log_path
