"""
I/O utilities for ranking runs.

Responsibilities:
- write_csv:      ranked candidates as a tidy CSV (one row per candidate).
- write_manifest: dump a JSON manifest with config, corpus report and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List

from .ranking import RankedCandidate


def write_csv(ranked: List[RankedCandidate], path: str) -> str:
    """
    Serialize ranked candidates to CSV.

    Schema (columns): rank, word, score, valid

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=["rank", "word", "score", "valid"])
        w.writeheader()
        for i, c in enumerate(ranked, start=1):
            w.writerow({"rank": i, "word": c.word, "score": c.score, "valid": c.valid})

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and corpus validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (strategy, workers, paths, user constraints, ...)
      - wordlists: output of datasets.validate_wordlists(...)
      - num_scored: number of guesses scored in this run
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
