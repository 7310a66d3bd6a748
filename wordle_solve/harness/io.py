"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- summarize:      solve-rate and guess-count distribution of a batch.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, answer, success, guesses, time_ms,
      guess_1, mask_1, guess_2, mask_2, ..., guess_max_turns, mask_max_turns

    Args:
      results  : list of dicts returned by the harness per game.
      path     : output CSV path.
      max_turns: turn budget the batch was played with.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"mask_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, mask = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"mask_{i}"] = mask
                else:
                    row[f"guess_{i}"] = ""
                    row[f"mask_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, paths, limit, outdir)
      - wordlists: output of datasets.validate_wordlists(...)
      - summary: output of summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """
    {"games": 12, "solved": 12, "failed": [], "mean_guesses": 2.75,
     "distribution": {"1": 1, "2": 2, "3": 9}}

    mean_guesses covers solved games only (None when nothing was solved).
    """
    solved = [r["guesses"] for r in results if r["success"]]
    dist = Counter(solved)
    return {
        "games": len(results),
        "solved": len(solved),
        "failed": [str(r["answer"]) for r in results if not r["success"]],
        "mean_guesses": (sum(solved) / len(solved)) if solved else None,
        "distribution": {str(n): dist[n] for n in sorted(dist)},
    }


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
