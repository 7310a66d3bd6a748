# apps/cli/run.py
"""
CLI entry point for batch evaluation of a solver over an answer list.

This script:
  1) Validates the resources (prints counts + SHA, ensures answers ⊆ dictionary).
  2) Loads them (strictly) and instantiates the requested solver.
  3) Plays every answer (or the first --limit) with a progress bar and writes:
       - CSV:  per-case results + guess/mask history columns
       - JSON: manifest with config, resource hashes, git commit, summary

Usage:
    python -m apps.cli.run --solver minimax --limit 100
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from wordle_solve.datasets import (SAMPLE_ANSWERS, SAMPLE_DICTIONARY, load_answers,
                                   load_dictionary, pretty_summary, validate_wordlists)
from wordle_solve.harness import WORDLE_MAX_TURNS, run_batch, summarize, write_csv, write_manifest
from wordle_solve.harness.io import git_commit_or_unknown, timestamp_id
from wordle_solve.solvers import create_solver, get_solver_ids


def main(argv=None):
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    # Build help text showing currently registered solver IDs
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordle-solve: evaluate a solver over an answer list")
    ap.add_argument("--solver", default="naive", choices=get_solver_ids(),
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--dictionary", default=str(SAMPLE_DICTIONARY),
                    help="path to the dictionary (`word frequency` per line)")
    ap.add_argument("--answers", default=str(SAMPLE_ANSWERS),
                    help="path to the answers list (one word per line)")
    ap.add_argument("--limit", type=int, help="play only the first N answers")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS,
                    help="turn budget per game")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show run progress (auto=bar when stderr is a terminal)."
    )
    ap.add_argument("--strict", action="store_true",
                    help="exit with an error if any answer is not solved")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate resources and print a one-liner summary (counts, SHAs, subset check)
    rep = validate_wordlists(args.dictionary, args.answers)
    print(pretty_summary(rep))

    # 2) Load into memory; malformed lines are fatal here
    dictionary = load_dictionary(args.dictionary)
    answers = load_answers(args.answers)

    # 3) Instantiate solver by id
    solver = create_solver(args.solver, dictionary)

    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())

    # 4) Play the batch
    results = run_batch(solver, answers, max_turns=args.max_turns, allowed=dictionary,
                        limit=args.limit, progress=progress)
    summary = summarize(results)

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "solver_version": solver.version,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Solved {summary['solved']}/{summary['games']} "
          f"(mean guesses: {summary['mean_guesses'] or 0:.3f})")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")

    if args.strict and summary["failed"]:
        ap.exit(1, f"Failed to guess: {', '.join(summary['failed'])}\n")


if __name__ == "__main__":
    main()
