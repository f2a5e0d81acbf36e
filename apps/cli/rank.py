# apps/cli/rank.py
"""
CLI entry point for ranking guesses by median elimination.

This script:
  1) Validates and loads the word lists (answers + guess dictionary).
  2) Parses optional user constraints and pre-filters both lists with them.
  3) Scores every dictionary word in parallel and prints the top candidates.
  4) Optionally writes:
       - CSV:  ranked candidates
       - JSON: manifest with config, wordlist hashes, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from packages.datasets import load_corpus, pretty_summary, validate_wordlists
from packages.elimination import get_scorer_ids
from packages.engine import WORD_LENGTH, WordleRankError, filter_candidates, parse_user_constraints
from packages.harness import TOP_K, format_report, rank, run
from packages.harness.core import BACKENDS
from packages.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest

logger = logging.getLogger("wordle_rank")


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer; got {value}")
    return n


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more; got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Rank guesses by the median number of possible answers they eliminate")
    ap.add_argument("--answers", default="possible_answers.json",
                    help="path to the answer set (JSON array or one word per line)")
    ap.add_argument("--dictionary", default="possible_guesses.json",
                    help="path to extra allowed guesses (answers are always included)")
    ap.add_argument("--without-letters", default="",
                    help="letters to exclude, e.g. --without-letters abc")
    ap.add_argument("--with-letters-at-position", default="",
                    help="letters that must be at a zero-based position, e.g. a=1,b=2")
    ap.add_argument("--with-letters-not-at-position", default="",
                    help="letters that must appear but not at a position, e.g. a=1,b=2")
    ap.add_argument("--strategy", choices=get_scorer_ids(), default="indexed",
                    help="elimination scorer")
    ap.add_argument("--workers", type=_positive_int,
                    help="parallel workers (default: number of CPUs)")
    ap.add_argument("--backend", choices=list(BACKENDS), default="process")
    ap.add_argument("--drop-remainder", action="store_true",
                    help="legacy chunking: skip the last len(dictionary) %% workers guesses")
    ap.add_argument("--sample", type=_non_negative_int,
                    help="score only the first K dictionary words (quick experiments)")
    ap.add_argument("--top", type=_non_negative_int, default=TOP_K, help="number of candidates to print")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar (auto=bar when stderr is a terminal)")
    ap.add_argument("--outdir", help="if set, write ranked CSV + manifest here")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, load and filter the corpus, score, rank, and report.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        # 1) Load lists (fail fast on malformed input)
        corpus = load_corpus(args.answers, args.dictionary)

        # 2) User constraints
        constraints = parse_user_constraints(
            args.without_letters,
            args.with_letters_at_position,
            args.with_letters_not_at_position,
        )
    except WordleRankError as e:
        raise SystemExit(f"error: {e}")

    if constraints:
        print("Running Wordle solver with the following user-defined constraints:\n")
        for c in constraints:
            print(f"\t * {c.describe()}")
        print()

    answers = filter_candidates(corpus.answers, constraints)
    dictionary = filter_candidates(corpus.dictionary, constraints)
    if args.sample is not None:
        dictionary = dictionary[: args.sample]
    logger.info("%d answers and %d guesses remain after user constraints",
                len(answers), len(dictionary))
    if not answers:
        raise SystemExit("error: no possible answers satisfy the given constraints")

    # 3) Score
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"

    try:
        results = run(
            dictionary, answers,
            workers=args.workers,
            strategy=args.strategy,
            backend=args.backend,
            drop_remainder=args.drop_remainder,
            progress=(mode == "bar"),
        )
    except WordleRankError as e:
        raise SystemExit(f"error: {e}")

    # 4) Rank and report
    ranked = rank(results, answers, top=args.top)
    print("\n" + format_report(ranked))

    if args.outdir:
        rep = validate_wordlists(WORD_LENGTH, args.answers, args.dictionary)
        logger.info(pretty_summary(rep))
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = write_csv(ranked, str(outdir / f"rank_{run_id}.csv"))
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlists": rep,
            "constraints": [c.describe() for c in constraints],
            "num_answers": len(answers),
            "num_scored": len(results),
        }
        manifest_path = write_manifest(manifest, str(outdir / f"rank_{run_id}_manifest.json"))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
