# apps/cli/run.py
"""
CLI entry point for benchmarking the resolver.

This script:
  1) Validates the word lists (counts + SHA, checks allow-list ⊆ dictionary).
  2) Picks the hidden answers to play (all allow-list words, or a seeded sample).
  3) Plays each one with a fresh session and a live progress indicator, then writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, word-list hashes, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordle_resolver.config import CONFIG
from wordle_resolver.datasets import load_word_list, pretty_summary, validate_wordlists
from wordle_resolver.harness import WORDLE_MAX_TURNS, run_case, summarize
from wordle_resolver.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Wordle resolver: benchmark against hidden answers")
    ap.add_argument("--N", type=int, default=CONFIG["word_length"], help="word length")
    ap.add_argument("--allow", default=CONFIG["allow_list_path"],
                    help="allow-list (plausible answers; also the pool of hidden answers)")
    ap.add_argument("--dictionary", default=CONFIG["dictionary_path"],
                    help="dictionary of legal guesses (should be a superset of the allow-list)")
    ap.add_argument("--sample", type=int, help="play only this many answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["bar", "plain", "off"],
        default="bar",
        help="Show run progress (tqdm bar, plain text, or nothing).",
    )
    ap.add_argument("-q", "--quiet", action="store_true", help="only log warnings and errors")
    args = ap.parse_args(argv)

    # Sessions log every round at INFO; a batch only surfaces warnings.
    logging.basicConfig(level=logging.ERROR if args.quiet else logging.WARNING,
                        format=CONFIG["log_format"], stream=sys.stderr)

    # 1) Validate word lists
    rep = validate_wordlists(args.N, args.allow, args.dictionary)
    print(pretty_summary(rep))

    allow = load_word_list(args.allow, args.N)
    dictionary = load_word_list(args.dictionary, args.N)
    if not allow or not dictionary:
        print("Word lists are empty, nothing to play.", file=sys.stderr)
        return 1

    # 2) Choose cases
    cases = list(allow)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]
    total = len(cases)

    # 3) Play with progress
    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if args.progress == "bar" else cases
    results = []
    start = time.time()
    last_print = 0.0
    for idx, ans in enumerate(iterator, 1):
        results.append(run_case(ans, allow_list=allow, dictionary=dictionary, N=args.N))

        if args.progress == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                sys.stderr.write(
                    f"\r[{idx}/{total}] {100.0 * idx / total:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now
    if args.progress == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 4) Outputs
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS, N=args.N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "summary": summary,
    }, str(manifest_path))

    print(f"Solved {summary['solved']}/{summary['cases']} "
          f"({100.0 * summary['success_rate']:.1f}%), mean guesses {summary['mean_guesses']:.3f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
