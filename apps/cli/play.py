# apps/cli/play.py
"""
Interactive console resolver.

Each round prints the suggested word (`< crane`) and reads the game's feedback
for it (`> bybgg`):
  b = absent, y = misplaced (yellow), g = confirmed (green)

An empty line (or EOF) quits. Bad feedback is rejected without touching the
session and the same word is asked about again.

Usage:
    python -m apps.cli.play --allow data/allow_word.txt --dictionary data/all_word.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from wordle_resolver.config import CONFIG
from wordle_resolver.datasets import load_word_list
from wordle_resolver.engine import (InvalidFeedbackCode, NoCandidatesRemain,
                                    WordLengthMismatch)
from wordle_resolver.solvers import SolverSession


def play(session: SolverSession,
         input_fn: Callable[[str], str] = input,
         output: Callable[[str], None] = print) -> int:
    """
    Drive one game on the console. Returns a process exit code:
      0 = solved or the user quit, 1 = the feedback became contradictory.
    """
    while True:
        try:
            word, solved = session.next_guess()
        except NoCandidatesRemain as e:
            output(f"! {e}")
            return 1

        output(f"< {word}")
        if solved:
            return 0

        while True:
            try:
                raw = input_fn("> ")
            except EOFError:
                return 0
            feedback = raw.strip().lower()
            if not feedback:
                return 0
            try:
                session.apply_feedback(word, feedback)
            except (InvalidFeedbackCode, WordLengthMismatch) as e:
                output(f"! {e}; enter {session.n} letters of b/y/g")
                continue
            break


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Wordle resolver: interactive console")
    ap.add_argument("--allow", default=CONFIG["allow_list_path"],
                    help="plausible answers, one word per line")
    ap.add_argument("--dictionary", default=CONFIG["dictionary_path"],
                    help="all legal guesses, one word per line")
    ap.add_argument("--N", type=int, default=CONFIG["word_length"], help="word length")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="log the histogram, deductions and remaining candidates")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=CONFIG["log_format"],
        stream=sys.stderr,
    )

    allow = load_word_list(args.allow, args.N)
    dictionary = load_word_list(args.dictionary, args.N)
    session = SolverSession(allow, dictionary, n=args.N)
    return play(session)


if __name__ == "__main__":
    sys.exit(main())
